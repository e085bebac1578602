from __future__ import annotations


class UnibodyError(Exception):
    """Base error for Unibody."""

    retryable = False

    def __init__(
        self,
        message: str,
        representation: str | None = None,
        entity_present: bool | None = None,
    ) -> None:
        self.message = message
        self.representation = representation
        self.entity_present = entity_present
        super().__init__(self._format())

    def _format(self) -> str:
        context = []
        if self.representation is not None:
            context.append(f"representation={self.representation}")
        if self.entity_present is not None:
            context.append(f"entity_present={self.entity_present}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"

    def __str__(self) -> str:
        return self._format()


class MaterializationError(UnibodyError):
    """Raised when a transport response cannot be turned into a Response."""


class TransportIOError(MaterializationError, OSError):
    """Raised when reading or decompressing the entity fails."""

    retryable = True


class DecodeError(MaterializationError, ValueError):
    """Raised when the body cannot be decoded into the requested representation."""


class UnsupportedRepresentationError(MaterializationError):
    """Raised when no decoder is available for the requested representation."""


class ReleaseError(UnibodyError, OSError):
    """Raised when releasing a streamed response's connection fails."""
