from __future__ import annotations

from collections.abc import Iterable, Iterator


class Headers:
    """
    Ordered multi-map of response headers.

    Names keep the exact case the server sent and lookups are
    case-sensitive: use ``headers.get_first("Location")`` rather than
    ``headers.get_first("location")`` for a server that sent ``Location``.
    Duplicate names accumulate their values in arrival order.
    """

    def __init__(self, headers: Iterable[tuple[str, str]] | None = None) -> None:
        self._values: dict[str, list[str]] = {}
        self._order: list[tuple[str, str]] = []
        if headers:
            for name, value in headers:
                self.add(name, value)

    def add(self, name: str, value: str) -> None:
        self._values.setdefault(name, []).append(value)
        self._order.append((name, value))

    def get(self, name: str, default: list[str] | None = None) -> list[str] | None:
        values = self._values.get(name)
        if values is None:
            return default
        return list(values)

    def get_first(self, name: str, default: str | None = None) -> str | None:
        values = self._values.get(name)
        if not values:
            return default
        return values[0]

    def get_all(self, name: str) -> list[str]:
        return list(self._values.get(name, []))

    def items(self) -> list[tuple[str, str]]:
        """Flattened (name, value) pairs in arrival order."""
        return list(self._order)

    def keys(self) -> list[str]:
        return list(self._values)

    def __getitem__(self, name: str) -> list[str]:
        return list(self._values[name])

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headers):
            return self._order == other._order
        return NotImplemented

    def __repr__(self) -> str:
        return f"<Headers {self._order!r}>"
