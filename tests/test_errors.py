"""Tests for unibody.errors module."""

import pytest
from unibody.errors import (
    UnibodyError,
    MaterializationError,
    TransportIOError,
    DecodeError,
    UnsupportedRepresentationError,
    ReleaseError,
)


class TestErrorHierarchy:
    """Tests for error class hierarchy."""

    def test_unibody_error_is_exception(self):
        """Test UnibodyError inherits from Exception."""
        assert issubclass(UnibodyError, Exception)

    def test_materialization_errors_share_base(self):
        """Test the three materialization failures share one base."""
        for cls in (TransportIOError, DecodeError, UnsupportedRepresentationError):
            assert issubclass(cls, MaterializationError)
            assert issubclass(cls, UnibodyError)

    def test_transport_io_error_is_os_error(self):
        """Test TransportIOError can be caught as OSError."""
        assert issubclass(TransportIOError, OSError)

    def test_decode_error_is_value_error(self):
        """Test DecodeError can be caught as ValueError."""
        assert issubclass(DecodeError, ValueError)

    def test_release_error_is_not_materialization_error(self):
        """Test ReleaseError is distinct from materialization failures."""
        assert issubclass(ReleaseError, UnibodyError)
        assert issubclass(ReleaseError, OSError)
        assert not issubclass(ReleaseError, MaterializationError)


class TestRetryable:
    """Tests for the retryable flag."""

    def test_only_transport_errors_are_retryable(self):
        """Test transport failures are retryable, content failures are not."""
        assert TransportIOError("x").retryable is True
        assert DecodeError("x").retryable is False
        assert UnsupportedRepresentationError("x").retryable is False
        assert ReleaseError("x").retryable is False


class TestErrorContext:
    """Tests for error context attributes and messages."""

    def test_plain_message(self):
        """Test message without context is unchanged."""
        with pytest.raises(UnibodyError, match="^boom$"):
            raise UnibodyError("boom")

    def test_context_in_message(self):
        """Test representation and entity presence appear in the message."""
        err = DecodeError("bad json", representation="StructuredDocument", entity_present=True)
        assert err.representation == "StructuredDocument"
        assert err.entity_present is True
        assert str(err) == "bad json (representation=StructuredDocument, entity_present=True)"

    def test_os_error_subclass_keeps_message(self):
        """Test OSError-based errors format like the others."""
        err = TransportIOError("reset", representation="Text", entity_present=True)
        assert str(err) == "reset (representation=Text, entity_present=True)"
        assert err.message == "reset"

    def test_release_error_raised_with_message(self):
        """Test ReleaseError can be raised with message."""
        with pytest.raises(ReleaseError, match="release failed"):
            raise ReleaseError("release failed", representation="ByteStream")
