"""
Unit tests for exception handling.
"""
import pytest

from sniax.core.exceptions import (
    SniaxError, ValidationError, NetworkError,
    ConfigurationError, CodecError, EncodeError, DecodeError
)


class TestExceptions:
    """Test exception classes."""

    def test_sniax_error(self):
        """Test SniaxError base exception."""
        error = SniaxError("Base error")
        assert str(error) == "Base error"
        assert isinstance(error, Exception)

    @pytest.mark.parametrize("error_class", [
        ValidationError, NetworkError, ConfigurationError, CodecError
    ])
    def test_subclasses(self, error_class):
        """Test that every error derives from SniaxError."""
        error = error_class("failed")
        assert str(error) == "failed"
        assert isinstance(error, SniaxError)

    def test_codec_errors(self):
        """Test the codec error branch."""
        assert issubclass(EncodeError, CodecError)
        assert issubclass(DecodeError, CodecError)
        assert not issubclass(DecodeError, EncodeError)

    def test_exception_with_cause(self):
        """Test exception with a cause."""
        cause = ValueError("Original error")
        try:
            raise DecodeError("Truncated message") from cause
        except CodecError as error:
            assert str(error) == "Truncated message"
            assert error.__cause__ == cause
