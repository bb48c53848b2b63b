"""Tests for payload error classes."""

from liveactivity.errors import (
    BadPayloadException,
    EncodingFailure,
    LiveActivityException,
)


def test_exception_hierarchy() -> None:
    """Test that exception classes have correct inheritance."""
    base_exc = LiveActivityException("test message")
    assert isinstance(base_exc, Exception)
    assert str(base_exc) == "test message"

    encoding_exc = EncodingFailure("bad value")
    assert isinstance(encoding_exc, BadPayloadException)
    assert isinstance(encoding_exc, LiveActivityException)


def test_payload_exception_is_not_encoding_failure() -> None:
    """Test that the generic payload error is distinct from EncodingFailure."""
    assert not isinstance(BadPayloadException("x"), EncodingFailure)
