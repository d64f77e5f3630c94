"""Codec exceptions.

The codec never logs or recovers from these itself; they are raised to the
message-dispatch layer, which decides whether to drop, report, or escalate.
"""

from __future__ import annotations

from typing import Optional


class CodecError(Exception):
    """Base class for all errors raised by the wire codec."""


class SignatureError(CodecError):
    """The signature on a received message did not validate."""

    def __init__(self, message: str = "a message had an invalid signature"):
        super().__init__(message)


class MalformedEnvelope(CodecError):
    """A received message could not be split or parsed.

    :ivar field: which part of the envelope failed: ``delimiter``,
        ``frames``, or one of the four JSON payload fields.
    """

    def __init__(self, field: str, message: Optional[str] = None):
        if message is None:
            message = f"malformed {field}"
        else:
            message = f"malformed {field}: {message}"
        super().__init__(message)
        self.field = field


class EncodeError(CodecError):
    """An outbound message field could not be serialized."""

    def __init__(self, field: str, message: Optional[str] = None):
        if message is None:
            message = f"cannot encode {field}"
        else:
            message = f"cannot encode {field}: {message}"
        super().__init__(message)
        self.field = field
