"""
Exception hierarchy for fibrechannel.

All exceptions inherit from FibreChannelError, providing a clean hierarchy
for error handling. The hierarchy separates three kinds of failure a caller
needs to tell apart:

1. Length errors (BufferTooShortError, LengthMismatchError): the buffer is
   truncated, more data may be on the way
2. Structural errors (InvalidFrameError, InvalidCRCError): the buffer is
   corrupt or is not a frame at all and should be dropped
3. Encode errors (MissingHeaderError, InvalidVersionError): the caller built
   a model that cannot be put on the wire
"""

from __future__ import annotations


class FibreChannelError(Exception):
    """
    Base exception for all fibrechannel errors.

    All library-specific exceptions inherit from this class, allowing
    callers to catch all fibrechannel errors with a single except clause.
    """

    pass


class ProtocolError(FibreChannelError):
    """
    Protocol-level error.

    Raised when a received buffer violates the wire format, such as:
    - Truncated frame
    - Non-zero reserved byte or bit
    - Checksum mismatch
    """

    pass


class FrameError(ProtocolError):
    """
    Frame structure error.

    Base class for errors in the layout of a frame or header buffer.
    """

    pass


class LengthError(FrameError):
    """
    Buffer length does not satisfy the format.

    Carries the length the format needed and the length received.
    """

    def __init__(
        self,
        message: str = "Invalid buffer length",
        *,
        expected: int | None = None,
        received: int | None = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.received = received

    def __str__(self) -> str:
        base = super().__str__()
        if self.expected is not None and self.received is not None:
            return f"{base} (need {self.expected} bytes, have {self.received})"
        return base


class BufferTooShortError(LengthError):
    """
    Buffer is shorter than the minimum length of the format.

    This usually means the frame was truncated or has not been fully
    received yet.
    """

    def __init__(
        self,
        message: str = "Buffer too short",
        *,
        expected: int | None = None,
        received: int | None = None,
    ) -> None:
        super().__init__(message, expected=expected, received=received)


class LengthMismatchError(LengthError):
    """
    Buffer is not exactly the fixed length of the format.

    Raised by header decoding, which accepts exactly 24 bytes.
    """

    def __init__(
        self,
        message: str = "Buffer length mismatch",
        *,
        expected: int | None = None,
        received: int | None = None,
    ) -> None:
        super().__init__(message, expected=expected, received=received)


class InvalidFrameError(FrameError):
    """
    Invalid frame contents.

    Raised when a correctly sized buffer violates the format:
    - A reserved byte or bit is non-zero
    - The payload does not end on a word (4 byte) boundary
    """

    def __init__(self, message: str = "Invalid frame", *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset

    def __str__(self) -> str:
        base = super().__str__()
        if self.offset is not None:
            return f"{base} (offset={self.offset})"
        return base


class InvalidFipFrameError(InvalidFrameError):
    """
    Invalid FIP frame contents.

    Raised when a FIP header carries an unsupported version or a non-zero
    reserved field.
    """

    def __init__(self, message: str = "Invalid FIP frame", *, offset: int | None = None) -> None:
        super().__init__(message, offset=offset)


class InvalidCRCError(ProtocolError):
    """
    CRC32 validation failure.

    Raised when a received frame's checksum doesn't match the calculated value.
    This typically indicates data corruption during transmission.
    """

    def __init__(
        self,
        message: str = "Invalid frame checksum",
        *,
        expected: int | None = None,
        received: int | None = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.received = received

    def __str__(self) -> str:
        base = super().__str__()
        if self.expected is not None and self.received is not None:
            return f"{base} (expected 0x{self.expected:08X}, got 0x{self.received:08X})"
        return base


class EncodeError(FibreChannelError):
    """
    A model cannot be encoded.

    Raised before any bytes are produced when the caller supplied an
    incomplete or unsupported model.
    """

    pass


class MissingHeaderError(EncodeError):
    """Frame has no header and cannot be encoded."""

    def __init__(self, message: str = "Frame has no header") -> None:
        super().__init__(message)


class InvalidVersionError(EncodeError):
    """
    FIP frame version is not the supported protocol version.
    """

    def __init__(self, version: int, supported: int) -> None:
        self.version = version
        self.supported = supported
        super().__init__(f"Unsupported FIP version {version} (supported: {supported})")
