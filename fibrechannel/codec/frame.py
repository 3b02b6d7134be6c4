"""
Fibre Channel frame encoding and decoding.

Frame wire format::

    offset      size  field
    0           3     reserved (zero)
    3           1     SOF
    4           24    header
    28          N     payload, zero padded so N is a multiple of 4
    28+N        4     CRC32 over header and padded payload, big-endian
    32+N        1     EOF
    33+N        3     reserved (zero)

Decoding validates, in order: minimum length, the reserved delimiter
bytes, payload alignment and the CRC. No field is read from a buffer that
fails any of these checks.

Decoded payloads keep their padding: the decoder cannot tell pad bytes from
payload bytes, so a 3-byte payload encodes and decodes back as 4 bytes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from fibrechannel.codec.header import DEFAULT_HEADER_CODEC, HeaderCodec
from fibrechannel.exceptions import (
    BufferTooShortError,
    InvalidCRCError,
    InvalidFrameError,
    MissingHeaderError,
)
from fibrechannel.models.frames import Frame
from fibrechannel.protocol.checksums import calculate_crc, decode_crc, encode_crc, verify_crc
from fibrechannel.protocol.constants import FrameConstants

logger = logging.getLogger(__name__)

_RESERVED = bytes(3)


class FrameParseResult(Enum):
    """
    Result codes for non-raising frame parsing.

    These indicate the outcome of attempting to parse a frame from
    a byte buffer.
    """

    SUCCESS = auto()
    """Frame was successfully parsed and validated."""

    EMPTY_BUFFER = auto()
    """Buffer is empty, no data to parse."""

    INCOMPLETE_FRAME = auto()
    """Buffer is shorter than the smallest frame, more bytes needed."""

    INVALID_FORMAT = auto()
    """Reserved bytes are set or the payload is not word aligned."""

    INVALID_CHECKSUM = auto()
    """Frame CRC validation failed (data corruption)."""


@dataclass(frozen=True)
class FrameParseError:
    """
    Details about a frame parsing failure.

    Provides diagnostic information when parsing fails.
    """

    result: FrameParseResult
    message: str
    position: int = 0


class FrameCodec:
    """
    Fibre Channel frame codec.

    Encodes Frame models to wire bytes and decodes wire bytes back, with
    CRC generation and verification. The codec is stateless and can be
    shared between threads.

    Example:
        >>> codec = FrameCodec()
        >>> data = codec.encode(Frame(sof=SOF.SOF_I3, header=Header(), payload=b"\\x01\\x02\\x03", eof=EOF.EOF_T))
        >>> len(data)
        40
        >>> codec.decode(data).payload
        b'\\x01\\x02\\x03\\x00'
    """

    def __init__(self, header_codec: HeaderCodec = DEFAULT_HEADER_CODEC) -> None:
        """
        Initialize the frame codec.

        Args:
            header_codec: Codec used for the 24-byte header region.
        """
        self._header_codec = header_codec

    def encode(self, frame: Frame) -> bytes:
        """
        Encode a frame into wire bytes.

        The payload is zero padded to the next word boundary and the CRC is
        computed over the header and the padded payload.

        Args:
            frame: Frame to encode.

        Returns:
            Encoded frame, frame.encoded_length bytes long.

        Raises:
            MissingHeaderError: If frame.header is None.
        """
        if frame.header is None:
            raise MissingHeaderError()

        header_offset = FrameConstants.HEADER_OFFSET
        payload_offset = FrameConstants.PAYLOAD_OFFSET
        crc_offset = payload_offset + frame.padded_payload_length

        buffer = bytearray(frame.encoded_length)
        buffer[FrameConstants.SOF_OFFSET] = frame.sof
        buffer[header_offset:payload_offset] = self._header_codec.encode(frame.header)
        buffer[payload_offset : payload_offset + len(frame.payload)] = frame.payload
        buffer[crc_offset : crc_offset + FrameConstants.CRC_LENGTH] = encode_crc(
            calculate_crc(memoryview(buffer)[header_offset:crc_offset])
        )
        buffer[crc_offset + FrameConstants.CRC_LENGTH] = frame.eof

        return bytes(buffer)

    def decode(self, buffer: bytes | bytearray | memoryview) -> Frame:
        """
        Decode a frame from wire bytes.

        The whole buffer is taken to be one frame: the CRC and EOF word are
        located relative to its end.

        Args:
            buffer: Encoded frame.

        Returns:
            Decoded Frame. Its payload includes any padding bytes.

        Raises:
            BufferTooShortError: If buffer is shorter than 36 bytes.
            InvalidFrameError: If a reserved delimiter byte is non-zero or
                the payload length is not a multiple of 4.
            InvalidCRCError: If the stored CRC does not match the contents.
        """
        length = len(buffer)
        if length < FrameConstants.MIN_FRAME_LENGTH:
            logger.debug("Rejecting frame: %d bytes is below minimum", length)
            raise BufferTooShortError(
                "Buffer too small for frame",
                expected=FrameConstants.MIN_FRAME_LENGTH,
                received=length,
            )

        view = memoryview(buffer)
        payload_offset = FrameConstants.PAYLOAD_OFFSET
        crc_offset = length - FrameConstants.EOF_FIELD_LENGTH - FrameConstants.CRC_LENGTH
        eof_offset = length - FrameConstants.EOF_FIELD_LENGTH

        if view[: FrameConstants.SOF_OFFSET] != _RESERVED:
            logger.debug("Rejecting frame: SOF reserved bytes %s", bytes(view[:3]).hex())
            raise InvalidFrameError("SOF reserved bytes are not zero", offset=0)

        if view[eof_offset + 1 :] != _RESERVED:
            logger.debug("Rejecting frame: EOF reserved bytes %s", bytes(view[eof_offset + 1 :]).hex())
            raise InvalidFrameError("EOF reserved bytes are not zero", offset=eof_offset + 1)

        payload_length = crc_offset - payload_offset
        if payload_length % FrameConstants.WORD_SIZE:
            logger.debug("Rejecting frame: payload length %d not word aligned", payload_length)
            raise InvalidFrameError(
                f"Payload length {payload_length} is not a multiple of {FrameConstants.WORD_SIZE}",
                offset=payload_offset,
            )

        try:
            verify_crc(
                view[FrameConstants.HEADER_OFFSET : crc_offset],
                decode_crc(view[crc_offset:eof_offset]),
            )
        except InvalidCRCError as e:
            logger.debug(
                "Rejecting frame: CRC mismatch (expected 0x%08X, got 0x%08X)",
                e.expected,
                e.received,
            )
            raise

        return Frame(
            sof=view[FrameConstants.SOF_OFFSET],
            header=self._header_codec.decode(view[FrameConstants.HEADER_OFFSET : payload_offset]),
            payload=bytes(view[payload_offset:crc_offset]),
            eof=view[eof_offset],
        )

    def parse(
        self,
        buffer: bytes | bytearray | memoryview,
    ) -> tuple[FrameParseResult, Frame | FrameParseError]:
        """
        Decode a frame, reporting failure as a result code.

        Args:
            buffer: Encoded frame.

        Returns:
            Tuple of (result, frame_or_error):
            - On success: (SUCCESS, Frame)
            - On failure: (error_code, FrameParseError)
        """
        if not buffer:
            return FrameParseResult.EMPTY_BUFFER, FrameParseError(
                result=FrameParseResult.EMPTY_BUFFER,
                message="Buffer is empty",
            )

        try:
            frame = self.decode(buffer)
        except BufferTooShortError as e:
            return FrameParseResult.INCOMPLETE_FRAME, FrameParseError(
                result=FrameParseResult.INCOMPLETE_FRAME,
                message=str(e),
                position=len(buffer),
            )
        except InvalidFrameError as e:
            return FrameParseResult.INVALID_FORMAT, FrameParseError(
                result=FrameParseResult.INVALID_FORMAT,
                message=str(e),
                position=e.offset or 0,
            )
        except InvalidCRCError as e:
            return FrameParseResult.INVALID_CHECKSUM, FrameParseError(
                result=FrameParseResult.INVALID_CHECKSUM,
                message=str(e),
                position=len(buffer) - FrameConstants.EOF_FIELD_LENGTH - FrameConstants.CRC_LENGTH,
            )

        return FrameParseResult.SUCCESS, frame


# Module-level convenience instance
DEFAULT_FRAME_CODEC: FrameCodec = FrameCodec()
"""Default FrameCodec instance for convenience."""


def encode_frame(frame: Frame) -> bytes:
    """Encode a frame using the default frame codec."""
    return DEFAULT_FRAME_CODEC.encode(frame)


def decode_frame(buffer: bytes | bytearray | memoryview) -> Frame:
    """Decode a frame using the default frame codec."""
    return DEFAULT_FRAME_CODEC.decode(buffer)


def parse_frame(
    buffer: bytes | bytearray | memoryview,
) -> tuple[FrameParseResult, Frame | FrameParseError]:
    """
    Parse a frame using the default frame codec.

    Convenience function that uses the module-level FrameCodec instance.

    Args:
        buffer: Input buffer containing frame data.

    Returns:
        Tuple of (result, frame_or_error).
    """
    return DEFAULT_FRAME_CODEC.parse(buffer)
