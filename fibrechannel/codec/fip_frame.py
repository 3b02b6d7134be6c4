"""
FIP common header encoding and decoding.

See FipConstants for the 10-byte wire layout. Decoding reads the first 10
bytes of the buffer; anything after them (the descriptor list) is left to
the caller.
"""

from __future__ import annotations

import logging
import struct
from typing import Final

from fibrechannel.exceptions import BufferTooShortError, InvalidFipFrameError, InvalidVersionError
from fibrechannel.models.frames import FipFrame
from fibrechannel.protocol.fip_constants import FIP_VERSION, FipConstants

logger = logging.getLogger(__name__)

# version/reserved, reserved, protocol code, reserved, subcode,
# descriptor list length, flags byte 8, flags byte 9
_FIP_STRUCT: Final[struct.Struct] = struct.Struct(">BBHBBHBB")


class FipFrameCodec:
    """
    FIP common header codec.

    Stateless; a single instance can be shared between threads.

    Example:
        >>> codec = FipFrameCodec()
        >>> codec.encode(FipFrame(protocol_code=1, subcode=1, fcf=True)).hex()
        '10000001000100000001'
    """

    def encode(self, frame: FipFrame) -> bytes:
        """
        Encode a FIP header into its 10-byte wire form.

        Raises:
            InvalidVersionError: If frame.version is not FIP_VERSION.
        """
        if frame.version != FIP_VERSION:
            raise InvalidVersionError(frame.version, FIP_VERSION)

        flags8 = 0
        if frame.fpma:
            flags8 |= FipConstants.FLAG_FPMA
        if frame.spma:
            flags8 |= FipConstants.FLAG_SPMA

        flags9 = 0
        if frame.available_for_login:
            flags9 |= FipConstants.FLAG_AVAILABLE_FOR_LOGIN
        if frame.solicited:
            flags9 |= FipConstants.FLAG_SOLICITED
        if frame.fcf:
            flags9 |= FipConstants.FLAG_FCF

        return _FIP_STRUCT.pack(
            frame.version << FipConstants.VERSION_SHIFT,
            0,
            frame.protocol_code,
            0,
            frame.subcode,
            frame.descriptor_list_length,
            flags8,
            flags9,
        )

    def decode(self, buffer: bytes | bytearray | memoryview) -> FipFrame:
        """
        Decode a FIP header from the start of buffer.

        Args:
            buffer: At least 10 bytes; trailing bytes are ignored.

        Returns:
            Decoded FipFrame.

        Raises:
            BufferTooShortError: If buffer is shorter than 10 bytes.
            InvalidFipFrameError: If the version is unsupported or a
                reserved field is non-zero.
        """
        if len(buffer) < FipConstants.HEADER_LENGTH:
            logger.debug("Rejecting FIP frame: %d bytes is below minimum", len(buffer))
            raise BufferTooShortError(
                "Buffer too small for FIP frame",
                expected=FipConstants.HEADER_LENGTH,
                received=len(buffer),
            )

        (
            version_byte,
            reserved1,
            protocol_code,
            reserved4,
            subcode,
            descriptor_list_length,
            flags8,
            flags9,
        ) = _FIP_STRUCT.unpack_from(buffer)

        version = version_byte >> FipConstants.VERSION_SHIFT
        if version != FIP_VERSION:
            logger.debug("Rejecting FIP frame: version %d", version)
            raise InvalidFipFrameError(f"Unsupported FIP version {version}", offset=0)

        if version_byte & FipConstants.RESERVED_MASK_BYTE0 or reserved1:
            logger.debug("Rejecting FIP frame: reserved bits in bytes 0-1 set")
            raise InvalidFipFrameError("Reserved version bits are not zero", offset=0)

        if reserved4:
            logger.debug("Rejecting FIP frame: reserved byte 4 is 0x%02X", reserved4)
            raise InvalidFipFrameError("Reserved byte is not zero", offset=4)

        if flags8 & FipConstants.RESERVED_MASK_BYTE8:
            logger.debug("Rejecting FIP frame: reserved flag bits 0x%02X in byte 8", flags8)
            raise InvalidFipFrameError("Reserved flag bits are not zero", offset=8)

        if flags9 & FipConstants.RESERVED_MASK_BYTE9:
            logger.debug("Rejecting FIP frame: reserved flag bits 0x%02X in byte 9", flags9)
            raise InvalidFipFrameError("Reserved flag bits are not zero", offset=9)

        return FipFrame(
            version=version,
            protocol_code=protocol_code,
            subcode=subcode,
            descriptor_list_length=descriptor_list_length,
            fpma=bool(flags8 & FipConstants.FLAG_FPMA),
            spma=bool(flags8 & FipConstants.FLAG_SPMA),
            available_for_login=bool(flags9 & FipConstants.FLAG_AVAILABLE_FOR_LOGIN),
            solicited=bool(flags9 & FipConstants.FLAG_SOLICITED),
            fcf=bool(flags9 & FipConstants.FLAG_FCF),
        )


# Module-level convenience instance
DEFAULT_FIP_FRAME_CODEC: FipFrameCodec = FipFrameCodec()
"""Default FipFrameCodec instance for convenience."""


def encode_fip_frame(frame: FipFrame) -> bytes:
    """Encode a FIP header using the default FIP codec."""
    return DEFAULT_FIP_FRAME_CODEC.encode(frame)


def decode_fip_frame(buffer: bytes | bytearray | memoryview) -> FipFrame:
    """Decode a FIP header using the default FIP codec."""
    return DEFAULT_FIP_FRAME_CODEC.decode(buffer)
