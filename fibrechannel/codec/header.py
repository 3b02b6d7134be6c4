"""
Fibre Channel header encoding and decoding.

Header wire format (24 bytes, multi-byte fields big-endian)::

    offset  size  field
    0       1     R_CTL
    1       3     D_ID
    4       1     CS_CTL/Priority
    5       3     S_ID
    8       1     TYPE
    9       3     F_CTL
    12      1     SEQ_ID
    13      1     DF_CTL
    14      2     SEQ_CNT
    16      2     OX_ID
    18      2     RX_ID
    20      4     Parameter

The header has no reserved fields, so decoding validates length only.
"""

from __future__ import annotations

import logging
import struct
from typing import Final

from fibrechannel.exceptions import LengthMismatchError
from fibrechannel.models.frames import Header
from fibrechannel.protocol.constants import FrameConstants

logger = logging.getLogger(__name__)

_HEADER_STRUCT: Final[struct.Struct] = struct.Struct(">B3sB3sB3sBBHHHI")


class HeaderCodec:
    """
    Fibre Channel header codec.

    Stateless; a single instance can be shared between threads.

    Example:
        >>> codec = HeaderCodec()
        >>> data = codec.encode(Header(sequence_count=256))
        >>> len(data)
        24
        >>> codec.decode(data).sequence_count
        256
    """

    def encode(self, header: Header) -> bytes:
        """
        Encode a header into its 24-byte wire form.

        Never fails for a valid Header model.
        """
        return _HEADER_STRUCT.pack(
            header.routing_control,
            header.destination_id,
            header.priority,
            header.source_id,
            header.type,
            header.frame_control,
            header.sequence_id,
            header.data_field_control,
            header.sequence_count,
            header.originator_exchange_id,
            header.responder_exchange_id,
            header.parameter,
        )

    def decode(self, buffer: bytes | bytearray | memoryview) -> Header:
        """
        Decode a header from exactly 24 bytes.

        Args:
            buffer: Header bytes.

        Returns:
            Decoded Header.

        Raises:
            LengthMismatchError: If buffer is not exactly 24 bytes long.
        """
        if len(buffer) != FrameConstants.HEADER_LENGTH:
            logger.debug("Rejecting header: %d bytes", len(buffer))
            raise LengthMismatchError(
                "Header must be exactly 24 bytes",
                expected=FrameConstants.HEADER_LENGTH,
                received=len(buffer),
            )

        (
            routing_control,
            destination_id,
            priority,
            source_id,
            type_,
            frame_control,
            sequence_id,
            data_field_control,
            sequence_count,
            originator_exchange_id,
            responder_exchange_id,
            parameter,
        ) = _HEADER_STRUCT.unpack(buffer)

        return Header(
            routing_control=routing_control,
            destination_id=destination_id,
            priority=priority,
            source_id=source_id,
            type=type_,
            frame_control=frame_control,
            sequence_id=sequence_id,
            data_field_control=data_field_control,
            sequence_count=sequence_count,
            originator_exchange_id=originator_exchange_id,
            responder_exchange_id=responder_exchange_id,
            parameter=parameter,
        )


# Module-level convenience instance
DEFAULT_HEADER_CODEC: HeaderCodec = HeaderCodec()
"""Default HeaderCodec instance for convenience."""


def encode_header(header: Header) -> bytes:
    """Encode a header using the default header codec."""
    return DEFAULT_HEADER_CODEC.encode(header)


def decode_header(buffer: bytes | bytearray | memoryview) -> Header:
    """Decode a header using the default header codec."""
    return DEFAULT_HEADER_CODEC.decode(buffer)
