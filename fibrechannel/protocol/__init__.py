"""
Protocol layer for Fibre Channel and FIP frames.

This module contains the wire-format definitions shared by the codecs:
- SOF/EOF delimiter and R_CTL routing codes
- Frame layout constants and payload padding
- CRC32 calculation and validation
- FIP version, layout constants and operation classification
"""

from fibrechannel.protocol.checksums import (
    calculate_crc,
    decode_crc,
    encode_crc,
    verify_crc,
)
from fibrechannel.protocol.constants import EOF, SOF, FrameConstants, RoutingControl, padded_length
from fibrechannel.protocol.fip_constants import (
    FIP_VERSION,
    VENDOR_SPECIFIC_RANGE,
    FipConstants,
    Operation,
    parse_operation,
)

__all__ = [
    # Constants
    "SOF",
    "EOF",
    "RoutingControl",
    "FrameConstants",
    "padded_length",
    # Checksums
    "calculate_crc",
    "verify_crc",
    "encode_crc",
    "decode_crc",
    # FIP
    "FIP_VERSION",
    "VENDOR_SPECIFIC_RANGE",
    "FipConstants",
    "Operation",
    "parse_operation",
]
