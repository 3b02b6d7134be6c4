"""
FCoE Initialization Protocol (FIP) constants and operation codes.

FIP operations are identified by the pair (protocol code, subcode) carried
in the FIP header, as listed in FC-BB-5 Table 26.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

FIP_VERSION: Final[int] = 1
"""The only FIP version defined by FC-BB-5."""


class FipConstants:
    """
    FIP header layout constants.

    Wire layout (all multi-byte integers big-endian)::

        byte 0      version (high nibble), reserved (low nibble)
        byte 1      reserved
        bytes 2-3   protocol code
        byte 4      reserved
        byte 5      subcode
        bytes 6-7   descriptor list length (in 32-bit words)
        byte 8      FP (bit 7), SP (bit 6), reserved (bits 5-0)
        byte 9      reserved (bits 7-3), A (bit 2), S (bit 1), F (bit 0)
    """

    HEADER_LENGTH: Final[int] = 10
    """Length of the FIP common header."""

    VERSION_SHIFT: Final[int] = 4
    """Version is stored in the high nibble of byte 0."""

    # ===== Flag Bits =====

    FLAG_FPMA: Final[int] = 0x80
    """Byte 8: fabric provided MAC address supported."""

    FLAG_SPMA: Final[int] = 0x40
    """Byte 8: server provided MAC address supported."""

    FLAG_AVAILABLE_FOR_LOGIN: Final[int] = 0x04
    """Byte 9: FCF is available for FLOGI."""

    FLAG_SOLICITED: Final[int] = 0x02
    """Byte 9: advertisement was solicited."""

    FLAG_FCF: Final[int] = 0x01
    """Byte 9: frame was sent by an FCF."""

    # ===== Reserved Masks =====

    RESERVED_MASK_BYTE0: Final[int] = 0x0F
    RESERVED_MASK_BYTE8: Final[int] = 0x3F
    RESERVED_MASK_BYTE9: Final[int] = 0xF8


class Operation(IntEnum):
    """
    FIP operations.

    The values carry no wire meaning; they only name the
    (protocol code, subcode) pairs so callers need not compare both fields.
    """

    RESERVED = 0
    DISCOVERY_SOLICITATION = 1
    DISCOVERY_ADVERTISEMENT = 2
    VIRTUAL_LINK_INSTANTIATION_REQUEST = 3
    VIRTUAL_LINK_INSTANTIATION_REPLY = 4
    KEEP_ALIVE = 5
    CLEAR_VIRTUAL_LINKS = 6
    VLAN_REQUEST = 7
    VLAN_NOTIFICATION = 8
    VENDOR_SPECIFIC = 9


VENDOR_SPECIFIC_RANGE: Final[range] = range(0xFFF8, 0xFFFF)
"""Protocol codes reserved for vendor specific operations (0xFFF8-0xFFFE)."""

OPERATIONS: Final[dict[tuple[int, int], Operation]] = {
    (0x0001, 0x01): Operation.DISCOVERY_SOLICITATION,
    (0x0001, 0x02): Operation.DISCOVERY_ADVERTISEMENT,
    (0x0002, 0x01): Operation.VIRTUAL_LINK_INSTANTIATION_REQUEST,
    (0x0002, 0x02): Operation.VIRTUAL_LINK_INSTANTIATION_REPLY,
    (0x0003, 0x01): Operation.KEEP_ALIVE,
    (0x0003, 0x02): Operation.CLEAR_VIRTUAL_LINKS,
    (0x0004, 0x01): Operation.VLAN_REQUEST,
    (0x0004, 0x02): Operation.VLAN_NOTIFICATION,
}
"""(protocol code, subcode) pairs of the defined operations."""


def parse_operation(protocol_code: int, subcode: int) -> Operation:
    """
    Classify a FIP protocol code and subcode as an Operation.

    Never fails: unknown pairs classify as Operation.RESERVED.

    Example:
        >>> parse_operation(0x0001, 0x01)
        <Operation.DISCOVERY_SOLICITATION: 1>
        >>> parse_operation(0xFFF8, 0x01)
        <Operation.VENDOR_SPECIFIC: 9>
    """
    operation = OPERATIONS.get((protocol_code, subcode))
    if operation is not None:
        return operation
    if protocol_code in VENDOR_SPECIFIC_RANGE:
        return Operation.VENDOR_SPECIFIC
    return Operation.RESERVED
