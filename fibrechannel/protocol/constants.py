"""
Fibre Channel frame delimiters, routing codes and layout constants.

Delimiter and R_CTL values follow FC-PH / FC-FS as carried in FCoE
encapsulation (FC-BB-5), where each delimiter occupies one byte of a
4-byte word.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class SOF(IntEnum):
    """
    Start-of-Frame delimiter codes.

    The SOF byte appears at the beginning of a Fibre Channel frame and
    identifies the class of service and whether the frame starts or
    continues a sequence.
    """

    SOF_F = 0x28
    """Start fabric."""

    SOF_I2 = 0x2D
    """Start (initiate) class 2."""

    SOF_I3 = 0x2E
    """Start (initiate) class 3."""

    SOF_I4 = 0x29
    """Start (initiate) class 4."""

    SOF_N2 = 0x35
    """Normal (continue) class 2."""

    SOF_N3 = 0x36
    """Normal (continue) class 3."""

    SOF_N4 = 0x31
    """Normal (continue) class 4."""

    SOF_C4 = 0x39
    """Connect class 4."""


class EOF(IntEnum):
    """
    End-of-Frame delimiter codes.

    The EOF byte appears at the end of a Fibre Channel frame and indicates
    continuation or termination of the sequence.
    """

    EOF_N = 0x41
    """Normal (not last frame of sequence)."""

    EOF_T = 0x42
    """Terminate (last frame of sequence)."""

    EOF_RT = 0x44
    """Remove-terminate class 4."""

    EOF_DT = 0x46
    """Disconnect-terminate class 1."""

    EOF_NI = 0x49
    """Normal-invalid."""

    EOF_DTI = 0x4E
    """Disconnect-terminate-invalid."""

    EOF_RTI = 0x4F
    """Remove-terminate-invalid class 4."""

    EOF_A = 0x50
    """Abort."""


class RoutingControl(IntEnum):
    """
    R_CTL routing control codes.

    Identifies a frame's type and information category. Only the device
    data categories are named here; any other byte value is carried as a
    plain int.
    """

    DEVICE_DATA_UNCATEGORIZED = 0x00
    DEVICE_DATA_SOLICITED_DATA = 0x01
    DEVICE_DATA_UNSOLICITED_CONTROL = 0x02
    DEVICE_DATA_SOLICITED_CONTROL = 0x03
    DEVICE_DATA_UNSOLICITED_DATA = 0x04
    DEVICE_DATA_DATA_DESCRIPTOR = 0x05
    DEVICE_DATA_UNSOLICITED_COMMAND = 0x06
    DEVICE_DATA_COMMAND_STATUS = 0x07


class FrameConstants:
    """
    Fibre Channel frame layout constants.

    Wire layout (all multi-byte integers big-endian)::

        +---------+--------+--------------------+-------+---------+
        | SOF     | Header | Payload (padded)   | CRC32 | EOF     |
        | 4 bytes | 24     | multiple of 4      | 4     | 4 bytes |
        +---------+--------+--------------------+-------+---------+

    The SOF code is the last byte of its word, the EOF code the first byte
    of its word; the other three bytes of each word are reserved (zero).
    """

    # ===== Field Sizes =====

    HEADER_LENGTH: Final[int] = 24
    """Exact length of an encoded header."""

    SOF_FIELD_LENGTH: Final[int] = 4
    """Length of the SOF word."""

    CRC_LENGTH: Final[int] = 4
    """Length of the CRC32 field."""

    EOF_FIELD_LENGTH: Final[int] = 4
    """Length of the EOF word."""

    WORD_SIZE: Final[int] = 4
    """Payload alignment in bytes."""

    # ===== Offsets =====

    SOF_OFFSET: Final[int] = 3
    """Offset of the SOF code within the frame."""

    HEADER_OFFSET: Final[int] = 4
    """Offset of the header within the frame."""

    PAYLOAD_OFFSET: Final[int] = 4 + 24
    """Offset of the payload within the frame."""

    # ===== Derived Lengths =====

    MIN_FRAME_LENGTH: Final[int] = 4 + 24 + 4 + 4
    """Length of a frame with an empty payload."""


def padded_length(length: int) -> int:
    """
    Round a payload length up to the next word boundary.

    Example:
        >>> padded_length(3)
        4
        >>> padded_length(8)
        8
    """
    remainder = length % FrameConstants.WORD_SIZE
    if remainder:
        return length + FrameConstants.WORD_SIZE - remainder
    return length
