"""
CRC32 checksum calculation and validation.

Fibre Channel frames carry a 32-bit CRC using the IEEE 802.3 polynomial
(the same CRC used by Ethernet and zlib). The CRC covers the header and the
padded payload; the SOF and EOF words are excluded.

The checksum is stored big-endian in the 4 bytes immediately before the EOF
word.
"""

from __future__ import annotations

import zlib
from typing import Final

from fibrechannel.exceptions import InvalidCRCError

CRC_SIZE: Final[int] = 4


def calculate_crc(data: bytes | bytearray | memoryview) -> int:
    """
    Calculate the IEEE CRC32 over the specified data.

    Args:
        data: Data to checksum (header and padded payload).

    Returns:
        32-bit checksum value.

    Example:
        >>> hex(calculate_crc(bytes(24)))
        '0xa3c1ca20'
    """
    return zlib.crc32(data) & 0xFFFFFFFF


def encode_crc(crc: int) -> bytes:
    """
    Encode a checksum value as 4 big-endian bytes.

    Raises:
        ValueError: If crc does not fit in 32 bits.
    """
    if not 0 <= crc <= 0xFFFFFFFF:
        raise ValueError(f"CRC must be 0-0xFFFFFFFF, got {crc}")
    return crc.to_bytes(CRC_SIZE, "big")


def decode_crc(data: bytes | bytearray | memoryview) -> int:
    """
    Decode 4 big-endian bytes to a checksum value.

    Raises:
        ValueError: If data is not exactly 4 bytes.
    """
    if len(data) != CRC_SIZE:
        raise ValueError(f"CRC must be {CRC_SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def verify_crc(data: bytes | bytearray | memoryview, received: int) -> int:
    """
    Check a received checksum against the CRC32 of data.

    Args:
        data: Checksummed region (header and padded payload only, without
            the SOF word).
        received: Checksum read from the frame.

    Returns:
        The verified checksum value.

    Raises:
        InvalidCRCError: If received does not match, carrying both values.

    Example:
        >>> verify_crc(bytes(24), 0xA3C1CA20)
        2747386400
    """
    expected = calculate_crc(data)
    if expected != received:
        raise InvalidCRCError(expected=expected, received=received)
    return expected
