"""Tests for CRC32 functions."""

import pytest

from fibrechannel.exceptions import InvalidCRCError
from fibrechannel.protocol.checksums import (
    calculate_crc,
    decode_crc,
    encode_crc,
    verify_crc,
)


class TestChecksums:
    """Tests for CRC calculation and validation."""

    def test_calculate_crc_empty(self):
        """Test CRC of empty data."""
        assert calculate_crc(b"") == 0x00000000

    def test_calculate_crc_zero_header(self):
        """Test CRC of an all-zero 24-byte header."""
        assert calculate_crc(bytes(24)) == 0xA3C1CA20

    def test_calculate_crc_header_and_padded_payload(self):
        """Test CRC over a zero header followed by a padded payload."""
        data = bytes(24) + bytes([1, 2, 3, 0])
        assert calculate_crc(data) == 0x10659721

    def test_calculate_crc_ieee_check_value(self):
        """Test the standard CRC-32/IEEE check value."""
        assert calculate_crc(b"123456789") == 0xCBF43926

    def test_calculate_crc_accepts_buffers(self):
        """Test that bytearray and memoryview give the same result as bytes."""
        data = b"\x01\x02\x03\x04"
        expected = calculate_crc(data)
        assert calculate_crc(bytearray(data)) == expected
        assert calculate_crc(memoryview(data)) == expected

    def test_encode_crc_big_endian(self):
        """Test that CRC is encoded most significant byte first."""
        assert encode_crc(0x094CBCE8) == bytes([0x09, 0x4C, 0xBC, 0xE8])

    def test_encode_crc_out_of_range(self):
        """Test that values wider than 32 bits are rejected."""
        with pytest.raises(ValueError):
            encode_crc(0x1_0000_0000)
        with pytest.raises(ValueError):
            encode_crc(-1)

    def test_decode_crc(self):
        """Test decoding 4 big-endian bytes."""
        assert decode_crc(bytes([0xA3, 0xC1, 0xCA, 0x20])) == 0xA3C1CA20

    def test_decode_crc_wrong_length(self):
        """Test that decode requires exactly 4 bytes."""
        with pytest.raises(ValueError):
            decode_crc(b"\x00\x00\x00")

    def test_verify_crc_valid(self):
        """Test that a matching checksum is returned."""
        assert verify_crc(bytes(24), 0xA3C1CA20) == 0xA3C1CA20

    def test_verify_crc_invalid(self):
        """Test that a mismatch raises with both values."""
        with pytest.raises(InvalidCRCError) as exc_info:
            verify_crc(bytes(24), 0xFFFFFFFF)
        assert exc_info.value.expected == 0xA3C1CA20
        assert exc_info.value.received == 0xFFFFFFFF

    def test_verify_crc_covers_header_region_only(self):
        """Test verification of a frame's header-to-CRC region."""
        frame = (
            bytes([0, 0, 0, 0x2E])
            + bytes(24)
            + bytes([1, 2, 3, 0])
            + bytes([16, 101, 151, 33])
            + bytes([0x42, 0, 0, 0])
        )
        region = memoryview(frame)[4:32]
        assert verify_crc(region, decode_crc(frame[32:36])) == 0x10659721

    def test_verify_crc_rejects_sof_word_in_region(self):
        """Test that including the SOF word changes the checksum."""
        frame = bytes([0, 0, 0, 0x2E]) + bytes(24)
        with pytest.raises(InvalidCRCError):
            verify_crc(frame, 0xA3C1CA20)
