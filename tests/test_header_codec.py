"""Tests for Fibre Channel header encoding and decoding."""

import pytest

from fibrechannel.codec.header import DEFAULT_HEADER_CODEC, HeaderCodec, decode_header, encode_header
from fibrechannel.exceptions import FrameError, LengthMismatchError
from fibrechannel.models.frames import Header
from fibrechannel.protocol.constants import RoutingControl

FULL_HEADER = Header(
    routing_control=0x01,
    destination_id=bytes([3, 3, 3]),
    priority=5,
    source_id=bytes([6, 6, 6]),
    type=2,
    frame_control=bytes([1, 2, 3]),
    sequence_id=5,
    data_field_control=6,
    sequence_count=256,
    originator_exchange_id=1000,
    responder_exchange_id=1001,
    parameter=20000,
)

FULL_HEADER_BYTES = bytes([
    0x01, 3, 3, 3, 5, 6, 6, 6, 2, 1, 2, 3,
    5, 6, 1, 0, 3, 232, 3, 233, 0, 0, 78, 32,
])


class TestHeaderEncode:
    """Tests for HeaderCodec.encode."""

    @pytest.fixture
    def codec(self):
        """Create a HeaderCodec instance."""
        return HeaderCodec()

    def test_encode_empty_header(self, codec):
        """Test that a default header encodes to 24 zero bytes."""
        assert codec.encode(Header()) == bytes(24)

    def test_encode_full_header(self, codec):
        """Test field placement of a fully populated header."""
        assert codec.encode(FULL_HEADER) == FULL_HEADER_BYTES

    def test_encode_length(self, codec):
        """Test that encoded headers are always 24 bytes."""
        header = Header(
            routing_control=0xFF,
            destination_id=b"\xff\xff\xff",
            sequence_count=0xFFFF,
            parameter=0xFFFFFFFF,
        )
        assert len(codec.encode(header)) == 24

    def test_encode_multibyte_fields_big_endian(self, codec):
        """Test byte order of the 16 and 32-bit fields."""
        header = Header(
            sequence_count=0x1234,
            originator_exchange_id=0x5678,
            responder_exchange_id=0x9ABC,
            parameter=0xDEADBEEF,
        )
        data = codec.encode(header)
        assert data[14:16] == b"\x12\x34"
        assert data[16:18] == b"\x56\x78"
        assert data[18:20] == b"\x9a\xbc"
        assert data[20:24] == b"\xde\xad\xbe\xef"

    def test_encode_returns_bytes(self, codec):
        """Test that encode returns immutable bytes."""
        assert isinstance(codec.encode(Header()), bytes)


class TestHeaderDecode:
    """Tests for HeaderCodec.decode."""

    @pytest.fixture
    def codec(self):
        """Create a HeaderCodec instance."""
        return HeaderCodec()

    def test_decode_full_header(self, codec):
        """Test decoding a fully populated header."""
        assert codec.decode(FULL_HEADER_BYTES) == FULL_HEADER

    def test_decode_empty_buffer(self, codec):
        """Test that an empty buffer is rejected."""
        with pytest.raises(LengthMismatchError):
            codec.decode(b"")

    def test_decode_short_buffer(self, codec):
        """Test that a 23-byte buffer is rejected."""
        with pytest.raises(LengthMismatchError) as exc_info:
            codec.decode(bytes(23))
        assert exc_info.value.expected == 24
        assert exc_info.value.received == 23

    def test_decode_long_buffer(self, codec):
        """Test that header length must be exact, not a minimum."""
        with pytest.raises(LengthMismatchError):
            codec.decode(bytes(25))

    def test_length_mismatch_is_frame_error(self, codec):
        """Test that length mismatch can be caught as FrameError."""
        with pytest.raises(FrameError):
            codec.decode(bytes(10))

    def test_decode_memoryview(self, codec):
        """Test decoding from a memoryview slice."""
        buffer = bytes(4) + FULL_HEADER_BYTES + bytes(4)
        assert codec.decode(memoryview(buffer)[4:28]) == FULL_HEADER

    def test_decode_bytearray(self, codec):
        """Test decoding from a bytearray."""
        assert codec.decode(bytearray(FULL_HEADER_BYTES)) == FULL_HEADER

    def test_decoded_addresses_are_bytes(self, codec):
        """Test that 3-byte fields decode as bytes."""
        header = codec.decode(FULL_HEADER_BYTES)
        assert header.destination_id == b"\x03\x03\x03"
        assert header.source_id == b"\x06\x06\x06"
        assert header.frame_control == b"\x01\x02\x03"

    def test_decode_routing_lookup(self, codec):
        """Test that known R_CTL values map to RoutingControl."""
        header = codec.decode(FULL_HEADER_BYTES)
        assert header.routing == RoutingControl.DEVICE_DATA_SOLICITED_DATA

    def test_decode_unknown_routing(self, codec):
        """Test that unknown R_CTL values are kept as raw ints."""
        data = bytes([0x22]) + bytes(23)
        header = codec.decode(data)
        assert header.routing_control == 0x22
        assert header.routing == 0x22
        assert not isinstance(header.routing, RoutingControl)


class TestHeaderRoundTrip:
    """Tests that headers survive encode and decode unchanged."""

    @pytest.mark.parametrize(
        "header",
        [
            Header(),
            FULL_HEADER,
            Header(
                routing_control=0xFF,
                destination_id=b"\xff\xff\xff",
                priority=0xFF,
                source_id=b"\xff\xff\xff",
                type=0xFF,
                frame_control=b"\xff\xff\xff",
                sequence_id=0xFF,
                data_field_control=0xFF,
                sequence_count=0xFFFF,
                originator_exchange_id=0xFFFF,
                responder_exchange_id=0xFFFF,
                parameter=0xFFFFFFFF,
            ),
        ],
    )
    def test_round_trip(self, header):
        """Test decode(encode(h)) == h."""
        assert decode_header(encode_header(header)) == header

    def test_default_codec(self):
        """Test the module-level default codec."""
        assert DEFAULT_HEADER_CODEC.encode(FULL_HEADER) == encode_header(FULL_HEADER)
