"""Tests for FIP operation classification."""

import pytest

from fibrechannel.protocol.fip_constants import FIP_VERSION, Operation, parse_operation


class TestParseOperation:
    """Tests for parse_operation."""

    @pytest.mark.parametrize(
        ("protocol_code", "subcode", "operation"),
        [
            (0x0000, 0x00, Operation.RESERVED),
            (0x0001, 0x01, Operation.DISCOVERY_SOLICITATION),
            (0x0001, 0x02, Operation.DISCOVERY_ADVERTISEMENT),
            (0x0002, 0x01, Operation.VIRTUAL_LINK_INSTANTIATION_REQUEST),
            (0x0002, 0x02, Operation.VIRTUAL_LINK_INSTANTIATION_REPLY),
            (0x0003, 0x01, Operation.KEEP_ALIVE),
            (0x0003, 0x02, Operation.CLEAR_VIRTUAL_LINKS),
            (0x0004, 0x01, Operation.VLAN_REQUEST),
            (0x0004, 0x02, Operation.VLAN_NOTIFICATION),
            (0xFFF8, 0x01, Operation.VENDOR_SPECIFIC),
            (0xFFFE, 0x00, Operation.VENDOR_SPECIFIC),
            (0xFFFF, 0x01, Operation.RESERVED),
            (0xFFF7, 0x01, Operation.RESERVED),
        ],
    )
    def test_table(self, protocol_code, subcode, operation):
        """Test every defined (protocol code, subcode) pair and range edge."""
        assert parse_operation(protocol_code, subcode) == operation

    @pytest.mark.parametrize("subcode", [0x00, 0x03, 0xFF])
    def test_unknown_subcode_is_reserved(self, subcode):
        """Test that a known protocol code with an unknown subcode is reserved."""
        assert parse_operation(0x0001, subcode) == Operation.RESERVED

    def test_vendor_specific_ignores_subcode(self):
        """Test that any subcode in the vendor range is vendor specific."""
        for subcode in range(256):
            assert parse_operation(0xFFFA, subcode) == Operation.VENDOR_SPECIFIC

    def test_operation_names(self):
        """Test string rendering of operations."""
        assert Operation.KEEP_ALIVE.name == "KEEP_ALIVE"
        assert Operation(0) is Operation.RESERVED

    def test_version(self):
        """Test the supported FIP version."""
        assert FIP_VERSION == 1
