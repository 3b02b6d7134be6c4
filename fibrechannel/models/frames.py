"""
Pydantic models for Fibre Channel and FIP frames.

This module defines the in-memory form of the three wire structures handled
by the codecs, implemented as immutable Pydantic models with validation.

Design principles:
- All models are frozen (immutable) by default
- Field ranges match the wire width, so any valid model can be encoded
- Delimiter and routing bytes are stored as raw ints; unknown codes
  round-trip unchanged and the enums are only used for display
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, Strict, field_validator

from fibrechannel.protocol.constants import EOF, SOF, FrameConstants, RoutingControl, padded_length
from fibrechannel.protocol.fip_constants import FIP_VERSION, Operation, parse_operation

Byte = Annotated[int, Field(ge=0, le=0xFF)]
Word16 = Annotated[int, Field(ge=0, le=0xFFFF)]
Word32 = Annotated[int, Field(ge=0, le=0xFFFFFFFF)]
Address = Annotated[bytes, Strict(), Field(min_length=3, max_length=3)]

_ZERO_ADDRESS = bytes(3)


def _lookup(enum_type, value: int):
    try:
        return enum_type(value)
    except ValueError:
        return value


class Header(BaseModel):
    """
    Fibre Channel frame header.

    The header is 24 bytes on the wire and carries addressing, sequence and
    exchange information for a frame. Every field is stored exactly as it
    appears on the wire; no field is interpreted or validated beyond its
    width.

    Example:
        >>> header = Header(
        ...     routing_control=RoutingControl.DEVICE_DATA_SOLICITED_DATA,
        ...     destination_id=bytes([3, 3, 3]),
        ...     source_id=bytes([6, 6, 6]),
        ...     sequence_count=256,
        ... )
        >>> header.routing
        <RoutingControl.DEVICE_DATA_SOLICITED_DATA: 1>
    """

    model_config = ConfigDict(frozen=True)

    routing_control: Byte = Field(default=0, description="R_CTL: frame type and information category")
    destination_id: Address = Field(default=_ZERO_ADDRESS, description="D_ID: destination address")
    priority: Byte = Field(default=0, description="CS_CTL/Priority: class specific control")
    source_id: Address = Field(default=_ZERO_ADDRESS, description="S_ID: source address")
    type: Byte = Field(default=0, description="TYPE: data structure type of the payload")
    frame_control: Address = Field(default=_ZERO_ADDRESS, description="F_CTL: frame control options")
    sequence_id: Byte = Field(default=0, description="SEQ_ID: sequence the frame belongs to")
    data_field_control: Byte = Field(default=0, description="DF_CTL: optional header presence")
    sequence_count: Word16 = Field(default=0, description="SEQ_CNT: frame number within the sequence")
    originator_exchange_id: Word16 = Field(default=0, description="OX_ID: assigned by the originator")
    responder_exchange_id: Word16 = Field(default=0, description="RX_ID: assigned by the responder")
    parameter: Word32 = Field(default=0, description="Parameter, usually a relative offset")

    @property
    def routing(self) -> RoutingControl | int:
        """Get R_CTL as RoutingControl enum if recognized, else raw int."""
        return _lookup(RoutingControl, self.routing_control)

    def __repr__(self) -> str:
        return (
            f"Header(r_ctl=0x{self.routing_control:02X}, "
            f"d_id={self.destination_id.hex()}, cs_ctl=0x{self.priority:02X}, "
            f"s_id={self.source_id.hex()}, type=0x{self.type:02X}, "
            f"f_ctl={self.frame_control.hex()}, seq_id=0x{self.sequence_id:02X}, "
            f"df_ctl=0x{self.data_field_control:02X}, seq_cnt={self.sequence_count}, "
            f"ox_id=0x{self.originator_exchange_id:04X}, rx_id=0x{self.responder_exchange_id:04X}, "
            f"parameter=0x{self.parameter:08X})"
        )


class Frame(BaseModel):
    """
    Fibre Channel frame.

    A frame is delimited by SOF and EOF codes and carries a header and a
    variable length payload. On the wire the payload is padded with zero
    bytes to the next word (4 byte) boundary and protected by a CRC32.

    A frame without a header is a valid model but cannot be encoded.
    """

    model_config = ConfigDict(frozen=True)

    sof: Byte = Field(default=0, description="Start-of-Frame code")
    header: Header | None = Field(default=None, description="Frame header")
    payload: bytes = Field(default=b"", description="Payload data, unpadded")
    eof: Byte = Field(default=0, description="End-of-Frame code")

    @field_validator("payload", mode="before")
    @classmethod
    def validate_payload(cls, v: object) -> bytes:
        """Accept binary buffers only; text has no defined wire form."""
        if not isinstance(v, (bytes, bytearray, memoryview)):
            raise ValueError(f"Payload must be bytes, got {type(v).__name__}")
        return bytes(v)

    @property
    def start_of_frame(self) -> SOF | int:
        """Get SOF as enum if recognized, else raw int."""
        return _lookup(SOF, self.sof)

    @property
    def end_of_frame(self) -> EOF | int:
        """Get EOF as enum if recognized, else raw int."""
        return _lookup(EOF, self.eof)

    @property
    def padded_payload_length(self) -> int:
        """Payload length rounded up to the next word boundary."""
        return padded_length(len(self.payload))

    @property
    def encoded_length(self) -> int:
        """Total number of bytes this frame occupies on the wire."""
        return FrameConstants.MIN_FRAME_LENGTH + self.padded_payload_length

    def __repr__(self) -> str:
        sof = self.start_of_frame
        eof = self.end_of_frame
        sof_name = sof.name if isinstance(sof, SOF) else f"0x{self.sof:02X}"
        eof_name = eof.name if isinstance(eof, EOF) else f"0x{self.eof:02X}"
        return f"Frame({sof_name}, {self.header!r}, payload={len(self.payload)} bytes, {eof_name})"


class FipFrame(BaseModel):
    """
    FIP common header.

    The 10-byte header that starts every FCoE Initialization Protocol
    frame. The descriptor list that follows it on the wire is not part of
    this model.

    Example:
        >>> frame = FipFrame(protocol_code=0x0001, subcode=0x02, solicited=True)
        >>> frame.operation
        <Operation.DISCOVERY_ADVERTISEMENT: 2>
    """

    model_config = ConfigDict(frozen=True)

    version: int = Field(default=FIP_VERSION, ge=0, le=0x0F, description="FIP version (4 bits)")
    protocol_code: Word16 = Field(default=0, description="Operation protocol code")
    subcode: Byte = Field(default=0, description="Operation subcode")
    descriptor_list_length: Word16 = Field(default=0, description="Descriptor list length in words")
    fpma: bool = Field(default=False, description="FP: fabric provided MAC address")
    spma: bool = Field(default=False, description="SP: server provided MAC address")
    available_for_login: bool = Field(default=False, description="A: FCF available for login")
    solicited: bool = Field(default=False, description="S: solicited advertisement")
    fcf: bool = Field(default=False, description="F: sent by an FCF")

    @property
    def operation(self) -> Operation:
        """Classify protocol code and subcode as an Operation."""
        return parse_operation(self.protocol_code, self.subcode)
