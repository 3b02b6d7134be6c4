"""
Codecs between frame models and their wire bytes.

Each codec is a stateless class with a module-level default instance and
convenience functions:

- HeaderCodec: 24-byte Fibre Channel header
- FrameCodec: complete Fibre Channel frame with padding and CRC32
- FipFrameCodec: 10-byte FIP common header
"""

from fibrechannel.codec.fip_frame import (
    DEFAULT_FIP_FRAME_CODEC,
    FipFrameCodec,
    decode_fip_frame,
    encode_fip_frame,
)
from fibrechannel.codec.frame import (
    DEFAULT_FRAME_CODEC,
    FrameCodec,
    FrameParseError,
    FrameParseResult,
    decode_frame,
    encode_frame,
    parse_frame,
)
from fibrechannel.codec.header import (
    DEFAULT_HEADER_CODEC,
    HeaderCodec,
    decode_header,
    encode_header,
)

__all__ = [
    # Header
    "HeaderCodec",
    "DEFAULT_HEADER_CODEC",
    "encode_header",
    "decode_header",
    # Frame
    "FrameCodec",
    "DEFAULT_FRAME_CODEC",
    "FrameParseResult",
    "FrameParseError",
    "encode_frame",
    "decode_frame",
    "parse_frame",
    # FIP
    "FipFrameCodec",
    "DEFAULT_FIP_FRAME_CODEC",
    "encode_fip_frame",
    "decode_fip_frame",
]
