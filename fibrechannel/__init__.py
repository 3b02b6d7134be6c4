"""
fibrechannel - Python library for encoding and decoding Fibre Channel frames.

This library converts between Fibre Channel frames (FC-PH), FCoE
Initialization Protocol headers (FC-BB-5) and their exact wire bytes, with
CRC32 and reserved-field validation.

Example:
    >>> from fibrechannel import EOF, SOF, Frame, Header, decode_frame, encode_frame
    >>>
    >>> frame = Frame(sof=SOF.SOF_I3, header=Header(sequence_count=1), payload=b"data", eof=EOF.EOF_T)
    >>> data = encode_frame(frame)
    >>> decode_frame(data) == frame
    True
"""

from fibrechannel.codec import (
    FipFrameCodec,
    FrameCodec,
    FrameParseResult,
    HeaderCodec,
    decode_fip_frame,
    decode_frame,
    decode_header,
    encode_fip_frame,
    encode_frame,
    encode_header,
    parse_frame,
)
from fibrechannel.exceptions import (
    BufferTooShortError,
    EncodeError,
    FibreChannelError,
    FrameError,
    InvalidCRCError,
    InvalidFipFrameError,
    InvalidFrameError,
    InvalidVersionError,
    LengthError,
    LengthMismatchError,
    MissingHeaderError,
    ProtocolError,
)
from fibrechannel.models import FipFrame, Frame, Header
from fibrechannel.protocol import EOF, FIP_VERSION, SOF, Operation, RoutingControl, parse_operation

__version__ = "0.1.0"
__all__ = [
    # Models
    "Header",
    "Frame",
    "FipFrame",
    # Constants
    "SOF",
    "EOF",
    "RoutingControl",
    "Operation",
    "FIP_VERSION",
    "parse_operation",
    # Codecs
    "HeaderCodec",
    "FrameCodec",
    "FipFrameCodec",
    "FrameParseResult",
    "encode_header",
    "decode_header",
    "encode_frame",
    "decode_frame",
    "parse_frame",
    "encode_fip_frame",
    "decode_fip_frame",
    # Exceptions
    "FibreChannelError",
    "ProtocolError",
    "FrameError",
    "LengthError",
    "BufferTooShortError",
    "LengthMismatchError",
    "InvalidFrameError",
    "InvalidFipFrameError",
    "InvalidCRCError",
    "EncodeError",
    "MissingHeaderError",
    "InvalidVersionError",
    # Version
    "__version__",
]
