"""
Data models for Fibre Channel and FIP frames.

This module contains the Pydantic models the codecs encode from and decode
to:

- Header: the 24-byte Fibre Channel frame header
- Frame: a complete Fibre Channel frame (delimiters, header, payload)
- FipFrame: the 10-byte FIP common header
"""

from fibrechannel.models.frames import FipFrame, Frame, Header

__all__ = [
    "Header",
    "Frame",
    "FipFrame",
]
