# topmark:header:start
#
#   project      : PipeSeq
#   file         : __init__.py
#   file_relpath : src/pipeseq/codec/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Payload decoding for PipeSeq records.

Every record declares how its payload token is encoded on the wire. This package
turns that token into the raw bytes stored on the record, or raises a
`DecodeError` describing why it could not.
"""

from __future__ import annotations

from pipeseq.codec.decoder import (
    DecodeError,
    DecodeErrorKind,
    Encoding,
    InvalidHexError,
    InvalidTextError,
    UnknownEncodingError,
    decode,
)

__all__ = [
    "DecodeError",
    "DecodeErrorKind",
    "Encoding",
    "InvalidHexError",
    "InvalidTextError",
    "UnknownEncodingError",
    "decode",
]
