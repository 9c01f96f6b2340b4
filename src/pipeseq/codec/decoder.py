# topmark:header:start
#
#   project      : PipeSeq
#   file         : decoder.py
#   file_relpath : src/pipeseq/codec/decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encoding tags and the payload decoder.

The wire carries a small integer tag per record:

    0 = ASCII  payload text is used as-is
    1 = HEX    payload text is pairs of hex digits, high nibble first

`Encoding.from_tag` is the only way to turn a wire integer into an `Encoding`;
unknown tags are rejected instead of being cast blindly. `decode` is pure and
deterministic.
"""

from __future__ import annotations

import re
from enum import Enum, IntEnum
from typing import Final

from pipeseq.config.logging import PipeseqLogger, get_logger

logger: PipeseqLogger = get_logger(__name__)

_HEX_PAIRS_RE: Final[re.Pattern[str]] = re.compile(r"(?:[0-9A-Fa-f]{2})*")


class Encoding(IntEnum):
    """Payload encodings understood by the decoder, keyed by their wire tag."""

    ASCII = 0
    HEX = 1

    @classmethod
    def from_tag(cls, tag: int) -> Encoding:
        """Return the encoding for a wire tag.

        Args:
            tag (int): The integer tag read from the wire.

        Returns:
            Encoding: The matching encoding.

        Raises:
            UnknownEncodingError: If ``tag`` is not a known encoding tag.
        """
        try:
            return cls(tag)
        except ValueError:
            raise UnknownEncodingError(tag) from None


class DecodeErrorKind(Enum):
    """Why a payload could not be decoded."""

    INVALID_HEX = "invalid hex"
    INVALID_TEXT = "invalid text"
    UNKNOWN_ENCODING = "unknown encoding"


class DecodeError(ValueError):
    """Base class for payload decode failures."""

    kind: DecodeErrorKind


class InvalidHexError(DecodeError):
    """Raised when a HEX payload has odd length or a non-hex character."""

    kind = DecodeErrorKind.INVALID_HEX

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid hex payload {text!r}: {reason}")
        self.text = text
        self.reason = reason


class InvalidTextError(DecodeError):
    """Raised when an ASCII payload holds a code point with no byte form (a lone surrogate)."""

    kind = DecodeErrorKind.INVALID_TEXT

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid text payload {text!r}: {reason}")
        self.text = text
        self.reason = reason


class UnknownEncodingError(DecodeError):
    """Raised when an encoding value is not a member of `Encoding`."""

    kind = DecodeErrorKind.UNKNOWN_ENCODING

    def __init__(self, encoding: object) -> None:
        super().__init__(f"Not a valid encoding: {encoding!r}")
        self.encoding = encoding


def _decode_hex(text: str) -> bytes:
    if len(text) % 2 != 0:
        raise InvalidHexError(text, f"odd length {len(text)}")
    # bytes.fromhex() tolerates whitespace between pairs; the wire format does not.
    if _HEX_PAIRS_RE.fullmatch(text) is None:
        raise InvalidHexError(text, "non-hex character")
    return bytes.fromhex(text)


def decode(encoding: Encoding | int, text: str) -> bytes:
    """Decode a record payload according to its declared encoding.

    Args:
        encoding (Encoding | int): The payload encoding, or its raw wire tag.
        text (str): The raw payload token as read from the wire.

    Returns:
        bytes: The decoded payload. ASCII payloads are returned as their UTF-8 bytes;
            bytes that were not valid UTF-8 on input (carried as ``surrogateescape``
            code points) are restored unchanged.

    Raises:
        InvalidHexError: If ``encoding`` is HEX and ``text`` is not an even-length
            run of hex digits.
        UnknownEncodingError: If ``encoding`` is neither an `Encoding` member nor a
            known wire tag.
        InvalidTextError: If an ASCII payload holds a lone surrogate that did
            not come from ``surrogateescape`` decoding.
    """
    if not isinstance(encoding, Encoding):
        logger.debug("decode() called with raw encoding value %r", encoding)
        encoding = Encoding.from_tag(encoding)
    if encoding is Encoding.HEX:
        return _decode_hex(text)
    try:
        return text.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError as exc:
        raise InvalidTextError(text, exc.reason) from exc
