# topmark:header:start
#
#   project      : PipeSeq
#   file         : test_decoder.py
#   file_relpath : tests/codec/test_decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `pipeseq.codec.decode`."""

from __future__ import annotations

import pytest

from pipeseq.codec import (
    DecodeError,
    DecodeErrorKind,
    Encoding,
    InvalidHexError,
    InvalidTextError,
    UnknownEncodingError,
    decode,
)


def test_ascii_returns_utf8_bytes() -> None:
    assert decode(Encoding.ASCII, "hello") == b"hello"


def test_ascii_empty_payload() -> None:
    assert decode(Encoding.ASCII, "") == b""


def test_ascii_non_ascii_text_is_utf8_encoded() -> None:
    assert decode(Encoding.ASCII, "héllo") == "héllo".encode()


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("48656C6C6F", b"Hello"),
        ("48656c6c6f", b"Hello"),
        ("00ff", b"\x00\xff"),
        ("", b""),
    ],
)
def test_hex_decodes_pairs(text: str, expected: bytes) -> None:
    assert decode(Encoding.HEX, text) == expected


def test_hex_odd_length_is_rejected() -> None:
    with pytest.raises(InvalidHexError) as exc_info:
        decode(Encoding.HEX, "ABC")
    assert exc_info.value.kind is DecodeErrorKind.INVALID_HEX
    assert "Invalid hex payload" in str(exc_info.value)
    assert "odd length" in exc_info.value.reason


@pytest.mark.parametrize("text", ["zz", "0g", "4 65", "+1", "0x"])
def test_hex_non_hex_character_is_rejected(text: str) -> None:
    with pytest.raises(InvalidHexError):
        decode(Encoding.HEX, text)


def test_raw_wire_tags_are_accepted() -> None:
    assert decode(0, "abc") == b"abc"
    assert decode(1, "6162") == b"ab"


@pytest.mark.parametrize("tag", [2, 7, -1, 255])
def test_unknown_encoding_is_rejected(tag: int) -> None:
    with pytest.raises(UnknownEncodingError) as exc_info:
        decode(tag, "abc")
    assert exc_info.value.kind is DecodeErrorKind.UNKNOWN_ENCODING
    assert "Not a valid encoding" in str(exc_info.value)


def test_decode_errors_share_a_base_class() -> None:
    assert issubclass(InvalidHexError, DecodeError)
    assert issubclass(InvalidTextError, DecodeError)
    assert issubclass(UnknownEncodingError, DecodeError)
    assert issubclass(DecodeError, ValueError)


def test_from_tag() -> None:
    assert Encoding.from_tag(0) is Encoding.ASCII
    assert Encoding.from_tag(1) is Encoding.HEX
    with pytest.raises(UnknownEncodingError):
        Encoding.from_tag(3)


def test_ascii_restores_escaped_input_bytes() -> None:
    raw = b"caf\xe9"
    text = raw.decode("utf-8", errors="surrogateescape")
    assert decode(Encoding.ASCII, text) == raw


def test_ascii_lone_surrogate_is_a_decode_error() -> None:
    with pytest.raises(InvalidTextError) as exc_info:
        decode(Encoding.ASCII, "a\ud800")
    assert exc_info.value.kind is DecodeErrorKind.INVALID_TEXT
    assert isinstance(exc_info.value, DecodeError)
