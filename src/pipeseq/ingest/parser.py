# topmark:header:start
#
#   project      : PipeSeq
#   file         : parser.py
#   file_relpath : src/pipeseq/ingest/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse one input line into a `ParsedRecord`.

Line grammar (whitespace-separated):

    channel_id id encoding_tag payload next_id

- ``channel_id``, ``id``: decimal integers in ``0..255``.
- ``encoding_tag``: ``0`` (ASCII) or ``1`` (HEX).
- ``payload``: a single token.
- ``next_id``: decimal integer in ``0..255``, or ``-1`` for "no successor".

Tokens after ``next_id`` are ignored.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from pipeseq.codec import Encoding, UnknownEncodingError
from pipeseq.config.logging import get_logger
from pipeseq.constants import NO_NEXT_ID_SENTINEL, U8_MAX
from pipeseq.pipeline.model import ParsedRecord

if TYPE_CHECKING:
    from pipeseq.config.logging import PipeseqLogger

logger: PipeseqLogger = get_logger(__name__)

FIELD_NAMES: Final[tuple[str, ...]] = ("channel_id", "id", "encoding", "payload", "next_id")

_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


class RecordParseError(ValueError):
    """Raised when a line does not match the record grammar."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


def _parse_decimal(token: str, field: str) -> int:
    # int() would also accept signs, underscores and non-ASCII digits.
    if _DECIMAL_RE.fullmatch(token) is None:
        raise RecordParseError(f"Invalid {field} {token!r}: not a decimal number", field=field)
    return int(token)


def _parse_u8(token: str, field: str) -> int:
    value: int = _parse_decimal(token, field)
    if value > U8_MAX:
        raise RecordParseError(
            f"Invalid {field} {token!r}: out of range 0..{U8_MAX}", field=field
        )
    return value


def _parse_next_id(token: str) -> int | None:
    if token == NO_NEXT_ID_SENTINEL:
        return None
    return _parse_u8(token, "next_id")


def parse_line(line: str) -> ParsedRecord:
    """Parse one input line.

    Args:
        line (str): The line, without its terminator.

    Returns:
        ParsedRecord: The structured record.

    Raises:
        RecordParseError: If a field is missing, not a number, out of range, or
            names an unknown encoding.
    """
    tokens: list[str] = line.split()
    if len(tokens) < len(FIELD_NAMES):
        missing: str = FIELD_NAMES[len(tokens)]
        raise RecordParseError(f"Missing {missing}", field=missing)

    channel_id: int = _parse_u8(tokens[0], "channel_id")
    record_id: int = _parse_u8(tokens[1], "id")
    try:
        encoding: Encoding = Encoding.from_tag(_parse_decimal(tokens[2], "encoding"))
    except UnknownEncodingError as exc:
        raise RecordParseError(str(exc), field="encoding") from exc
    payload: str = tokens[3]
    next_id: int | None = _parse_next_id(tokens[4])

    extra: list[str] = tokens[len(FIELD_NAMES) :]
    if extra:
        logger.debug("Ignoring %d trailing token(s) in line %r", len(extra), line)

    return ParsedRecord(
        channel_id=channel_id,
        id=record_id,
        encoding=encoding,
        raw_text=payload,
        next_id=next_id,
    )
