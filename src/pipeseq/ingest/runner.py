# topmark:header:start
#
#   project      : PipeSeq
#   file         : runner.py
#   file_relpath : src/pipeseq/ingest/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Drive a record stream through a channel table.

Unparsable lines are recorded as errors and skipped; every parsed record is
offered to the table. Nothing in the stream can abort the run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pipeseq.config.logging import get_logger
from pipeseq.ingest.parser import RecordParseError, parse_line
from pipeseq.ingest.reader import iter_lines

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pipeseq.config.logging import PipeseqLogger
    from pipeseq.diagnostic import FrozenDiagnosticLog
    from pipeseq.pipeline import ChannelTable, ParsedRecord

logger: PipeseqLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class IngestResult:
    """Summary of one ingest run.

    Attributes:
        lines_read (int): Non-blank lines consumed before the end of input.
        parse_failures (int): Lines that did not match the record grammar.
        records_rejected (int): Parsed records the table did not insert.
        diagnostics (FrozenDiagnosticLog): Parse errors and admission warnings,
            in input order.
    """

    lines_read: int
    parse_failures: int
    records_rejected: int
    diagnostics: FrozenDiagnosticLog

    @property
    def has_rejections(self) -> bool:
        """Return True if any line or record was dropped."""
        return self.parse_failures > 0 or self.records_rejected > 0


def ingest(stream: Iterable[str], table: ChannelTable) -> IngestResult:
    """Parse every line of ``stream`` and admit the records into ``table``.

    Parse errors are added to ``table.diagnostics`` so that they interleave with
    the table's own admission warnings in input order.

    Args:
        stream (Iterable[str]): Lines of input; reading stops at the first blank line.
        table (ChannelTable): The table to feed.

    Returns:
        IngestResult: Counts and diagnostics for the run.
    """
    lines_read: int = 0
    parse_failures: int = 0
    rejected_before: int = table.counts.rejected

    for number, line in iter_lines(stream):
        lines_read += 1
        try:
            parsed: ParsedRecord = parse_line(line)
        except RecordParseError as exc:
            parse_failures += 1
            table.diagnostics.add_error(f"line {number}: could not parse {line!r}: {exc}")
            logger.debug("Could not parse line %d %r: %s", number, line, exc)
            continue
        table.admit(parsed, origin=f"line {number}")

    logger.info("Read %d line(s), %d unparsable", lines_read, parse_failures)
    return IngestResult(
        lines_read=lines_read,
        parse_failures=parse_failures,
        records_rejected=table.counts.rejected - rejected_before,
        diagnostics=table.diagnostics.freeze(),
    )
