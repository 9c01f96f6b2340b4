# topmark:header:start
#
#   project      : PipeSeq
#   file         : __init__.py
#   file_relpath : src/pipeseq/ingest/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input side of PipeSeq: reading lines, parsing records, feeding the channel table."""

from __future__ import annotations

from pipeseq.ingest.parser import RecordParseError, parse_line
from pipeseq.ingest.reader import iter_lines
from pipeseq.ingest.runner import IngestResult, ingest

__all__ = [
    "IngestResult",
    "RecordParseError",
    "ingest",
    "iter_lines",
    "parse_line",
]
