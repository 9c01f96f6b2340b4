# topmark:header:start
#
#   project      : PipeSeq
#   file         : report.py
#   file_relpath : src/pipeseq/pipeline/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendered report values produced by draining the channel table."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReportLine:
    """One drained record: its identifier and decoded payload."""

    id: int
    body: bytes


@dataclass(frozen=True, slots=True)
class ChannelReport:
    """All drained records of one pipeline, in ascending id order."""

    channel_id: int
    lines: tuple[ReportLine, ...]

    @property
    def ids(self) -> list[int]:
        """Return the record ids in report order."""
        return [line.id for line in self.lines]
