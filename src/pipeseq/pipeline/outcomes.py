# topmark:header:start
#
#   project      : PipeSeq
#   file         : outcomes.py
#   file_relpath : src/pipeseq/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Admission outcomes and their counting helpers.

Outcomes are values with a human-readable label and a color; they never drive
later admission logic. Counting is presentation-free so that the CLI summary and
tests can share it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from yachalk import chalk

from pipeseq.core.enum_mixins import EnumIntrospectionMixin
from pipeseq.rendering.colored_enum import ColoredStrEnum


class AdmissionOutcome(EnumIntrospectionMixin, ColoredStrEnum):
    """What happened to one record offered to the channel table."""

    ACCEPTED = ("accepted", chalk.green)
    IGNORED_CLOSED = ("ignored: pipeline closed", chalk.yellow)
    IGNORED_OUT_OF_SEQUENCE = ("ignored: out of sequence", chalk.yellow)
    IGNORED_DECODE_FAILED = ("ignored: decode failed", chalk.red)

    @property
    def admitted(self) -> bool:
        """Return True if the record was inserted into its pipeline."""
        return self is AdmissionOutcome.ACCEPTED


@dataclass
class OutcomeCounts:
    """Per-outcome tally for one run."""

    counts: dict[AdmissionOutcome, int] = field(
        default_factory=lambda: dict.fromkeys(AdmissionOutcome, 0)
    )

    def add(self, outcome: AdmissionOutcome) -> None:
        """Count one more record with ``outcome``."""
        self.counts[outcome] += 1

    def __getitem__(self, outcome: AdmissionOutcome) -> int:
        """Return the count for ``outcome``."""
        return self.counts[outcome]

    @property
    def total(self) -> int:
        """Return the number of records offered to the table."""
        return sum(self.counts.values())

    @property
    def rejected(self) -> int:
        """Return the number of records that were not inserted."""
        return self.total - self.counts[AdmissionOutcome.ACCEPTED]

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts keyed by outcome member name."""
        return {outcome.name.lower(): n for outcome, n in self.counts.items()}
