# topmark:header:start
#
#   project      : PipeSeq
#   file         : table.py
#   file_relpath : src/pipeseq/pipeline/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The channel table: admission policy and report rendering.

`ChannelTable` owns one `Channel` per pipeline id ever seen. Each call to
`ChannelTable.admit` runs these rules in order:

1. Look up (or lazily create) the record's pipeline.
2. A closed pipeline ignores the record; nothing else changes.
3. If the pipeline expects a different id and the policy discards invalid
   sequences, the record is ignored. Otherwise the mismatch is only logged.
4. The payload is decoded; on failure the record is ignored.
5. A decoded record is pushed into the pipeline's buffer.
6. Unless the pipeline was closed, the sequence cursor moves to the record's
   ``next_id``, and an absent ``next_id`` closes the pipeline.

Step 6 also runs for out-of-sequence and undecodable records, so a sender whose
pointers are intact keeps making progress. This is a deliberate departure from
the older behavior of returning before the cursor update for an out-of-sequence
record, which left the pipeline waiting for an id that might never come.

`ChannelTable.render` drains every pipeline once. The table is not thread-safe:
concurrent producers must serialize their `admit` calls.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from pipeseq.codec import DecodeError, decode
from pipeseq.config.logging import get_logger
from pipeseq.config.policy import Policy
from pipeseq.diagnostic import DiagnosticLog
from pipeseq.pipeline.model import Channel, Record
from pipeseq.pipeline.outcomes import AdmissionOutcome, OutcomeCounts
from pipeseq.pipeline.report import ChannelReport, ReportLine

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from pipeseq.config.logging import PipeseqLogger
    from pipeseq.pipeline.model import ParsedRecord

logger: PipeseqLogger = get_logger(__name__)


class TableDrainedError(RuntimeError):
    """Raised when a drained channel table is admitted to or rendered again."""


class ChannelTable:
    """All pipelines of one run, keyed by pipeline id.

    Args:
        policy (Policy | None): Admission policy; defaults to ``Policy()``.
        diagnostics (DiagnosticLog | None): Log to record ignored records in; a
            new log is created if omitted.

    Attributes:
        policy (Policy): The admission policy in effect.
        diagnostics (DiagnosticLog): One warning per ignored record.
        counts (OutcomeCounts): Tally of admission outcomes.
    """

    policy: Policy
    diagnostics: DiagnosticLog
    counts: OutcomeCounts

    def __init__(
        self,
        policy: Policy | None = None,
        *,
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        self.policy = policy or Policy()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self.counts = OutcomeCounts()
        self._channels: dict[int, Channel] = {}
        self._drained = False

    @property
    def drained(self) -> bool:
        """Return True once `render` has run."""
        return self._drained

    @property
    def channels(self) -> Mapping[int, Channel]:
        """Return a read-only view of the pipelines seen so far, keyed by id."""
        return MappingProxyType(self._channels)

    def get(self, channel_id: int) -> Channel | None:
        """Return the pipeline for ``channel_id`` if it has been seen."""
        return self._channels.get(channel_id)

    def __contains__(self, channel_id: object) -> bool:
        """Return True if ``channel_id`` has been seen."""
        return channel_id in self._channels

    def __len__(self) -> int:
        """Return the number of pipelines seen."""
        return len(self._channels)

    def __iter__(self) -> Iterator[int]:
        """Iterate over pipeline ids in ascending order."""
        return iter(sorted(self._channels))

    def _channel_for(self, channel_id: int) -> Channel:
        channel: Channel | None = self._channels.get(channel_id)
        if channel is None:
            channel = Channel(id=channel_id)
            self._channels[channel_id] = channel
            logger.trace("pipeline %d: created", channel_id)
        return channel

    def _check_not_drained(self, action: str) -> None:
        if self._drained:
            raise TableDrainedError(f"Cannot {action}: the channel table was already rendered")

    def _finish(
        self,
        record: ParsedRecord,
        outcome: AdmissionOutcome,
        reason: str | None,
        origin: str | None,
    ) -> AdmissionOutcome:
        self.counts.add(outcome)
        if reason is not None:
            prefix: str = f"{origin}: " if origin else ""
            self.diagnostics.add_warning(
                f"{prefix}pipeline {record.channel_id}, record {record.id}: "
                f"{outcome.value} ({reason})"
            )
            logger.debug("Record %r was ignored: %s", record, reason)
        else:
            logger.trace("Record %r: %s", record, outcome.value)
        return outcome

    def admit(self, record: ParsedRecord, *, origin: str | None = None) -> AdmissionOutcome:
        """Offer one parsed record to its pipeline.

        Args:
            record (ParsedRecord): The record to admit.
            origin (str | None): Where the record came from (e.g. ``"line 3"``);
                prefixed to diagnostics.

        Returns:
            AdmissionOutcome: What happened to the record. The outcome is also
            counted in `counts`, and ignored records add a warning to `diagnostics`.

        Raises:
            TableDrainedError: If the table was already rendered.
        """
        self._check_not_drained("admit a record")
        channel: Channel = self._channel_for(record.channel_id)

        if channel.closed:
            return self._finish(
                record, AdmissionOutcome.IGNORED_CLOSED, "pipeline is closed", origin
            )

        outcome: AdmissionOutcome = AdmissionOutcome.ACCEPTED
        reason: str | None = None

        if not channel.expects(record.id):
            if self.policy.discard_invalid_sequence:
                outcome = AdmissionOutcome.IGNORED_OUT_OF_SEQUENCE
                reason = f"expected id {channel.expected_next}"
            else:
                logger.debug(
                    "pipeline %d: record %d accepted although id %s was expected",
                    channel.id,
                    record.id,
                    channel.expected_next,
                )

        if outcome is AdmissionOutcome.ACCEPTED:
            try:
                body: bytes = decode(record.encoding, record.raw_text)
            except DecodeError as exc:
                outcome = AdmissionOutcome.IGNORED_DECODE_FAILED
                reason = str(exc)
            else:
                channel.push(Record(id=record.id, body=body))

        channel.advance(record.next_id)
        return self._finish(record, outcome, reason, origin)

    def render(self) -> list[ChannelReport]:
        """Drain every pipeline into a report, in ascending pipeline id order.

        Within a pipeline, records are reported in ascending id order; records
        sharing an id keep their arrival order. Pipelines without admitted
        records still get an (empty) report.

        Returns:
            list[ChannelReport]: One report per pipeline seen.

        Raises:
            TableDrainedError: If the table was already rendered.
        """
        self._check_not_drained("render")
        self._drained = True

        reports: list[ChannelReport] = [
            ChannelReport(
                channel_id=channel_id,
                lines=tuple(
                    ReportLine(id=r.id, body=r.body) for r in self._channels[channel_id].drain()
                ),
            )
            for channel_id in sorted(self._channels)
        ]
        logger.info(
            "Rendered %d pipeline(s), %d record(s)",
            len(reports),
            sum(len(r.lines) for r in reports),
        )
        return reports
