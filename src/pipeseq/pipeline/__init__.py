# topmark:header:start
#
#   project      : PipeSeq
#   file         : __init__.py
#   file_relpath : src/pipeseq/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline state machine: records, channels, admission and report rendering.

Typical use:

    table = ChannelTable(Policy(discard_invalid_sequence=True))
    for parsed in records:
        table.admit(parsed)
    reports = table.render()
"""

from __future__ import annotations

from pipeseq.pipeline.model import Channel, ParsedRecord, Record
from pipeseq.pipeline.outcomes import AdmissionOutcome, OutcomeCounts
from pipeseq.pipeline.report import ChannelReport, ReportLine
from pipeseq.pipeline.table import ChannelTable, TableDrainedError

__all__ = [
    "AdmissionOutcome",
    "Channel",
    "ChannelReport",
    "ChannelTable",
    "OutcomeCounts",
    "ParsedRecord",
    "Record",
    "ReportLine",
    "TableDrainedError",
]
