# topmark:header:start
#
#   project      : PipeSeq
#   file         : emitters.py
#   file_relpath : src/pipeseq/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable emitters for the `run` command.

The report itself is never colored so that it stays byte-for-byte comparable;
only diagnostics and the optional summary use color (when enabled).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pipeseq.pipeline import AdmissionOutcome
from pipeseq.rendering.report import format_report

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pipeseq.cli.console_api import ConsoleLike
    from pipeseq.diagnostic import DiagnosticsLike
    from pipeseq.ingest import IngestResult
    from pipeseq.pipeline import ChannelReport, OutcomeCounts


def emit_report(console: ConsoleLike, reports: Sequence[ChannelReport]) -> None:
    """Print the rendered report to stdout."""
    console.print(format_report(reports), nl=False)


def emit_diagnostics(console: ConsoleLike, diagnostics: DiagnosticsLike) -> None:
    """Print each diagnostic on its own line to stderr, colored by level."""
    for diag in diagnostics:
        prefix = f"[{diag.level.value}]"
        if console.enable_color:
            prefix = diag.level.color(prefix)
        console.warn(f"{prefix} {diag.message}")


def emit_summary(console: ConsoleLike, counts: OutcomeCounts, result: IngestResult) -> None:
    """Print outcome and diagnostic counts after the report."""
    width = max(AdmissionOutcome.ACCEPTED.value_length, len("parse failures"))
    stats = result.diagnostics.stats()

    console.print(console.styled("Summary:", bold=True))
    console.print(f"  {'lines read'.ljust(width)} : {result.lines_read}")
    console.print(f"  {'parse failures'.ljust(width)} : {result.parse_failures}")
    for outcome in AdmissionOutcome:
        label = outcome.value.ljust(width)
        if console.enable_color:
            label = outcome.color(label)
        console.print(f"  {label} : {counts[outcome]}")
    console.print(
        f"  {'diagnostics'.ljust(width)} : "
        f"{stats.n_error} error(s), {stats.n_warning} warning(s), {stats.n_info} info"
    )
