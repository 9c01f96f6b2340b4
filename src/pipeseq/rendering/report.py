# topmark:header:start
#
#   project      : PipeSeq
#   file         : report.py
#   file_relpath : src/pipeseq/rendering/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain-text rendering of channel reports.

The report lists every pipeline in ascending id order:

    Pipeline:0
    \t1| hello
    \t2| hello

Payloads are shown as UTF-8 text; bytes that are not valid UTF-8 are shown as
backslash escapes so the report stays printable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pipeseq.constants import PIPELINE_HEADER_PREFIX

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pipeseq.pipeline.report import ChannelReport, ReportLine


def format_body(body: bytes) -> str:
    """Return a printable form of a decoded payload."""
    return body.decode("utf-8", errors="backslashreplace")


def format_channel_header(report: ChannelReport) -> str:
    """Return the section header line for one pipeline."""
    return f"{PIPELINE_HEADER_PREFIX}{report.channel_id}"


def format_report_line(line: ReportLine) -> str:
    """Return the indented ``id| body`` line for one record."""
    return f"\t{line.id}| {format_body(line.body)}"


def format_report(reports: Iterable[ChannelReport]) -> str:
    """Render reports as newline-terminated text.

    Args:
        reports (Iterable[ChannelReport]): Reports in the order to print them.

    Returns:
        str: The report text; empty if there are no reports.
    """
    out: list[str] = []
    for report in reports:
        out.append(format_channel_header(report))
        out.extend(format_report_line(line) for line in report.lines)
    return "".join(f"{line}\n" for line in out)
