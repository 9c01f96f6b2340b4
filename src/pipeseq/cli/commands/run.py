# topmark:header:start
#
#   project      : PipeSeq
#   file         : run.py
#   file_relpath : src/pipeseq/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PipeSeq `run` command.

Reads record lines from a file or STDIN until the first blank line, admits them
into a fresh channel table and prints the per-pipeline report to stdout.

Input errors map to sysexits-style exit codes (see `pipeseq.cli.exit_codes`).
Malformed lines and rejected records never fail the run unless ``--strict`` is
given. Bytes that are not valid UTF-8 are carried through to ASCII payloads
unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pipeseq.cli.emitters import emit_diagnostics, emit_report, emit_summary
from pipeseq.cli.errors import (
    PipeseqConfigError,
    PipeseqFileNotFoundError,
    PipeseqIOError,
    PipeseqPermissionDeniedError,
)
from pipeseq.cli.exit_codes import ExitCode
from pipeseq.cli.options import common_config_options
from pipeseq.config import ConfigLoadError, MutablePolicy, load_policy
from pipeseq.config.logging import get_logger
from pipeseq.ingest import ingest
from pipeseq.pipeline import ChannelTable

if TYPE_CHECKING:
    from pipeseq.cli.console_api import ConsoleLike
    from pipeseq.config import Policy
    from pipeseq.config.logging import PipeseqLogger
    from pipeseq.ingest import IngestResult
    from pipeseq.pipeline import ChannelReport

logger: PipeseqLogger = get_logger(__name__)

STDIN_MARKER = "-"

# Bytes that are not valid UTF-8 reach the decoder as escaped code points and are
# restored there, so a stray byte never aborts the run.
INPUT_ERRORS = "surrogateescape"


def resolve_run_policy(
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
    discard_invalid_sequence: bool | None,
) -> Policy:
    """Resolve the effective policy: defaults, then config files, then the CLI flag.

    Raises:
        PipeseqConfigError: If a configuration file cannot be loaded.
    """
    try:
        merged: MutablePolicy = load_policy(
            [Path(p) for p in config_paths],
            discover=not no_config,
        )
    except ConfigLoadError as exc:
        raise PipeseqConfigError(str(exc)) from exc

    merged = merged.merge_with(MutablePolicy(discard_invalid_sequence=discard_invalid_sequence))
    policy: Policy = merged.resolve()
    logger.debug("Effective policy: %s", policy)
    return policy


def ingest_input(input_path: str, table: ChannelTable) -> IngestResult:
    """Feed the lines of ``input_path`` (or STDIN for ``-``) into ``table``.

    Raises:
        PipeseqFileNotFoundError: If the input file does not exist.
        PipeseqPermissionDeniedError: If the input file cannot be read.
        PipeseqIOError: On any other I/O failure.
    """
    try:
        if input_path == STDIN_MARKER:
            stdin = click.get_text_stream("stdin", encoding="utf-8", errors=INPUT_ERRORS)
            return ingest(stdin, table)
        with Path(input_path).open(encoding="utf-8", errors=INPUT_ERRORS) as stream:
            return ingest(stream, table)
    except FileNotFoundError as exc:
        raise PipeseqFileNotFoundError(f"Input not found: {input_path}") from exc
    except PermissionError as exc:
        raise PipeseqPermissionDeniedError(f"Permission denied: {input_path}") from exc
    except OSError as exc:
        raise PipeseqIOError(f"Cannot read {input_path}: {exc.strerror or exc}") from exc


@click.command(
    name="run",
    help="Reassemble record lines from INPUT (default: STDIN) and print the per-pipeline report.",
)
@click.argument("input_path", metavar="INPUT", required=False, default=STDIN_MARKER)
@click.option(
    "--discard-invalid-sequence/--accept-invalid-sequence",
    "discard_invalid_sequence",
    default=None,
    help="Reject records whose id differs from the expected next id (overrides config).",
)
@common_config_options
@click.option(
    "--summary",
    is_flag=True,
    default=False,
    help="Print outcome and diagnostic counts after the report.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help=f"Exit with code {int(ExitCode.REJECTED_RECORDS)} if any line or record was dropped.",
)
@click.pass_context
def run_command(
    ctx: click.Context,
    *,
    input_path: str,
    discard_invalid_sequence: bool | None,
    config_paths: tuple[str, ...],
    no_config: bool,
    summary: bool,
    strict: bool,
) -> None:
    """Reassemble record lines and print the report.

    Args:
        ctx (click.Context): The Click context (holds the console and verbosity).
        input_path (str): Path to read, or ``-`` for STDIN.
        discard_invalid_sequence (bool | None): CLI override of the policy flag.
        config_paths (tuple[str, ...]): Extra config files, merged in order.
        no_config (bool): Skip config discovery in the current directory.
        summary (bool): Print counts after the report.
        strict (bool): Turn dropped input into a non-zero exit code.
    """
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    policy: Policy = resolve_run_policy(
        config_paths=config_paths,
        no_config=no_config,
        discard_invalid_sequence=discard_invalid_sequence,
    )
    table = ChannelTable(policy)
    result: IngestResult = ingest_input(input_path, table)
    reports: list[ChannelReport] = table.render()

    emit_report(console, reports)
    if vlevel > 0:
        emit_diagnostics(console, result.diagnostics)
    if summary:
        emit_summary(console, table.counts, result)

    logger.info(
        "Run finished: %d line(s), %d parse failure(s), %d rejected record(s)",
        result.lines_read,
        result.parse_failures,
        result.records_rejected,
    )
    if strict and result.has_rejections:
        ctx.exit(ExitCode.REJECTED_RECORDS)
