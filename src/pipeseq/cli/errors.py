# topmark:header:start
#
#   project      : PipeSeq
#   file         : errors.py
#   file_relpath : src/pipeseq/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PipeSeq CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. They prefer the project console if available (see
`show()`); otherwise they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from pipeseq.cli.exit_codes import ExitCode


class PipeseqError(click.ClickException):
    """Base class for all PipeSeq CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class PipeseqUsageError(PipeseqError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PipeseqConfigError(PipeseqError):
    """Error for configuration errors (unreadable/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class PipeseqFileNotFoundError(PipeseqError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PipeseqPermissionDeniedError(PipeseqError):
    """Error for insufficient permissions to read the input."""

    exit_code = ExitCode.PERMISSION_DENIED


class PipeseqIOError(PipeseqError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.IO_ERROR
