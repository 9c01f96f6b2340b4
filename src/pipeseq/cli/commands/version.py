# topmark:header:start
#
#   project      : PipeSeq
#   file         : version.py
#   file_relpath : src/pipeseq/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PipeSeq `version` command.

Prints the current PipeSeq version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pipeseq.constants import PIPESEQ_VERSION

if TYPE_CHECKING:
    from pipeseq.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of PipeSeq.",
)
def version_command() -> None:
    """Show the current version of PipeSeq."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("PipeSeq version:", bold=True, underline=True))
        console.print(f"    {console.styled(PIPESEQ_VERSION, bold=True)}")
    else:
        console.print(console.styled(PIPESEQ_VERSION, bold=True))
