# topmark:header:start
#
#   project      : PipeSeq
#   file         : __main__.py
#   file_relpath : src/pipeseq/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PipeSeq via ``python -m pipeseq``.

It delegates directly to :func:`pipeseq.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how PipeSeq is launched.

Examples:
    Reorder records read from a file::

        python -m pipeseq run records.txt
"""

from __future__ import annotations

from pipeseq.cli.main import cli

if __name__ == "__main__":
    cli()
