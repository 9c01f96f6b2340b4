# topmark:header:start
#
#   project      : PipeSeq
#   file         : reader.py
#   file_relpath : src/pipeseq/ingest/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line reader for record streams.

Input ends at the first blank line (empty or whitespace only) or at end of
stream, whichever comes first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def iter_lines(stream: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs up to the first blank line.

    Args:
        stream (Iterable[str]): A text stream or any iterable of lines. Line
            terminators are stripped.

    Yields:
        tuple[int, str]: The 1-based line number and the line text.
    """
    for number, raw in enumerate(stream, start=1):
        line: str = raw.rstrip("\r\n")
        if not line.strip():
            return
        yield number, line
