# topmark:header:start
#
#   project      : PipeSeq
#   file         : __init__.py
#   file_relpath : src/pipeseq/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PipeSeq package.

PipeSeq reads tagged, out-of-order records, groups them into independent
pipelines, enforces each pipeline's declared sequence, decodes the payloads and
reports every pipeline's records in ascending order. It exposes both a CLI and a
small typed API (`ChannelTable`, `parse_line`, `decode`) for automation.
"""

from __future__ import annotations
