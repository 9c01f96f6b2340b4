# topmark:header:start
#
#   project      : PipeSeq
#   file         : keys.py
#   file_relpath : src/pipeseq/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for PipeSeq configuration.

These constants are the external configuration API as it appears in
``pipeseq.toml`` and in ``[tool.pipeseq]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by PipeSeq configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_PIPESEQ: Final[str] = "pipeseq"

    # [policy]
    SECTION_POLICY: Final[str] = "policy"

    KEY_POLICY_DISCARD_INVALID_SEQUENCE: Final[str] = "discard_invalid_sequence"
