# topmark:header:start
#
#   project      : PipeSeq
#   file         : constants.py
#   file_relpath : src/pipeseq/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PipeSeq Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

PIPESEQ_VERSION: str = get_version("pipeseq")

# Configuration file names looked up in the working directory:
PIPESEQ_TOML_NAME: Final[str] = "pipeseq.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# Identifiers on the wire are 8-bit unsigned integers.
U8_MAX: Final[int] = 255

# Wire sentinel for "no successor" in the next-id field.
NO_NEXT_ID_SENTINEL: Final[str] = "-1"

# Report section header prefix, followed by the pipeline identifier.
PIPELINE_HEADER_PREFIX: Final[str] = "Pipeline:"
