# topmark:header:start
#
#   project      : PipeSeq
#   file         : __init__.py
#   file_relpath : src/pipeseq/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer: admission policy, TOML loading and logging setup."""

from __future__ import annotations

from pipeseq.config.loaders import ConfigLoadError, load_policy, load_policy_file
from pipeseq.config.policy import MutablePolicy, Policy

__all__ = [
    "ConfigLoadError",
    "MutablePolicy",
    "Policy",
    "load_policy",
    "load_policy_file",
]
