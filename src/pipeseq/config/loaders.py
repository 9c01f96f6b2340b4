# topmark:header:start
#
#   project      : PipeSeq
#   file         : loaders.py
#   file_relpath : src/pipeseq/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module reads the admission policy from:
- ``pipeseq.toml`` (top-level ``[policy]`` table), and
- ``pyproject.toml`` (``[tool.pipeseq.policy]`` table).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from pipeseq.config.keys import Toml
from pipeseq.config.logging import get_logger
from pipeseq.config.policy import MutablePolicy, policy_from_toml_table
from pipeseq.constants import PIPESEQ_TOML_NAME, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pipeseq.config.logging import PipeseqLogger

TomlTable = dict[str, Any]

logger: PipeseqLogger = get_logger(__name__)


class ConfigLoadError(ValueError):
    """Raised when a configuration file cannot be read or holds invalid values."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``pipeseq.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigLoadError(path, f"cannot read file ({e.strerror or e})") from e
    except TomlkitParseError as e:
        raise ConfigLoadError(path, f"invalid TOML ({e})") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_pipeseq_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the PipeSeq table of a parsed document, or None if absent.

    ``pyproject.toml`` nests the configuration under ``[tool.pipeseq]``; any other
    file name is treated as a dedicated ``pipeseq.toml`` document.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    section: Any = cast("TomlTable", tool).get(Toml.SECTION_TOOL_PIPESEQ)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def load_policy_file(path: Path) -> MutablePolicy:
    """Read the ``[policy]`` table from one configuration file.

    Args:
        path (Path): Configuration file to read.

    Returns:
        MutablePolicy: The policy values found in the file (unset when absent).

    Raises:
        ConfigLoadError: If the file is unreadable, malformed, or holds a
            non-boolean policy value.
    """
    data: TomlTable = load_toml_dict(path)
    section: TomlTable | None = extract_pipeseq_table(path, data)
    if section is None:
        logger.debug("No [tool.%s] table in %s", Toml.SECTION_TOOL_PIPESEQ, path)
        return MutablePolicy()

    policy_tbl: Any = section.get(Toml.SECTION_POLICY, {})
    if not isinstance(policy_tbl, dict):
        raise ConfigLoadError(path, f"[{Toml.SECTION_POLICY}] must be a table")
    unknown: list[str] = sorted(set(policy_tbl) - {Toml.KEY_POLICY_DISCARD_INVALID_SEQUENCE})
    if unknown:
        logger.warning("Ignoring unknown [%s] key(s) in %s: %s", Toml.SECTION_POLICY, path, unknown)
    try:
        policy: MutablePolicy = policy_from_toml_table(cast("TomlTable", policy_tbl))
    except TypeError as e:
        raise ConfigLoadError(path, str(e)) from e
    logger.debug("Loaded policy from %s: %r", path, policy)
    return policy


def discover_config_files(cwd: Path) -> list[Path]:
    """Return the configuration files found in ``cwd``.

    ``pyproject.toml`` is returned before ``pipeseq.toml`` so the dedicated file
    wins when both set the same key.
    """
    found: list[Path] = []
    for name in (PYPROJECT_TOML_NAME, PIPESEQ_TOML_NAME):
        candidate: Path = cwd / name
        if candidate.is_file():
            found.append(candidate)
    logger.trace("Discovered config files in %s: %s", cwd, found)
    return found


def load_policy(
    paths: Iterable[Path] = (),
    *,
    discover: bool = True,
    cwd: Path | None = None,
) -> MutablePolicy:
    """Merge the policy from discovered and explicit configuration files.

    Resolution order (last wins): discovered files in ``cwd``, then ``paths``
    in the order given.

    Args:
        paths (Iterable[Path]): Explicit configuration files.
        discover (bool): Whether to look for config files in ``cwd``.
        cwd (Path | None): Directory to search; defaults to the current directory.

    Returns:
        MutablePolicy: The merged, still tri-state, policy.
    """
    sources: list[Path] = discover_config_files(cwd or Path.cwd()) if discover else []
    sources.extend(paths)

    merged = MutablePolicy()
    for path in sources:
        merged = merged.merge_with(load_policy_file(path))
    return merged
