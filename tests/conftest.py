# topmark:header:start
#
#   project      : PipeSeq
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PipeSeq test suite.

This file sets up global fixtures and shared builders. Logging is configured at
TRACE for the whole run so that failing tests show the admission trail.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from pipeseq.codec import Encoding
from pipeseq.config import logging
from pipeseq.pipeline import ParsedRecord

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return cast("Callable[[F], F]", pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_pipeseq_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure PipeSeq's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty project directory (no config files to discover).

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_record(
    channel_id: int,
    record_id: int,
    text: str,
    next_id: int | None,
    *,
    encoding: Encoding = Encoding.ASCII,
) -> ParsedRecord:
    """Return a `ParsedRecord` with positional shorthand for table tests."""
    return ParsedRecord(
        channel_id=channel_id,
        id=record_id,
        encoding=encoding,
        raw_text=text,
        next_id=next_id,
    )
