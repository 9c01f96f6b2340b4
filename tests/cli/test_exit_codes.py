# topmark:header:start
#
#   project      : PipeSeq
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: input and configuration failures map to sysexits-style codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pipeseq.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_USAGE_ERROR, run_cli, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path


def test_missing_input_file(isolation: Path) -> None:
    result = run_cli_in(isolation, ["run", "absent.txt"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "Input not found: absent.txt" in result.stderr


def test_directory_as_input_is_an_io_error(isolation: Path) -> None:
    (isolation / "subdir").mkdir()

    result = run_cli_in(isolation, ["run", "subdir"])

    assert result.exit_code == ExitCode.IO_ERROR, result.output


def test_malformed_config_file(isolation: Path) -> None:
    (isolation / "pipeseq.toml").write_text("[policy\n", encoding="utf-8")

    result = run_cli_in(isolation, ["run"], input_text="")

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "invalid TOML" in result.stderr


def test_non_boolean_config_value(isolation: Path) -> None:
    (isolation / "bad.toml").write_text('[policy]\ndiscard_invalid_sequence = "yes"\n')

    result = run_cli_in(isolation, ["run", "--config", "bad.toml"], input_text="")

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def test_verbose_and_quiet_are_mutually_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.stderr
