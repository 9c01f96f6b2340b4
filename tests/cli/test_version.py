# topmark:header:start
#
#   project      : PipeSeq
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `version` command and group help."""

from __future__ import annotations

from pipeseq.constants import PIPESEQ_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_installed_version() -> None:
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == PIPESEQ_VERSION


def test_version_verbose_has_a_title() -> None:
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert result.stdout.splitlines()[0] == "PipeSeq version:"
    assert PIPESEQ_VERSION in result.stdout


def test_group_without_subcommand_prints_help() -> None:
    result = run_cli([])

    assert_SUCCESS(result)
    assert "pipeseq run [INPUT]" in result.stdout
    assert "run" in result.stdout
    assert "version" in result.stdout
