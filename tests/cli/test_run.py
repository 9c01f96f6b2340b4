# topmark:header:start
#
#   project      : PipeSeq
#   file         : test_run.py
#   file_relpath : tests/cli/test_run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `pipeseq run`: report output, policy flags and config files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_REJECTED_RECORDS, assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

SCENARIO = "0 1 0 hello 2\n0 2 1 68656c6c6f -1\n\n"

OUT_OF_SEQUENCE = "0 1 0 a 2\n0 5 0 e 6\n0 6 0 f -1\n"


def test_run_reads_stdin_and_prints_report(isolation: Path) -> None:
    result = run_cli_in(isolation, ["run"], input_text=SCENARIO)

    assert_SUCCESS(result)
    assert result.stdout == "Pipeline:0\n\t1| hello\n\t2| hello\n"


def test_run_dash_means_stdin(isolation: Path) -> None:
    result = run_cli_in(isolation, ["run", "-"], input_text=SCENARIO)

    assert_SUCCESS(result)
    assert result.stdout.startswith("Pipeline:0\n")


def test_run_reads_file(isolation: Path) -> None:
    (isolation / "records.txt").write_text("1 2 0 b -1\n1 1 0 a 2\n0 1 0 z -1\n", encoding="utf-8")

    result = run_cli_in(isolation, ["run", "records.txt"])

    assert_SUCCESS(result)
    assert result.stdout == "Pipeline:0\n\t1| z\nPipeline:1\n\t1| a\n\t2| b\n"


def test_run_crlf_input(isolation: Path) -> None:
    result = run_cli_in(isolation, ["run"], input_text=SCENARIO.replace("\n", "\r\n"))

    assert_SUCCESS(result)
    assert result.stdout == "Pipeline:0\n\t1| hello\n\t2| hello\n"


def test_run_empty_input_prints_nothing(isolation: Path) -> None:
    result = run_cli_in(isolation, ["run"], input_text="")

    assert_SUCCESS(result)
    assert result.stdout == ""


def test_run_accepts_out_of_sequence_by_default(isolation: Path) -> None:
    result = run_cli_in(isolation, ["run"], input_text=OUT_OF_SEQUENCE)

    assert_SUCCESS(result)
    assert result.stdout == "Pipeline:0\n\t1| a\n\t5| e\n\t6| f\n"


def test_run_discard_flag_drops_out_of_sequence(isolation: Path) -> None:
    result = run_cli_in(isolation, ["run", "--discard-invalid-sequence"], input_text=OUT_OF_SEQUENCE)

    assert_SUCCESS(result)
    assert result.stdout == "Pipeline:0\n\t1| a\n\t6| f\n"


def test_run_discard_from_pipeseq_toml(isolation: Path) -> None:
    (isolation / "pipeseq.toml").write_text(
        "[policy]\ndiscard_invalid_sequence = true\n", encoding="utf-8"
    )

    result = run_cli_in(isolation, ["run"], input_text=OUT_OF_SEQUENCE)

    assert_SUCCESS(result)
    assert "\t5| e" not in result.stdout


def test_run_cli_flag_overrides_config(isolation: Path) -> None:
    (isolation / "pipeseq.toml").write_text(
        "[policy]\ndiscard_invalid_sequence = true\n", encoding="utf-8"
    )

    result = run_cli_in(
        isolation, ["run", "--accept-invalid-sequence"], input_text=OUT_OF_SEQUENCE
    )

    assert_SUCCESS(result)
    assert "\t5| e" in result.stdout


def test_run_no_config_skips_discovery(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text(
        "[tool.pipeseq.policy]\ndiscard_invalid_sequence = true\n", encoding="utf-8"
    )

    result = run_cli_in(isolation, ["run", "--no-config"], input_text=OUT_OF_SEQUENCE)

    assert_SUCCESS(result)
    assert "\t5| e" in result.stdout


def test_run_explicit_config_file(isolation: Path) -> None:
    (isolation / "strict.toml").write_text(
        "[policy]\ndiscard_invalid_sequence = true\n", encoding="utf-8"
    )

    result = run_cli_in(
        isolation, ["run", "--no-config", "--config", "strict.toml"], input_text=OUT_OF_SEQUENCE
    )

    assert_SUCCESS(result)
    assert "\t5| e" not in result.stdout


def test_run_bad_lines_do_not_fail_the_run(isolation: Path) -> None:
    result = run_cli_in(isolation, ["run"], input_text="nonsense\n0 1 1 ABC -1\n3 1 0 ok -1\n")

    assert_SUCCESS(result)
    assert result.stdout == "Pipeline:0\nPipeline:3\n\t1| ok\n"
    assert result.stderr == ""


def test_run_verbose_prints_diagnostics_to_stderr(isolation: Path) -> None:
    result = run_cli_in(
        isolation, ["-v", "--no-color", "run"], input_text="nonsense\n0 1 1 ABC -1\n"
    )

    assert_SUCCESS(result)
    lines = result.stderr.splitlines()
    assert lines[0].startswith("[error] line 1: could not parse 'nonsense'")
    assert lines[1].startswith("[warning] line 2: pipeline 0, record 1: ignored: decode failed")
    assert "Invalid hex payload" in lines[1]


def test_run_summary(isolation: Path) -> None:
    result = run_cli_in(
        isolation,
        ["--no-color", "run", "--summary", "--discard-invalid-sequence"],
        input_text=OUT_OF_SEQUENCE + "bad line\n",
    )

    assert_SUCCESS(result)
    assert "Summary:" in result.stdout
    summary = result.stdout.split("Summary:", 1)[1]
    assert "lines read" in summary
    assert "accepted" in summary
    assert "ignored: out of sequence" in summary
    assert "1 error(s), 1 warning(s)" in summary


def test_run_strict_exits_with_rejected_records(isolation: Path) -> None:
    result = run_cli_in(
        isolation, ["run", "--strict", "--discard-invalid-sequence"], input_text=OUT_OF_SEQUENCE
    )

    assert_REJECTED_RECORDS(result)
    # The report is still printed.
    assert result.stdout == "Pipeline:0\n\t1| a\n\t6| f\n"


def test_run_strict_succeeds_on_clean_input(isolation: Path) -> None:
    result = run_cli_in(isolation, ["run", "--strict"], input_text=SCENARIO)

    assert_SUCCESS(result)


def test_run_invalid_utf8_byte_does_not_abort(isolation: Path) -> None:
    (isolation / "records.txt").write_bytes(b"0 1 0 hello 2\n0 2 0 caf\xe9 3\n0 3 0 ok -1\n")

    result = run_cli_in(isolation, ["run", "--strict", "records.txt"])

    assert_SUCCESS(result)
    assert result.stdout == "Pipeline:0\n\t1| hello\n\t2| caf\\xe9\n\t3| ok\n"


def test_run_invalid_utf8_byte_on_stdin(isolation: Path) -> None:
    result = run_cli_in(isolation, ["run"], input_text=b"0 1 0 \xff\xfe -1\n")

    assert_SUCCESS(result)
    assert result.stdout == "Pipeline:0\n\t1| \\xff\\xfe\n"
