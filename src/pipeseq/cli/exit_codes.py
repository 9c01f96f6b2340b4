# topmark:header:start
#
#   project      : PipeSeq
#   file         : exit_codes.py
#   file_relpath : src/pipeseq/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the PipeSeq CLI.

PipeSeq aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. The one deliberate divergence is
`REJECTED_RECORDS=2`, used by ``run --strict`` when input was dropped. It shares
its value with Click's own usage errors, which are told apart by the usage
banner they print on stderr.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the PipeSeq CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure (non-specific error).
        REJECTED_RECORDS: ``--strict`` run in which at least one line or record
            was dropped. The report is still printed.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading input. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Input cannot be read. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Malformed configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    REJECTED_RECORDS = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
