# topmark:header:start
#
#   project      : Tic80Wrap
#   file         : exit_codes.py
#   file_relpath : src/tic80wrap/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Tic80Wrap CLI.

Tic80Wrap aligns with the BSD `sysexits` convention so other tooling (build
scripts, CI) can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Tic80Wrap CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Cartridge is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Cartridge does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: Other I/O error reading the cartridge. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Cartridge is not readable. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid options or config file. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
