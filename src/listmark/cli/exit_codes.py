# topmark:header:start
#
#   project      : ListMark
#   file         : exit_codes.py
#   file_relpath : src/listmark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the ListMark CLI application.

Values follow BSD ``sysexits.h`` so shell scripts can interpret failures
consistently. Option parsing errors detected by `click` itself keep click's
exit code ``2``.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ListMark CLI.

    Usage:
        ```python
        import subprocess
        from listmark.cli.exit_codes import ExitCode

        result = subprocess.run(["listmark", "render", "items.toml"])
        if result.returncode == ExitCode.INPUT_ERROR:
            print("items.toml does not describe a list")
        ```
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    INPUT_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
