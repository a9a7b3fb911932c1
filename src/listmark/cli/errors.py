# topmark:header:start
#
#   project      : ListMark
#   file         : errors.py
#   file_relpath : src/listmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ListMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library exceptions (`listmark.errors`) are
    translated at the command boundary.
"""

from __future__ import annotations

import click

from listmark.cli.exit_codes import ExitCode


class ListmarkCliError(click.ClickException):
    """Base class for all ListMark CLI errors."""

    exit_code = ExitCode.FAILURE


class ListmarkUsageError(ListmarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ListmarkInputError(ListmarkCliError):
    """Error for input documents that do not describe a renderable list."""

    exit_code = ExitCode.INPUT_ERROR


class ListmarkFileNotFoundError(ListmarkCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ListmarkIOError(ListmarkCliError):
    """Error for I/O errors reading input files."""

    exit_code = ExitCode.IO_ERROR


class ListmarkConfigError(ListmarkCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
