# topmark:header:start
#
#   project      : ListMark
#   file         : errors.py
#   file_relpath : src/listmark/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library-level exceptions for ListMark.

The pipeline combinators never raise: an empty collection is a rendering
branch, not an error. The exceptions below cover the layers around the core
(tag construction and configuration loading). The CLI translates them into
`click` exceptions with stable exit codes (see `listmark.cli.errors`).
"""

from __future__ import annotations


class ListmarkError(Exception):
    """Base class for all ListMark library errors."""


class MarkupError(ListmarkError):
    """Error for invalid markup construction (e.g. a malformed tag name)."""


class ConfigError(ListmarkError):
    """Error for unreadable, malformed or invalid configuration."""
