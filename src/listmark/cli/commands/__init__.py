# topmark:header:start
#
#   project      : ListMark
#   file         : __init__.py
#   file_relpath : src/listmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ListMark CLI subcommands."""

from __future__ import annotations
