# topmark:header:start
#
#   project      : ListMark
#   file         : __init__.py
#   file_relpath : src/listmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for ListMark (built on `click`)."""

from __future__ import annotations
