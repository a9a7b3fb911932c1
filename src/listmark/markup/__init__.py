# topmark:header:start
#
#   project      : ListMark
#   file         : __init__.py
#   file_relpath : src/listmark/markup/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup layer for ListMark.

Public modules:
    - listmark.markup.nodes
    - listmark.markup.tags
    - listmark.markup.serialize
"""

from __future__ import annotations
