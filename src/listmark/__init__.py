# topmark:header:start
#
#   project      : ListMark
#   file         : __init__.py
#   file_relpath : src/listmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ListMark package.

ListMark is a small combinator library for rendering collections of data into
markup trees, with a uniform way to express what to render when a collection
turns out to be empty. It exposes a typed Python API and a thin CLI.
"""

from __future__ import annotations
