# topmark:header:start
#
#   project      : ListMark
#   file         : __init__.py
#   file_relpath : src/listmark/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ready-made renderers built on the ListMark pipeline.

Public modules:
    - listmark.rendering.lists
"""

from __future__ import annotations
