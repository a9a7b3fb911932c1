# topmark:header:start
#
#   project      : ListMark
#   file         : __init__.py
#   file_relpath : src/listmark/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ListMark rendering pipeline package.

This package contains the success/fallback pipeline and its entry points:

- [`listmark.pipeline.model`][listmark.pipeline.model]: the `Pipeline`
  container, its transformations and terminal operations.
- [`listmark.pipeline.constructors`][listmark.pipeline.constructors]: turning
  a source collection into a pipeline.
- [`listmark.pipeline.checks`][listmark.pipeline.checks]: predicates over
  nested collections.
"""

from __future__ import annotations

from listmark.pipeline.checks import is_empty
from listmark.pipeline.constructors import (
    error,
    items_of,
    pairs_of,
    parts_of,
    pipeline,
    try_items_of,
)
from listmark.pipeline.model import Branch, Pipeline

__all__ = [
    "Branch",
    "Pipeline",
    "error",
    "is_empty",
    "items_of",
    "pairs_of",
    "parts_of",
    "pipeline",
    "try_items_of",
]
