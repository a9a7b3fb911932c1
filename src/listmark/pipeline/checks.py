# topmark:header:start
#
#   project      : ListMark
#   file         : checks.py
#   file_relpath : src/listmark/pipeline/checks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small predicates over nested collections."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sized


def is_empty(groups: Iterable[Sized]) -> bool:
    """Return whether every inner collection of ``groups`` is empty.

    The scan stops at the first non-empty group. An empty outer collection
    counts as empty.

    Args:
        groups (Iterable[Sized]): Collection of collections, e.g. ``[[], [1]]``.

    Returns:
        bool: ``True`` if there is nothing to render in any group.
    """
    return not any(len(group) for group in groups)
