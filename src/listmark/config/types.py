# topmark:header:start
#
#   project      : ListMark
#   file         : types.py
#   file_relpath : src/listmark/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# Generic mapping accepted by config builders (CLI namespaces and API dicts alike).
ArgsLike = Mapping[str, Any]

TomlTable = dict[str, Any]


class ListKind(str, Enum):
    """Kinds of list the list renderers and the CLI can produce."""

    UNORDERED = "ul"
    ORDERED = "ol"
    DESCRIPTION = "dl"

    @classmethod
    def parse(cls, key: str | None) -> ListKind | None:
        """Find a member by value (``"ul"``) or case-insensitive name (``"ordered"``).

        Args:
            key (str | None): Value or member name, or None.

        Returns:
            ListKind | None: The matching member or None if the key is None or unmatched.
        """
        if key is None:
            return None
        candidate: str = key.strip()
        for member in cls:
            if member.value == candidate.lower() or member.name == candidate.upper():
                return member
        return None
