# topmark:header:start
#
#   project      : ListMark
#   file         : __init__.py
#   file_relpath : src/listmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for ListMark.

This package defines the immutable `RenderConfig` snapshot and its mutable
builder, TOML loading via `tomlkit` (``listmark.toml`` or the
``[tool.listmark]`` table of ``pyproject.toml``), and the logging setup.
"""

from __future__ import annotations

from listmark.config.model import (
    MutableRenderConfig,
    RenderConfig,
    discover_config_file,
)
from listmark.config.types import ListKind

__all__ = [
    "ListKind",
    "MutableRenderConfig",
    "RenderConfig",
    "discover_config_file",
]
