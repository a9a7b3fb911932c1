# topmark:header:start
#
#   project      : ListMark
#   file         : constants.py
#   file_relpath : src/listmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ListMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LISTMARK_VERSION: str = get_version("listmark")

LOG_LEVEL_ENV_VAR: str = "LISTMARK_LOG_LEVEL"

LOCAL_TOML_CONFIG_NAME: str = "listmark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "listmark"

DEFAULT_EMPTY_TEXT: str = "(none)"
