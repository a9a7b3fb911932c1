# topmark:header:start
#
#   project      : ListMark
#   file         : cmd_common.py
#   file_relpath : src/listmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by ListMark CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from listmark.cli.errors import ListmarkConfigError
from listmark.config.logging import get_logger
from listmark.config.model import MutableRenderConfig
from listmark.errors import ConfigError

if TYPE_CHECKING:
    from listmark.config.logging import ListmarkLogger
    from listmark.config.model import RenderConfig

logger: ListmarkLogger = get_logger(__name__)


def resolve_config(config_path: Path | None, **overrides: Any) -> RenderConfig:
    """Build the effective config for a command.

    An explicit ``--config`` file disables discovery; otherwise the nearest
    ``listmark.toml`` / ``pyproject.toml`` above the working directory is used.

    Args:
        config_path (Path | None): Value of ``--config``.
        **overrides (Any): Option values; ``None`` means "not given".

    Returns:
        RenderConfig: The frozen effective config.

    Raises:
        ListmarkConfigError: If the config cannot be loaded or is invalid.
    """
    try:
        draft: MutableRenderConfig = MutableRenderConfig.load_merged(
            config_file=config_path,
            search_from=None if config_path is not None else Path.cwd(),
            overrides=overrides,
        )
        config: RenderConfig = draft.freeze()
    except ConfigError as exc:
        raise ListmarkConfigError(str(exc)) from exc
    logger.debug("Effective config: %s", config)
    return config
