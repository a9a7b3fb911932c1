# topmark:header:start
#
#   project      : ListMark
#   file         : config.py
#   file_relpath : src/listmark/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ListMark `config` command group.

`listmark config dump` prints the effective rendering configuration (defaults,
config file and options merged) as TOML in the ``listmark.toml`` layout.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from listmark.cli.cmd_common import resolve_config
from listmark.config.io import to_toml

if TYPE_CHECKING:
    from listmark.config.model import RenderConfig


@click.group(name="config", help="Inspect ListMark configuration.")
def config_group() -> None:
    """Group for configuration subcommands."""


@config_group.command(name="dump", help="Print the effective configuration as TOML.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read configuration from this file instead of discovering one.",
)
def dump_command(config_path: Path | None) -> None:
    """Print the effective configuration.

    Args:
        config_path (Path | None): Explicit config file, if any.
    """
    config: RenderConfig = resolve_config(config_path)
    for source in config.config_files:
        click.echo(f"# source: {source}")
    click.echo(to_toml(config.to_toml_dict()), nl=False)
