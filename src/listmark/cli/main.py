# topmark:header:start
#
#   project      : ListMark
#   file         : main.py
#   file_relpath : src/listmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ListMark CLI entry point.

Group-level options are resolved once and stored in ``ctx.obj``; subcommands
read their own options and the effective config (see `listmark.cli.cmd_common`).
"""

from __future__ import annotations

import click

from listmark.cli.commands.config import config_group
from listmark.cli.commands.render import render_command
from listmark.cli.commands.version import version_command
from listmark.cli.errors import ListmarkUsageError
from listmark.config.logging import (
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, log_level: str | None) -> None:
    """Initialize shared state (logging) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        log_level (str | None): Value of ``--log-level``; falls back to
            ``LISTMARK_LOG_LEVEL`` when not given.

    Raises:
        ListmarkUsageError: If ``log_level`` is not a known level.
    """
    ctx.obj = ctx.obj or {}

    level: int | None
    if log_level is not None:
        level = parse_log_level(log_level)
        if level is None:
            raise ListmarkUsageError(f"Unknown log level: {log_level!r}")
    else:
        level = resolve_env_log_level()
    ctx.obj["log_level"] = level
    setup_logging(level=level)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ListMark CLI",
)
@click.option(
    "--log-level",
    default=None,
    metavar="LEVEL",
    help="Internal log level (TRACE, DEBUG, INFO, ...). Default: $LISTMARK_LOG_LEVEL or CRITICAL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Entry point for the ListMark CLI."""
    init_common_state(ctx, log_level=log_level)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'listmark render FILE' to render a list document.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(config_group)

if __name__ == "__main__":
    cli()
