# topmark:header:start
#
#   project      : ListMark
#   file         : version.py
#   file_relpath : src/listmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ListMark `version` command.

Prints the current ListMark version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from listmark.constants import LISTMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of ListMark.",
)
def version_command() -> None:
    """Show the current version of ListMark."""
    click.echo(LISTMARK_VERSION)
