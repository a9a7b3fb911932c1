# topmark:header:start
#
#   project      : ListMark
#   file         : __main__.py
#   file_relpath : src/listmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ListMark via ``python -m listmark``.

It delegates directly to :func:`listmark.cli.main.cli`, the same entry point as
the ``listmark`` console script.

Examples:
    Render a list document::

        python -m listmark render items.toml
"""

from __future__ import annotations

from listmark.cli.main import cli

if __name__ == "__main__":
    cli()
