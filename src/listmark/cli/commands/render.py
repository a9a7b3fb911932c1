# topmark:header:start
#
#   project      : ListMark
#   file         : render.py
#   file_relpath : src/listmark/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ListMark `render` command.

Reads a TOML document describing a list and prints it as HTML.

Input layout:

```toml
# for --kind ul / ol
items = ["apples", "pears"]

# for --kind dl: either an array of [term, description] pairs ...
terms = [["HTML", "HyperText Markup Language"]]

# ... or a table mapping terms to descriptions
[terms]
CSS = "Cascading Style Sheets"
```

An empty (or missing) ``items`` / ``terms`` renders the fallback text under the
same container, e.g. ``<ul><li>(none)</li></ul>``.
"""

from __future__ import annotations

from datetime import date, time
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import click

from listmark.cli.cmd_common import resolve_config
from listmark.cli.errors import (
    ListmarkFileNotFoundError,
    ListmarkInputError,
    ListmarkIOError,
)
from listmark.config.io import parse_toml
from listmark.config.logging import get_logger
from listmark.config.types import ListKind
from listmark.errors import ConfigError
from listmark.markup.nodes import text
from listmark.markup.serialize import to_html
from listmark.markup.tags import dd, dl, dt, li, ol, ul
from listmark.pipeline.constructors import items_of, pairs_of

if TYPE_CHECKING:
    from listmark.config.logging import ListmarkLogger
    from listmark.config.model import RenderConfig
    from listmark.config.types import TomlTable
    from listmark.markup.nodes import Node
    from listmark.pipeline.model import Pipeline

logger: ListmarkLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def read_source(source: str) -> str:
    """Return the text of ``source`` (a path, or ``-`` for STDIN).

    Raises:
        ListmarkFileNotFoundError: If the path does not exist.
        ListmarkIOError: If the file cannot be read.
    """
    if source == STDIN_MARKER:
        return click.get_text_stream("stdin").read()
    path = Path(source)
    if not path.exists():
        raise ListmarkFileNotFoundError(f"No such file: {source}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ListmarkIOError(f"Cannot read {source}: {exc}") from exc


def load_entries(data: TomlTable, kind: ListKind) -> list[Any]:
    """Extract the list entries for ``kind`` from a parsed input document.

    Returns:
        list[Any]: Item values for ``ul``/``ol``; ``(term, description)`` tuples for ``dl``.

    Raises:
        ListmarkInputError: If the entries have the wrong shape.
    """
    if kind is not ListKind.DESCRIPTION:
        items_any: Any = data.get("items", [])
        if not isinstance(items_any, list):
            raise ListmarkInputError("'items' must be an array")
        for item in cast("list[Any]", items_any):
            if isinstance(item, (dict, list)):
                raise ListmarkInputError(f"List items must be scalar values, got {item!r}")
        return cast("list[Any]", items_any)

    terms_any: Any = data.get("terms", [])
    if isinstance(terms_any, dict):
        return list(cast("dict[str, Any]", terms_any).items())
    if not isinstance(terms_any, list):
        raise ListmarkInputError("'terms' must be an array of pairs or a table")
    pairs: list[Any] = []
    for entry in cast("list[Any]", terms_any):
        if not isinstance(entry, list) or len(cast("list[Any]", entry)) != 2:
            raise ListmarkInputError(f"Each term must be a [term, description] pair, got {entry!r}")
        term, desc = cast("list[Any]", entry)
        pairs.append((term, desc))
    return pairs


def scalar_text(value: object) -> Node:
    """Return a text node for a TOML scalar, spelled the way TOML spells it.

    Booleans render as ``true``/``false`` and dates/times in ISO 8601 form;
    everything else goes through ``str``.
    """
    if isinstance(value, bool):
        return text("true" if value else "false")
    if isinstance(value, (date, time)):
        return text(value.isoformat())
    return text(value)


def build_list(
    entries: list[Any],
    kind: ListKind,
    *,
    empty_text: str,
    reverse: bool = False,
) -> Node:
    """Run ``entries`` through the pipeline and collapse them into one list node.

    Args:
        entries (list[Any]): Output of `load_entries`.
        kind (ListKind): List kind to render.
        empty_text (str): Fallback text when there are no entries.
        reverse (bool): Render the entries in reverse order.

    Returns:
        Node: The list element.
    """
    chain: Pipeline[Node]
    if kind is ListKind.DESCRIPTION:
        # reverse whole entries, not the flattened dt/dd sequence
        ordered = entries[::-1] if reverse else entries
        chain = pairs_of(lambda t: dt([scalar_text(t)]), lambda d: dd([scalar_text(d)]), ordered)
        fallback: list[Node] = [dd([text(empty_text)])]
        container = dl
    else:
        chain = items_of(scalar_text, entries).map_tag(li)
        if reverse:
            chain = chain.backwards()
        fallback = [li([text(empty_text)])]
        container = ol if kind is ListKind.ORDERED else ul

    chain = chain.empty(fallback)
    if chain.is_fallback:
        logger.info("No entries to render; using fallback %r", empty_text)
    return chain.as_root(container)


@click.command(
    name="render",
    help="Render a TOML list document (FILE, or '-' for STDIN) as HTML.",
)
@click.argument("source", metavar="FILE", required=False, default=STDIN_MARKER)
@click.option(
    "--kind",
    type=click.Choice([k.value for k in ListKind]),
    default=None,
    help="List kind (default: from config, else 'ul').",
)
@click.option("--empty", "empty_text", default=None, help="Text rendered when the list is empty.")
@click.option("--indent", type=click.IntRange(min=0), default=None, help="Pretty-print indent.")
@click.option(
    "--xhtml/--no-xhtml",
    "xhtml_void",
    default=None,
    help="Close void elements (default: from config, else off).",
)
@click.option("--reverse", is_flag=True, default=False, help="Render entries in reverse order.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read configuration from this file instead of discovering one.",
)
def render_command(
    *,
    source: str,
    kind: str | None,
    empty_text: str | None,
    indent: int | None,
    xhtml_void: bool | None,
    reverse: bool,
    config_path: Path | None,
) -> None:
    """Render a list document as HTML."""
    config: RenderConfig = resolve_config(
        config_path,
        list_kind=kind,
        empty_text=empty_text,
        indent=indent,
        xhtml_void=xhtml_void,
    )

    try:
        data: TomlTable = parse_toml(read_source(source), source=source)
    except ConfigError as exc:
        raise ListmarkInputError(str(exc)) from exc

    entries: list[Any] = load_entries(data, config.list_kind)
    logger.debug("Rendering %d %s entries from %s", len(entries), config.list_kind.value, source)
    node: Node = build_list(
        entries,
        config.list_kind,
        empty_text=config.empty_text,
        reverse=reverse,
    )
    click.echo(to_html(node, config))
