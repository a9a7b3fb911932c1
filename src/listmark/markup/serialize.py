# topmark:header:start
#
#   project      : ListMark
#   file         : serialize.py
#   file_relpath : src/listmark/markup/serialize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialize markup nodes to HTML text.

Escaping uses the standard `html` module: text content is escaped without
quotes, attribute values with quotes. `Raw` nodes are emitted verbatim.

Layout follows `RenderConfig`:
    - ``indent == 0``: compact, no whitespace is added between nodes.
    - ``indent > 0``: one element per line, children indented by ``indent``
      spaces per level. Elements whose children are all text stay on one line
      so that no whitespace leaks into inline content.
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING

from listmark.config.logging import get_logger
from listmark.config.model import RenderConfig
from listmark.markup.nodes import Element, Raw, Text

if TYPE_CHECKING:
    from collections.abc import Iterable

    from listmark.config.logging import ListmarkLogger
    from listmark.markup.nodes import Node

logger: ListmarkLogger = get_logger(__name__)


def to_html(node: Node, config: RenderConfig | None = None) -> str:
    """Render ``node`` as HTML text.

    Args:
        node (Node): The root node.
        config (RenderConfig | None): Layout options; defaults to `RenderConfig()`.

    Returns:
        str: The markup, without a trailing newline.
    """
    cfg: RenderConfig = config or RenderConfig()
    if not cfg.pretty:
        return "".join(_compact(node, cfg))
    return cfg.newline.join(_pretty(node, cfg, depth=0))


def fragment_to_html(nodes: Iterable[Node], config: RenderConfig | None = None) -> str:
    """Render a sequence of sibling nodes (e.g. `Pipeline.as_children`)."""
    cfg: RenderConfig = config or RenderConfig()
    sep: str = cfg.newline if cfg.pretty else ""
    return sep.join(to_html(node, cfg) for node in nodes)


def _start_tag(el: Element, cfg: RenderConfig) -> str:
    attrs: str = "".join(f' {key}="{html.escape(value, quote=True)}"' for key, value in el.attrs)
    if el.is_void and cfg.xhtml_void:
        return f"<{el.tag}{attrs} />"
    return f"<{el.tag}{attrs}>"


def _compact(node: Node, cfg: RenderConfig) -> Iterable[str]:
    if isinstance(node, Text):
        yield html.escape(node.value, quote=False)
        return
    if isinstance(node, Raw):
        yield node.html
        return
    yield _start_tag(node, cfg)
    if node.is_void:
        if node.children:
            logger.warning("Dropping %d child node(s) of void <%s>", len(node.children), node.tag)
        return
    for child in node.children:
        yield from _compact(child, cfg)
    yield f"</{node.tag}>"


def _pretty(node: Node, cfg: RenderConfig, depth: int) -> Iterable[str]:
    pad: str = " " * (cfg.indent * depth)
    if not isinstance(node, Element) or node.is_void:
        yield pad + "".join(_compact(node, cfg))
        return
    if all(not isinstance(child, Element) for child in node.children):
        # inline content
        yield pad + "".join(_compact(node, cfg))
        return
    yield pad + _start_tag(node, cfg)
    for child in node.children:
        yield from _pretty(child, cfg, depth + 1)
    yield f"{pad}</{node.tag}>"
