# topmark:header:start
#
#   project      : ListMark
#   file         : nodes.py
#   file_relpath : src/listmark/markup/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable markup nodes.

The pipeline treats nodes as opaque values. This module provides the concrete
node model used by the tag builders, the list renderers and the serializer:

- `Text`: a text run, escaped on output.
- `Raw`: pre-rendered markup, emitted verbatim.
- `Element`: a tag with ordered attributes and child nodes.

Nodes are frozen dataclasses holding tuples, so they compare by value and can
be shared freely between trees.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

# Void elements have no children and no closing tag.
VOID_ELEMENTS: frozenset[str] = frozenset(
    {"area", "base", "br", "col", "hr", "img", "input", "link", "meta", "source", "wbr"}
)


@dataclass(frozen=True, slots=True)
class Text:
    """A run of text."""

    value: str


@dataclass(frozen=True, slots=True)
class Raw:
    """Pre-rendered markup that must not be escaped."""

    html: str


@dataclass(frozen=True, slots=True)
class Element:
    """A markup element.

    Attributes:
        tag (str): Element name, e.g. ``"ul"``.
        attrs (tuple[tuple[str, str], ...]): Attribute name/value pairs in output order.
        children (tuple[Node, ...]): Child nodes in document order.
    """

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()

    @property
    def is_void(self) -> bool:
        """Whether this element is a void element (``<br>``, ``<img>``, ...)."""
        return self.tag.lower() in VOID_ELEMENTS

    def attr(self, name: str) -> str | None:
        """Return the value of attribute ``name``, or ``None`` if absent."""
        for key, value in self.attrs:
            if key == name:
                return value
        return None


Node: TypeAlias = Text | Raw | Element


def text(value: object) -> Text:
    """Return a text node for ``value`` (converted with ``str``)."""
    return Text(str(value))


def raw(markup: str) -> Raw:
    """Return a node emitting ``markup`` verbatim."""
    return Raw(markup)


def element(
    tag: str,
    children: Iterable[Node] = (),
    attrs: Mapping[str, str] | None = None,
) -> Element:
    """Build an `Element`, materializing ``children`` and ``attrs``.

    Args:
        tag (str): Element name.
        children (Iterable[Node]): Child nodes.
        attrs (Mapping[str, str] | None): Attributes; insertion order is kept.

    Returns:
        Element: The new element.
    """
    return Element(
        tag=tag,
        attrs=tuple(attrs.items()) if attrs else (),
        children=tuple(children),
    )


def text_content(node: Node) -> str:
    """Return the concatenated text of ``node`` and its descendants.

    `Raw` nodes contribute their markup unchanged.
    """
    if isinstance(node, Text):
        return node.value
    if isinstance(node, Raw):
        return node.html
    return "".join(text_content(child) for child in node.children)
