# topmark:header:start
#
#   project      : ListMark
#   file         : tags.py
#   file_relpath : src/listmark/markup/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag builders and the callable type aliases used across ListMark.

A *tag* is any callable that wraps a sequence of child nodes under a single
parent node. `TagBuilder` is the concrete implementation: an immutable,
callable description of an element name plus fixed attributes.

Example:
    ```python
    from listmark.markup.nodes import text
    from listmark.markup.tags import li, make_tag, ul

    menu = ul.with_attrs({"class": "menu"})
    node = menu([li([text("Home")]), li([text("About")])])
    section = make_tag("section", {"id": "main"})
    ```
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias, TypeVar

from listmark.errors import MarkupError
from listmark.markup.nodes import Element, Node

if TYPE_CHECKING:
    from collections.abc import Mapping

T = TypeVar("T")

# Wraps a list of child nodes under one parent node.
Tag: TypeAlias = Callable[[Sequence[Node]], Node]
# Renders one source item to a node.
Renderer: TypeAlias = Callable[[T], Node]

_TAG_NAME_RE: re.Pattern[str] = re.compile(r"[A-Za-z][A-Za-z0-9-]*")
_ATTR_NAME_RE: re.Pattern[str] = re.compile(r"[A-Za-z_:][A-Za-z0-9_.:-]*")


@dataclass(frozen=True, slots=True)
class TagBuilder:
    """Callable tag: ``builder(children) -> Element``.

    Attributes:
        name (str): Element name.
        attrs (tuple[tuple[str, str], ...]): Attributes applied to every element built.
    """

    name: str
    attrs: tuple[tuple[str, str], ...] = ()

    def __call__(self, children: Iterable[Node] = ()) -> Element:
        """Return a new element named `name` wrapping ``children``."""
        return Element(tag=self.name, attrs=self.attrs, children=tuple(children))

    def with_attrs(self, attrs: Mapping[str, str]) -> TagBuilder:
        """Return a builder with ``attrs`` added (later keys override earlier ones).

        Raises:
            MarkupError: If an attribute name is not a valid markup name.
        """
        merged: dict[str, str] = dict(self.attrs)
        merged.update(_check_attrs(attrs))
        return TagBuilder(self.name, tuple(merged.items()))


def _check_attrs(attrs: Mapping[str, str]) -> dict[str, str]:
    checked: dict[str, str] = {}
    for key, value in attrs.items():
        if not _ATTR_NAME_RE.fullmatch(key):
            raise MarkupError(f"Invalid attribute name: {key!r}")
        checked[key] = str(value)
    return checked


def make_tag(name: str, attrs: Mapping[str, str] | None = None) -> TagBuilder:
    """Return a tag builder for element ``name``.

    Args:
        name (str): Element name; letters, digits and ``-``, starting with a letter.
        attrs (Mapping[str, str] | None): Attributes applied to every element built.

    Returns:
        TagBuilder: The callable tag.

    Raises:
        MarkupError: If ``name`` or an attribute name is not a valid markup name.
    """
    if not _TAG_NAME_RE.fullmatch(name):
        raise MarkupError(f"Invalid tag name: {name!r}")
    builder = TagBuilder(name)
    return builder.with_attrs(attrs) if attrs else builder


ul: TagBuilder = make_tag("ul")
ol: TagBuilder = make_tag("ol")
li: TagBuilder = make_tag("li")
dl: TagBuilder = make_tag("dl")
dt: TagBuilder = make_tag("dt")
dd: TagBuilder = make_tag("dd")
div: TagBuilder = make_tag("div")
span: TagBuilder = make_tag("span")
p: TagBuilder = make_tag("p")
