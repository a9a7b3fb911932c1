# topmark:header:start
#
#   project      : ListMark
#   file         : lists.py
#   file_relpath : src/listmark/rendering/lists.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""List renderers: unordered, ordered and description lists.

Each renderer is a fixed pipeline chain:

    items_of / pairs_of  →  empty(...)  →  as_root(container)

so an empty collection renders the caller's fallback nodes under the same
container. `placeholder_list` shows the other collapse: a list when there are
items, a different element (a paragraph) when there are none.

Fallback content is always supplied by the caller; these helpers never invent
placeholder text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from listmark.config.logging import get_logger
from listmark.markup.nodes import text
from listmark.markup.tags import dd, dl, dt, li, ol, p, ul
from listmark.pipeline.constructors import items_of, pairs_of

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from listmark.config.logging import ListmarkLogger
    from listmark.markup.nodes import Node
    from listmark.markup.tags import Renderer, Tag
    from listmark.pipeline.model import Pipeline

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")

logger: ListmarkLogger = get_logger(__name__)


def _collapse(
    chain: Pipeline[Node],
    container: Tag,
    empty: Sequence[Node] | None,
) -> Node:
    if empty is not None:
        chain = chain.empty(empty)
    return chain.as_root(container)


def list_items(render: Renderer[T], items: Iterable[T]) -> Pipeline[Node]:
    """Return a success pipeline of ``li`` elements, one per rendered item."""
    return items_of(render, items).map_tag(li)


def unordered_list(
    render: Renderer[T],
    items: Iterable[T],
    *,
    empty: Sequence[Node] | None = None,
    container: Tag = ul,
) -> Node:
    """Render ``items`` as a ``ul`` of ``li`` elements.

    Args:
        render (Renderer[T]): Renders the content of one list item.
        items (Iterable[T]): Source collection.
        empty (Sequence[Node] | None): Children of the container when ``items``
            is empty (e.g. ``[li([text("none")])]``). ``None`` renders an empty container.
        container (Tag): Tag wrapping the items; override to add attributes.

    Returns:
        Node: The list element.
    """
    return _collapse(list_items(render, items), container, empty)


def ordered_list(
    render: Renderer[T],
    items: Iterable[T],
    *,
    empty: Sequence[Node] | None = None,
    container: Tag = ol,
) -> Node:
    """Render ``items`` as an ``ol`` of ``li`` elements.

    Same contract as `unordered_list`.
    """
    return _collapse(list_items(render, items), container, empty)


def description_list(
    render_term: Renderer[A],
    render_desc: Renderer[B],
    pairs: Iterable[tuple[A, B]],
    *,
    empty: Sequence[Node] | None = None,
    container: Tag = dl,
) -> Node:
    """Render ``(term, description)`` pairs as a ``dl`` of alternating ``dt``/``dd``.

    Args:
        render_term (Renderer[A]): Renders the content of a ``dt``.
        render_desc (Renderer[B]): Renders the content of a ``dd``.
        pairs (Iterable[tuple[A, B]]): Source pairs.
        empty (Sequence[Node] | None): Children of the container when ``pairs`` is empty.
        container (Tag): Tag wrapping the entries.

    Returns:
        Node: The description list element.
    """
    chain: Pipeline[Node] = pairs_of(
        lambda term: dt([render_term(term)]),
        lambda desc: dd([render_desc(desc)]),
        pairs,
    )
    return _collapse(chain, container, empty)


def placeholder_list(
    render: Renderer[T],
    items: Iterable[T],
    *,
    empty_text: str,
    container: Tag = ul,
    placeholder: Tag = p,
) -> Node:
    """Render ``items`` as a list, or a placeholder element when there are none.

    Unlike `unordered_list`, the empty case does not reuse the list container:
    the fallback text is wrapped by ``placeholder`` (a ``p`` by default).

    Args:
        render (Renderer[T]): Renders the content of one list item.
        items (Iterable[T]): Source collection.
        empty_text (str): Text shown when ``items`` is empty.
        container (Tag): Tag wrapping the items.
        placeholder (Tag): Tag wrapping the fallback text.

    Returns:
        Node: The list element or the placeholder element.
    """
    chain: Pipeline[Node] = list_items(render, items).empty([text(empty_text)])
    if chain.is_fallback:
        logger.debug("placeholder_list(): no items, rendering placeholder")
    return chain.unwrap(placeholder, container)
