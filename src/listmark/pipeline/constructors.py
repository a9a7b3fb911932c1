# topmark:header:start
#
#   project      : ListMark
#   file         : constructors.py
#   file_relpath : src/listmark/pipeline/constructors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry points that turn a source collection into a `Pipeline`.

All constructors are total and eager: the input is consumed once and the
result holds a fully materialized ``tuple``. Every constructor except `error`
yields a pipeline in the success branch, even when the input is empty; use
`Pipeline.empty` to declare the fallback content.
"""

from __future__ import annotations

from itertools import chain
from typing import TYPE_CHECKING, TypeVar

from listmark.pipeline.model import Pipeline

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


def pipeline(items: Iterable[T]) -> Pipeline[T]:
    """Wrap ``items`` verbatim as a success pipeline."""
    return Pipeline.success(items)


def error(item: T) -> Pipeline[T]:
    """Return a fallback pipeline holding the single ``item``."""
    return Pipeline.fallback((item,))


def items_of(render: Callable[[T], R], items: Iterable[T]) -> Pipeline[R]:
    """Render each item and collect the results in a success pipeline.

    Args:
        render (Callable[[T], R]): Renders one source item.
        items (Iterable[T]): Source collection.

    Returns:
        Pipeline[R]: Success pipeline of rendered items, in source order.
    """
    return Pipeline.success(render(item) for item in items)


def parts_of(render: Callable[[T], Iterable[R]], items: Iterable[T]) -> Pipeline[R]:
    """Render each item to several parts and concatenate them in order.

    Args:
        render (Callable[[T], Iterable[R]]): Renders one source item to a
            sequence of parts.
        items (Iterable[T]): Source collection.

    Returns:
        Pipeline[R]: Success pipeline of all parts, flattened one level.
    """
    return Pipeline.success(chain.from_iterable(render(item) for item in items))


def pairs_of(
    render_a: Callable[[A], R],
    render_b: Callable[[B], R],
    pairs: Iterable[tuple[A, B]],
) -> Pipeline[R]:
    """Render each ``(a, b)`` pair to two consecutive items.

    This is `parts_of` over ``lambda ab: [render_a(ab[0]), render_b(ab[1])]``;
    description lists use it to emit alternating term/definition nodes.

    Args:
        render_a (Callable[[A], R]): Renders the first element of a pair.
        render_b (Callable[[B], R]): Renders the second element of a pair.
        pairs (Iterable[tuple[A, B]]): Source pairs.

    Returns:
        Pipeline[R]: Success pipeline ``[render_a(a0), render_b(b0), render_a(a1), ...]``.
    """
    return parts_of(lambda pair: (render_a(pair[0]), render_b(pair[1])), pairs)


def try_items_of(render: Callable[[T], R | None], items: Iterable[T]) -> Pipeline[R]:
    """Render each item, dropping the ones ``render`` declines.

    A renderer declines an item by returning ``None``. Surviving items keep
    their relative order.

    Args:
        render (Callable[[T], R | None]): Renders one source item, or returns
            ``None`` to skip it.
        items (Iterable[T]): Source collection.

    Returns:
        Pipeline[R]: Success pipeline of the rendered items that were not skipped.
    """
    rendered = (render(item) for item in items)
    return Pipeline.success(node for node in rendered if node is not None)
