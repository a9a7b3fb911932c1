# topmark:header:start
#
#   project      : ListMark
#   file         : test_constructors.py
#   file_relpath : tests/pipeline/test_constructors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the pipeline entry points in `listmark.pipeline.constructors`."""

from __future__ import annotations

import pytest

from listmark.markup.nodes import Text, text
from listmark.pipeline.constructors import (
    error,
    items_of,
    pairs_of,
    parts_of,
    pipeline,
    try_items_of,
)
from listmark.pipeline.model import Branch, Pipeline

pytestmark: pytest.MarkDecorator = pytest.mark.pipeline


def test_pipeline_wraps_items_verbatim() -> None:
    """`pipeline(xs)` is a success holding exactly ``xs``."""
    p = pipeline([3, 1, 2])
    assert p == Pipeline.success([3, 1, 2])
    assert p.branch is Branch.SUCCESS
    assert p.items == (3, 1, 2)


def test_pipeline_of_empty_sequence_stays_success() -> None:
    """Construction never decides emptiness; that is `empty`'s job."""
    p = pipeline([])
    assert p.is_success
    assert p.items == ()


def test_pipeline_materializes_iterators() -> None:
    """A one-shot iterator is consumed once and stored as a tuple."""
    p = pipeline(iter("abc"))
    assert p.items == ("a", "b", "c")
    assert p.as_children() == ["a", "b", "c"]


def test_error_is_single_item_fallback() -> None:
    """`error(x)` is ``Fallback([x])``."""
    p = error("oops")
    assert p == Pipeline.fallback(["oops"])
    assert p.is_fallback


def test_items_of_renders_in_order() -> None:
    """Every item is rendered, order preserved."""
    p = items_of(text, ["a", "b"])
    assert p == Pipeline.success([Text("a"), Text("b")])


def test_items_of_calls_renderer_once_per_item() -> None:
    """Rendering is eager and happens exactly once per item."""
    calls: list[int] = []

    def render(n: int) -> int:
        calls.append(n)
        return n * 10

    p = items_of(render, [1, 2, 3])
    assert calls == [1, 2, 3]
    assert p.items == (10, 20, 30)


def test_parts_of_concatenates_sub_sequences() -> None:
    """Sub-sequences are flattened one level, in order; empty parts vanish."""
    p = parts_of(lambda n: [n] * n, [2, 0, 1])
    assert p == Pipeline.success([2, 2, 1])


def test_pairs_of_alternates_renderers() -> None:
    """Each pair yields ``[render_a(a), render_b(b)]``."""
    p = pairs_of(str.upper, len, [("x", "abc"), ("y", "")])
    assert p.items == ("X", 3, "Y", 0)
    assert p.is_success


def test_pairs_of_matches_parts_of() -> None:
    """`pairs_of` is `parts_of` over a pairing function."""
    pairs = [(1, "one"), (2, "two")]
    via_pairs = pairs_of(str, str.title, pairs)
    via_parts = parts_of(lambda ab: [str(ab[0]), ab[1].title()], pairs)
    assert via_pairs == via_parts


def test_try_items_of_drops_declined_items() -> None:
    """Items rendered to ``None`` are skipped; survivors keep their order."""

    def render(n: int) -> str | None:
        return None if n == 2 else f"item-{n}"

    p = try_items_of(render, [1, 2, 3])
    assert p.items == ("item-1", "item-3")
    assert p.is_success


def test_try_items_of_keeps_falsy_values() -> None:
    """Only ``None`` means "absent"; other falsy values survive."""
    p = try_items_of(lambda v: v, [0, "", None, False])
    assert p.items == (0, "", False)


def test_try_items_of_all_declined_is_empty_success() -> None:
    p = try_items_of(lambda _: None, [1, 2])
    assert p == Pipeline.success([])


def test_direct_construction_stores_a_tuple() -> None:
    """Calling the dataclass with a list still yields an immutable tuple."""
    source: list[int] = [1, 2]
    p = Pipeline(Branch.FALLBACK, source)  # type: ignore[arg-type]
    source.append(3)
    assert isinstance(p.items, tuple)
    assert p.items == (1, 2)
    assert p == Pipeline.fallback([1, 2])
