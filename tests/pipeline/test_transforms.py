# topmark:header:start
#
#   project      : ListMark
#   file         : test_transforms.py
#   file_relpath : tests/pipeline/test_transforms.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `Pipeline` transformations.

The central contract is the split between `filter` (never changes the branch)
and `empty` (the only content-driven branch switch).
"""

from __future__ import annotations

import pytest

from listmark.markup.nodes import Element, Text, text
from listmark.markup.tags import li
from listmark.pipeline.model import Branch, Pipeline
from tests.conftest import parametrize

pytestmark: pytest.MarkDecorator = pytest.mark.pipeline


# --- map / map_both / map_tag -------------------------------------------------


def test_map_on_success_maps_items() -> None:
    assert Pipeline.success([1, 2]).map(lambda n: n + 1) == Pipeline.success([2, 3])


def test_map_on_fallback_keeps_fallback_tag() -> None:
    """Fallback items are mapped and the fallback tag is kept."""
    p = Pipeline.fallback([1, 2]).map(lambda n: n * 3)
    assert p == Pipeline.fallback([3, 6])
    assert p.is_fallback


def test_map_both_changes_type_and_keeps_branch() -> None:
    for branch in Branch:
        p = Pipeline(branch, (1, 2)).map_both(str)
        assert p.branch is branch
        assert p.items == ("1", "2")


def test_map_tag_wraps_each_item_individually() -> None:
    """Each item becomes the sole child of its own wrapper node."""
    p = Pipeline.success([text("a"), text("b")]).map_tag(li)
    assert p.items == (
        Element("li", (), (Text("a"),)),
        Element("li", (), (Text("b"),)),
    )
    assert p.is_success


def test_map_tag_on_fallback_keeps_fallback_tag() -> None:
    p = Pipeline.fallback([text("none")]).map_tag(li)
    assert p == Pipeline.fallback([li([text("none")])])


def test_map_tag_passes_singleton_lists() -> None:
    received: list[list[object]] = []

    def wrap(children: list[object]) -> Text:
        received.append(list(children))
        return Text("x")

    Pipeline.success([text("a"), text("b")]).map_tag(wrap)  # type: ignore[arg-type]
    assert received == [[Text("a")], [Text("b")]]


# --- filter --------------------------------------------------------------------


def test_filter_keeps_matching_items_in_order() -> None:
    p = Pipeline.success([1, 2, 3, 4]).filter(lambda n: n % 2 == 0)
    assert p == Pipeline.success([2, 4])


def test_filter_emptying_success_stays_success() -> None:
    """Filtering everything out does not switch to the fallback branch."""
    p = Pipeline.success([1, 3]).filter(lambda n: n % 2 == 0)
    assert p == Pipeline.success([])
    assert p.is_success


def test_filter_on_fallback_filters_fallback_items() -> None:
    p = Pipeline.fallback([1, 2, 3]).filter(lambda n: n > 1)
    assert p == Pipeline.fallback([2, 3])


# --- backwards / negate ----------------------------------------------------------


@parametrize("branch", list(Branch))
def test_backwards_reverses_active_items(branch: Branch) -> None:
    p = Pipeline(branch, (1, 2, 3)).backwards()
    assert p == Pipeline(branch, (3, 2, 1))


def test_negate_swaps_tag_and_keeps_items() -> None:
    assert Pipeline.success([1]).negate() == Pipeline.fallback([1])
    assert Pipeline.fallback([1]).negate() == Pipeline.success([1])


def test_negate_then_empty_treats_old_fallback_as_content() -> None:
    """Negating a fallback makes its items the happy path for `empty`."""
    p = Pipeline.fallback(["kept"]).negate().empty(["unused"])
    assert p == Pipeline.success(["kept"])


# --- empty -----------------------------------------------------------------------


def test_empty_on_non_empty_success_is_identity() -> None:
    p = Pipeline.success(["a", "b"])
    assert p.empty(["none"]) is p


def test_empty_on_empty_success_switches_to_fallback() -> None:
    p = Pipeline.success([]).empty(["none"])
    assert p == Pipeline.fallback(["none"])


def test_empty_on_fallback_replaces_content() -> None:
    """Last call wins: existing fallback content is discarded, never merged."""
    p = Pipeline.fallback(["old"]).empty(["new"])
    assert p == Pipeline.fallback(["new"])


def test_empty_on_empty_fallback_replaces_content() -> None:
    assert Pipeline.fallback([]).empty(["x", "y"]) == Pipeline.fallback(["x", "y"])


def test_empty_chained_twice_overwrites() -> None:
    p = Pipeline.success([]).empty(["first"]).empty(["second"])
    assert p == Pipeline.fallback(["second"])


def test_empty_accepts_empty_fallback() -> None:
    p = Pipeline.success([]).empty([])
    assert p == Pipeline.fallback([])
    assert p.is_fallback


def test_filter_then_empty_falls_back() -> None:
    """`filter` empties, `empty` converts."""
    p = Pipeline.success([1, 3]).filter(lambda n: n > 5).empty([0])
    assert p == Pipeline.fallback([0])


# --- immutability ----------------------------------------------------------------


def test_transformations_do_not_mutate_input() -> None:
    p = Pipeline.success([1, 2, 3])
    p.map(lambda n: -n)
    p.filter(lambda n: n > 1)
    p.backwards()
    p.negate()
    p.empty([0])
    assert p == Pipeline.success([1, 2, 3])


def test_pipeline_is_frozen() -> None:
    p = Pipeline.success([1])
    with pytest.raises(AttributeError):
        p.items = (2,)  # type: ignore[misc]
