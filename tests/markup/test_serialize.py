# topmark:header:start
#
#   project      : ListMark
#   file         : test_serialize.py
#   file_relpath : tests/markup/test_serialize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for HTML serialization."""

from __future__ import annotations

from hypothesis import given

from listmark.config.model import RenderConfig
from listmark.markup.nodes import Node, element, raw, text
from listmark.markup.serialize import fragment_to_html, to_html
from listmark.markup.tags import li, make_tag, span, ul
from tests.strategies_listmark import s_node


def test_compact_rendering() -> None:
    node = ul([li([text("a")]), li([text("b")])])
    assert to_html(node) == "<ul><li>a</li><li>b</li></ul>"


def test_text_is_escaped() -> None:
    assert to_html(li([text("<b> & 'q'")])) == "<li>&lt;b&gt; &amp; 'q'</li>"


def test_attribute_values_are_escaped() -> None:
    node = make_tag("a", {"href": '/x?a=1&b="2"'})([text("x")])
    assert to_html(node) == '<a href="/x?a=1&amp;b=&quot;2&quot;">x</a>'


def test_raw_is_not_escaped() -> None:
    assert to_html(li([raw("<em>hi</em>")])) == "<li><em>hi</em></li>"


def test_void_elements() -> None:
    br = element("br")
    assert to_html(br) == "<br>"
    assert to_html(br, RenderConfig(xhtml_void=True)) == "<br />"
    assert to_html(element("br", [text("dropped")])) == "<br>"


def test_empty_element() -> None:
    assert to_html(ul([])) == "<ul></ul>"


def test_pretty_rendering_indents_block_children() -> None:
    node = ul([li([text("a")]), li([span([text("b")])])])
    expected = "\n".join(
        [
            "<ul>",
            "  <li>a</li>",
            "  <li>",
            "    <span>b</span>",
            "  </li>",
            "</ul>",
        ]
    )
    assert to_html(node, RenderConfig(indent=2)) == expected


def test_pretty_rendering_uses_configured_newline() -> None:
    node = ul([li([text("a")])])
    assert to_html(node, RenderConfig(indent=1, newline="\r\n")) == "<ul>\r\n <li>a</li>\r\n</ul>"


def test_fragment_rendering() -> None:
    nodes = [li([text("a")]), li([text("b")])]
    assert fragment_to_html(nodes) == "<li>a</li><li>b</li>"
    assert fragment_to_html(nodes, RenderConfig(indent=2)) == "<li>a</li>\n<li>b</li>"


@given(node=s_node)
def test_compact_and_pretty_keep_text(node: Node) -> None:
    """Layout never changes text content; only whitespace between tags differs."""
    compact = to_html(node)
    pretty = to_html(node, RenderConfig(indent=2))
    assert compact.count("<") == pretty.count("<")
    assert "".join(pretty.split()) == "".join(compact.split())
