"""Tests for the markup parser adapter."""

import pytest

from elemental.errors import UNKNOWN_PARSE_ERROR, ParseError, ProtocolError
from elemental.model.nodes import Comment, Directive, Script, Style, Tag, Text
from elemental.parser import ParseOutcome, SoupMarkupParser, parse_markup


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _StubParser:
    """Markup parser that always reports a fixed outcome."""

    def __init__(self, outcome: ParseOutcome) -> None:
        self.outcome = outcome
        self.calls: list[str] = []

    def parse(self, markup: str) -> ParseOutcome:
        self.calls.append(markup)
        return self.outcome


# ---------------------------------------------------------------------------
# Tags and text
# ---------------------------------------------------------------------------


class TestTags:
    def test_single_tag(self):
        nodes = parse_markup("<div class='a b'>Hi</div>")
        assert nodes == [Tag(name="div", attributes={"class": "a b"}, children=[Text(data="Hi")])]

    def test_names_are_lowercased(self):
        nodes = parse_markup('<DIV ID="x" Data-Role="main"></DIV>')
        assert nodes[0].name == "div"
        assert nodes[0].attributes == {"id": "x", "data-role": "main"}

    def test_valueless_attribute_is_empty_string(self):
        nodes = parse_markup("<input disabled>")
        assert nodes[0].attributes == {"disabled": ""}

    def test_nested_children(self):
        nodes = parse_markup("<ul><li>a</li><li>b</li></ul>")
        ul = nodes[0]
        assert [child.name for child in ul.children] == ["li", "li"]
        assert ul.children[1].children == [Text(data="b")]

    def test_top_level_siblings(self):
        nodes = parse_markup("<p>a</p> text <span>b</span>")
        assert [type(node) for node in nodes] == [Tag, Text, Tag]
        assert nodes[1].data == " text "

    def test_whitespace_is_preserved(self):
        nodes = parse_markup("<p>a   b\n c</p>")
        assert nodes[0].children == [Text(data="a   b\n c")]

    def test_void_element_has_no_children(self):
        nodes = parse_markup("<p>x<br>y</p>")
        p = nodes[0]
        assert [type(child) for child in p.children] == [Text, Tag, Text]
        assert p.children[1].children == []

    def test_empty_markup(self):
        assert parse_markup("") == []

    def test_filename_like_text_is_content(self):
        nodes = parse_markup("index.html")
        assert nodes == [Text(data="index.html")]


class TestEntities:
    def test_text_entities_decoded(self):
        nodes = parse_markup("<p>&lt;b&gt; &amp; &#169;</p>")
        assert nodes[0].children == [Text(data="<b> & ©")]

    def test_attribute_entities_decoded(self):
        nodes = parse_markup('<a title="Tom &amp; Jerry">x</a>')
        assert nodes[0].attributes["title"] == "Tom & Jerry"


# ---------------------------------------------------------------------------
# Other node kinds
# ---------------------------------------------------------------------------


class TestNodeKinds:
    def test_comment(self):
        nodes = parse_markup("<!-- note --><p></p>")
        assert nodes[0] == Comment(data=" note ")
        assert isinstance(nodes[1], Tag)

    def test_style_element(self):
        nodes = parse_markup("<style>p { color: red }</style>")
        assert isinstance(nodes[0], Style)
        assert nodes[0].children == [Text(data="p { color: red }")]

    def test_script_element(self):
        nodes = parse_markup("<script>alert(1)</script>")
        assert isinstance(nodes[0], Script)
        assert nodes[0].children == [Text(data="alert(1)")]

    def test_doctype(self):
        nodes = parse_markup("<!DOCTYPE html><p></p>")
        assert nodes[0] == Directive(name="!doctype", data="!DOCTYPE html")


# ---------------------------------------------------------------------------
# Navigation links
# ---------------------------------------------------------------------------


class TestLinks:
    def test_parent_and_siblings(self):
        nodes = parse_markup("<ul><li>a</li><li>b</li></ul>")
        ul = nodes[0]
        first, second = ul.children
        assert ul.parent is None
        assert first.parent is ul
        assert second.parent is ul
        assert first.next is second
        assert second.prev is first
        assert first.prev is None
        assert second.next is None

    def test_text_parent(self):
        nodes = parse_markup("<p>x</p>")
        assert nodes[0].children[0].parent is nodes[0]


# ---------------------------------------------------------------------------
# Outcome handling
# ---------------------------------------------------------------------------


class TestOutcome:
    def test_default_adapter_is_soup(self):
        outcome = SoupMarkupParser().parse("<p>x</p>")
        assert outcome.error is None
        assert outcome.nodes is not None

    def test_nodes_returned(self):
        nodes = [Text(data="x")]
        stub = _StubParser(ParseOutcome(nodes=nodes))
        assert parse_markup("anything", stub) is nodes
        assert stub.calls == ["anything"]

    def test_empty_nodes_is_success(self):
        assert parse_markup("x", _StubParser(ParseOutcome(nodes=[]))) == []

    def test_nodes_win_over_error(self):
        stub = _StubParser(ParseOutcome(nodes=[], error=ValueError("ignored")))
        assert parse_markup("x", stub) == []

    def test_error_raises_parse_error(self):
        cause = ValueError("bad markup")
        with pytest.raises(ParseError, match="bad markup") as exc_info:
            parse_markup("x", _StubParser(ParseOutcome(error=cause)))
        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause

    def test_neither_raises_protocol_error(self):
        with pytest.raises(ProtocolError) as exc_info:
            parse_markup("x", _StubParser(ParseOutcome()))
        assert str(exc_info.value) == UNKNOWN_PARSE_ERROR
        assert str(exc_info.value) == "Unknown HTML parsing error: Neither DOM nor Error returned"
