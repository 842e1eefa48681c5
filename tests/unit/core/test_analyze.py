"""Unit tests for core/analyze.py"""

from mdcontainer.core.analyze import analyze_closing, analyze_opening, strip_leading_break
from mdcontainer.core.models import BREAK, Node, Status, paragraph, text


def strong(value):
    return Node("strong", children=[text(value)])


def test_opening_complete_single_text(fence3):
    """Opener, body and closer in one text run make a complete paragraph."""
    node = paragraph(text("::: tip Title\ncontent\n:::"))
    result = analyze_opening(node, fence3)
    assert result.status == Status.complete
    assert result.type == "tip"
    assert result.raw_title == "Title"
    assert result.node.children == [text("content")]


def test_opening_does_not_modify_input(fence3):
    """Analysis returns a new paragraph and leaves the input untouched."""
    node = paragraph(text("::: tip\ncontent\n:::"))
    analyze_opening(node, fence3)
    assert node.children == [text("::: tip\ncontent\n:::")]


def test_opening_line_only_is_regular(fence3):
    """A paragraph holding only the opener line contributes no body."""
    node = paragraph(text("::: tip Title"))
    result = analyze_opening(node, fence3)
    assert result.status == Status.regular
    assert result.node is node
    assert (result.type, result.raw_title) == ("tip", "Title")


def test_opening_without_closer_is_mutated(fence3):
    """A body without a closing fence is kept with the opener line removed."""
    result = analyze_opening(paragraph(text("::: warning\nHello\n::: x")), fence3)
    assert result.status == Status.mutated
    assert result.node.children == [text("Hello\n::: x")]


def test_opening_doubled_fence_is_regular(fence3):
    """`:::` directly followed by `:::` or `::: tip` is left alone."""
    for value in (":::\n:::", ":::\n::: tip"):
        node = paragraph(text(value))
        result = analyze_opening(node, fence3)
        assert result.status == Status.regular
        assert result.node is node


def test_opening_empty_bare_body_is_regular(fence3):
    """A bare fence pair with only whitespace between is not a container."""
    result = analyze_opening(paragraph(text(":::\n \n:::")), fence3)
    assert result.status == Status.regular


def test_opening_typed_empty_body_is_complete(fence3):
    """A typed opener closed on the next line is complete with no children."""
    result = analyze_opening(paragraph(text("::: info\n:::")), fence3)
    assert result.status == Status.complete
    assert result.type == "info"
    assert result.node.children == []


def test_opening_longer_closer_not_matched(fence3):
    """A four-colon closer does not close a three-colon opener."""
    result = analyze_opening(paragraph(text("::: tip\ncontent\n::::")), fence3)
    assert result.status == Status.mutated
    assert result.node.children == [text("content\n::::")]


def test_opening_multi_child_complete(fence3):
    """Inline children between the opener line and the closer form the body."""
    node = paragraph(text("::: tip\n"), strong("bold"), text("\n:::"))
    result = analyze_opening(node, fence3)
    assert result.status == Status.complete
    assert result.type == "tip"
    assert result.node.children == [strong("bold")]


def test_opening_multi_child_opener_line_dropped(fence3):
    """A first run that is only the opener line is dropped."""
    node = paragraph(text("::: danger My   Title"), Node(BREAK), text("content\n:::"))
    result = analyze_opening(node, fence3)
    assert result.status == Status.complete
    assert (result.type, result.raw_title) == ("danger", "My   Title")
    assert result.node.children == [Node(BREAK), text("content")]


def test_opening_multi_child_mutated(fence3):
    """A paragraph not ending in the closer stays open."""
    node = paragraph(text("::: tip\nHi "), strong("there"))
    result = analyze_opening(node, fence3)
    assert result.status == Status.mutated
    assert result.node.children == [text("Hi "), strong("there")]


def test_closing_fence_only_is_regular(fence3):
    """A paragraph that is only the fence contributes nothing."""
    for value in (":::", ":::  "):
        assert analyze_closing(paragraph(text(value)), fence3).status == Status.regular


def test_closing_strips_fence_line(fence3):
    """Content before the closing fence stays in the paragraph."""
    result = analyze_closing(paragraph(text("content\n:::")), fence3)
    assert result.status == Status.mutated
    assert result.node.children == [text("content")]


def test_closing_multi_child(fence3):
    """The closing fence is removed from the last text run only."""
    node = paragraph(text("a "), strong("b"), text(".\n:::"))
    result = analyze_closing(node, fence3)
    assert result.status == Status.mutated
    assert result.node.children == [text("a "), strong("b"), text(".")]


def test_closing_drops_emptied_last_run(fence3):
    """A last run left empty by the removal is dropped."""
    result = analyze_closing(paragraph(strong("b"), text("\n:::")), fence3)
    assert result.node.children == [strong("b")]


def test_strip_leading_break():
    """A leading hard break is removed; anything else is returned as is."""
    node = paragraph(Node(BREAK), text("content"))
    assert strip_leading_break(node).children == [text("content")]
    plain = paragraph(text("content"))
    assert strip_leading_break(plain) is plain
