"""Unit tests for core/collect.py"""

from mdcontainer.core.collect import collect_between, find_closing, is_closing_candidate
from mdcontainer.core.models import CONTAINER, Node, Status, paragraph, text


def test_is_closing_candidate(fence3):
    """Paragraphs ending in exactly the fence are candidates."""
    assert is_closing_candidate(paragraph(text(":::")), fence3)
    assert is_closing_candidate(paragraph(text("content\n:::")), fence3)
    assert not is_closing_candidate(paragraph(text("::::")), fence3)
    assert not is_closing_candidate(paragraph(text("::: x")), fence3)
    assert not is_closing_candidate(Node("heading", children=[text(":::")]), fence3)
    assert not is_closing_candidate(paragraph(Node("strong", children=[text(":::")])), fence3)


def test_find_closing_nearest(fence3):
    """The nearest matching sibling closes the fence."""
    siblings = [
        paragraph(text("::: tip")),
        paragraph(text("body")),
        paragraph(text(":::")),
        paragraph(text(":::")),
    ]
    assert find_closing(siblings, 0, fence3) == 2


def test_find_closing_none(fence3):
    """No match yields None."""
    siblings = [paragraph(text("::: tip")), paragraph(text("body")), paragraph(text("::::"))]
    assert find_closing(siblings, 0, fence3) is None


def test_find_closing_stops_at_longer_opener(fence3):
    """A longer fence opened first ends the scan."""
    siblings = [
        paragraph(text("::: outer")),
        paragraph(text(":::: inner")),
        paragraph(text("::::")),
        paragraph(text(":::")),
    ]
    assert find_closing(siblings, 0, fence3) is None


def test_find_closing_stops_at_longer_container(fence3):
    """A container built from a longer fence ends the scan."""
    siblings = [
        paragraph(text("::: outer")),
        Node(CONTAINER, attrs={"fence": 4}),
        paragraph(text(":::")),
    ]
    assert find_closing(siblings, 0, fence3) is None


def test_find_closing_skips_same_length_container(fence4):
    """Containers with shorter fences are passed over."""
    siblings = [
        paragraph(text(":::: group")),
        Node(CONTAINER, attrs={"fence": 3}),
        paragraph(text("::::")),
    ]
    assert find_closing(siblings, 0, fence4) == 2


def test_collect_between_order():
    """Mutated opener and closer bracket the in-between nodes."""
    middle = [paragraph(text("a")), paragraph(text("b"))]
    opening = paragraph(text("first"))
    closing = paragraph(text("last"))
    siblings = [paragraph(text("::: x\nfirst"))] + middle + [paragraph(text("last\n:::"))]
    body = collect_between(siblings, 0, 3, opening, Status.mutated, closing, Status.mutated)
    assert body == [opening] + middle + [closing]


def test_collect_between_regular_ends_excluded():
    """Regular opener and closer add nothing."""
    middle = [paragraph(text("a"))]
    siblings = [paragraph(text("::: x"))] + middle + [paragraph(text(":::"))]
    body = collect_between(siblings, 0, 2, siblings[0], Status.regular, siblings[2], Status.regular)
    assert body == middle
