"""Sibling scanning: locate a closing paragraph and gather the container body"""

from typing import Optional

from mdcontainer.core.fence import closing_re, leading_run, MIN_FENCE
from mdcontainer.core.models import CONTAINER, PARAGRAPH, TEXT, Fence, Node, Status


def is_closing_candidate(node: Node, fence: Fence) -> bool:
    """True for a paragraph whose last inline child is text ending in exactly `fence`."""
    if node.type != PARAGRAPH or not node.children:
        return False
    last = node.last
    return last.type == TEXT and bool(closing_re(fence).search(last.value or ""))


def _opens_longer(node: Node, fence: Fence) -> bool:
    """True when node opens (or was built from) a fence longer than `fence`."""
    if node.type == CONTAINER:
        return node.attrs.get("fence", 0) > fence.length
    if node.type != PARAGRAPH or not node.children or node.first.type != TEXT:
        return False
    run = leading_run(node.first.value or "")
    return run >= MIN_FENCE and run > fence.length


def find_closing(siblings: list[Node], start: int, fence: Fence) -> Optional[int]:
    """Index of the nearest sibling after `start` that closes `fence`, or None.

    A longer fence met first means the block nests a longer fence inside a
    shorter one; the scan gives up rather than guess at the pairing.
    """
    for i in range(start + 1, len(siblings)):
        node = siblings[i]
        if is_closing_candidate(node, fence):
            return i
        if _opens_longer(node, fence):
            return None
    return None


def collect_between(
    siblings: list[Node],
    open_index: int,
    close_index: int,
    opening: Node,
    opening_status: Status,
    closing: Node,
    closing_status: Status,
    ) -> list[Node]:
    """Ordered container body: the nodes strictly between the fences, plus the
    opening and closing paragraphs when they still hold content."""
    children = list(siblings[open_index + 1:close_index])
    if opening_status == Status.mutated:
        children.insert(0, opening)
    if closing_status == Status.mutated:
        children.append(closing)
    return children
