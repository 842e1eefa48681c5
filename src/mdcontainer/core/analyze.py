"""Paragraph analyzer: classify opening and closing paragraphs of a container

Analysis never edits the paragraph it is given. Each result carries a new
paragraph version with the fence text removed; the driver decides whether to
splice it into the tree.
"""

import re
from dataclasses import replace

from mdcontainer.core.fence import closing_re, ends_with_fence, exact, is_bad_syntax
from mdcontainer.core.header import match_opener, parse_header
from mdcontainer.core.models import BREAK, TEXT, AnalysisResult, Fence, Node, Status, text


def _drop_empty_text(children: list[Node]) -> list[Node]:
    return [c for c in children if not (c.type == TEXT and c.value == "")]


def _rewrite(node: Node, children: list[Node]) -> Node:
    return replace(node, children=_drop_empty_text(children))


def _analyze_single(node: Node, fence: Fence) -> AnalysisResult:
    """Opening analysis for a paragraph holding one text run."""
    header = parse_header(node.first.value, fence)
    if header.body is None:
        return AnalysisResult(Status.regular, node, header.type, header.raw_title)

    body = header.body
    if header.bare and is_bad_syntax(body, fence):
        return AnalysisResult(Status.regular, node)

    if ends_with_fence(body, fence):
        inner = body[:-fence.length].strip()
        if header.type is None and header.raw_title is None and not inner:
            return AnalysisResult(Status.regular, node)
        return AnalysisResult(Status.complete, _rewrite(node, [text(inner)]), header.type, header.raw_title)

    return AnalysisResult(Status.mutated, _rewrite(node, [text(body)]), header.type, header.raw_title)


def _analyze_multi(node: Node, fence: Fence) -> AnalysisResult:
    """Opening analysis for a paragraph whose inline parse produced several children.

    Such a paragraph always has content past the opener line, so it is never
    regular. When the first text run is only the opener line it is dropped.
    """
    first, middle, last = node.children[0], node.children[1:-1], node.children[-1]
    children: list[Node] = []

    if '\n' not in first.value:
        type_, raw_title = match_opener(first.value)
    else:
        header = parse_header(first.value, fence)
        type_, raw_title = header.type, header.raw_title
        children.append(text(header.body))

    children.extend(middle)

    status = Status.mutated
    if last.type == TEXT:
        value = last.value
        if ends_with_fence(value, fence) and value[:-fence.length].endswith('\n'):
            status = Status.complete
            value = value[:-(fence.length + 1)]
        children.append(text(value))
    else:
        children.append(last)

    return AnalysisResult(status, _rewrite(node, children), type_, raw_title)


def analyze_opening(node: Node, fence: Fence) -> AnalysisResult:
    """Classify a paragraph that starts with `fence` as complete, mutated or regular."""
    if len(node.children) == 1:
        return _analyze_single(node, fence)
    return _analyze_multi(node, fence)


def analyze_closing(node: Node, fence: Fence) -> AnalysisResult:
    """Strip the closing fence from a paragraph found to close a container.

    A paragraph that is only the fence contributes nothing (regular);
    otherwise whatever remains is container content (mutated).
    """
    children = list(node.children)
    last = node.last

    if last.type == TEXT:
        if len(children) == 1 and last.value.strip() == fence.text:
            return AnalysisResult(Status.regular, node)

        with_newline = re.compile(rf'\n\s*{exact(fence)}\s*\Z')
        value = last.value
        if with_newline.search(value):
            value = with_newline.sub('', value)
        else:
            value = closing_re(fence).sub('', value)
        if value:
            children[-1] = text(value)
        else:
            children.pop()

    rewritten = _rewrite(node, children)
    status = Status.mutated if rewritten.children else Status.regular
    return AnalysisResult(status, rewritten)


def strip_leading_break(node: Node) -> Node:
    """Drop a hard break left at the start of a paragraph by the removed opener line."""
    if node.first is not None and node.first.type == BREAK:
        return replace(node, children=node.children[1:])
    return node
