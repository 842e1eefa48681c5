"""Tree-rewrite driver: turn fenced paragraph ranges into container nodes"""

import logging
import re
from copy import deepcopy
from dataclasses import replace
from typing import Optional

from mdcontainer.core.analyze import analyze_closing, analyze_opening, strip_leading_break
from mdcontainer.core.build import ContainerBuilder
from mdcontainer.core.collect import collect_between, find_closing
from mdcontainer.core.fence import MIN_FENCE, closing_line_re, leading_run, opening_fence
from mdcontainer.core.identifiers import Identifiers, extract_identifiers
from mdcontainer.core.models import CONTAINER, HTML, PARAGRAPH, ROOT, TEXT, Fence, Node, Status, paragraph, text
from mdcontainer.core.options import ContainerOptions


logger = logging.getLogger(__name__)

MAX_PASSES = 10
BLOCK_PARENTS = {ROOT, CONTAINER, "blockquote", "list", "listItem"}
RAW_FENCE_RE = re.compile(r'\n(:{3,})\s*\Z')


def split_text(value: str) -> list[str]:
    """Split a fenced paragraph's text where an inner fence line ends a block.

    The text is cut after a line holding only the same fence when more lines
    follow it, and before a line opening a longer fence.
    """
    run = leading_run(value)
    if run < MIN_FENCE or '\n' not in value:
        return [value]

    fence = Fence(run)
    close_line = closing_line_re(fence)
    lines = value.split('\n')
    for i in range(1, len(lines)):
        line_run = leading_run(lines[i])
        if line_run >= MIN_FENCE and line_run > fence.length:
            return ['\n'.join(lines[:i])] + split_text('\n'.join(lines[i:]))
        if close_line.match(lines[i]):
            if i == len(lines) - 1:
                break
            return ['\n'.join(lines[:i + 1])] + split_text('\n'.join(lines[i + 1:]))
    return [value]


def split_fenced_paragraphs(parent: Node) -> None:
    """Split single-text paragraphs that hold several fenced blocks, in place."""
    out: list[Node] = []
    for node in parent.children:
        if node.type == PARAGRAPH and len(node.children) == 1 and node.first.type == TEXT:
            parts = split_text(node.first.value)
            if len(parts) > 1:
                out.extend(paragraph(text(p)) for p in parts)
                continue
        elif node.type in BLOCK_PARENTS:
            split_fenced_paragraphs(node)
        out.append(node)
    parent.children = out


def split_raw_fences(parent: Node) -> None:
    """Move a fence glued to the end of a raw html block into its own paragraph.

    Fences are only recognized in paragraphs; an html block swallows the
    following lines up to a blank line, closing fence included.
    """
    out: list[Node] = []
    for node in parent.children:
        if node.type == HTML and node.value:
            m = RAW_FENCE_RE.search(node.value)
            if m:
                out.append(replace(node, value=node.value[:m.start()]))
                out.append(paragraph(text(m.group(1))))
                continue
        elif node.type in BLOCK_PARENTS:
            split_raw_fences(node)
        out.append(node)
    parent.children = out


class ContainerTransformer:
    """Rewrite a document tree until no further containers can be built.

    Closing an inner container changes the sibling list its enclosing
    container is scanned against, so passes repeat to a fixed point, bounded
    by `max_passes`.
    """

    def __init__(self, options: Optional[ContainerOptions] = None, max_passes: int = MAX_PASSES):
        self.builder = ContainerBuilder(options)
        self.max_passes = max_passes
        self.last_passes = 0

    def __call__(self, tree: Node) -> Node:
        tree = deepcopy(tree)
        self.last_passes = 0
        for n in range(1, self.max_passes + 1):
            split_fenced_paragraphs(tree)
            split_raw_fences(tree)
            built = self._walk(tree)
            self.last_passes = n
            logger.debug("pass %d built %d container(s)", n, built)
            if not built:
                break
        else:
            logger.warning("stopped after %d passes; containers were still being built", self.max_passes)
        return tree

    def _walk(self, parent: Node) -> int:
        """Visit block children depth-first, pre-order. Returns containers built."""
        built = 0
        siblings = parent.children
        i = 0
        while i < len(siblings):
            node = siblings[i]
            if node.type == PARAGRAPH and not node.attrs.get("title"):
                built += self._visit(siblings, i)
            elif node.type in BLOCK_PARENTS:
                built += self._walk(node)
            i += 1
        return built

    def _visit(self, siblings: list[Node], index: int) -> int:
        """Try to open a container at siblings[index]; splice it in on success."""
        fence = opening_fence(siblings[index])
        if fence is None:
            return 0

        opened = analyze_opening(siblings[index], fence)
        ids = extract_identifiers(opened.raw_title)
        opening = opened.node

        if opened.status == Status.complete:
            opening = strip_leading_break(opening)
            body = [opening] if opening.children else []
            siblings[index] = self._container(body, opened.type, ids, fence)
            return 1

        # a mutated opener stays mutated even when no closer turns up
        siblings[index] = opening
        status = opened.status if opening.children else Status.regular
        close = find_closing(siblings, index, fence)
        if close is None:
            return 0

        closed = analyze_closing(siblings[close], fence)
        body = collect_between(siblings, index, close, opening, status, closed.node, closed.status)
        if not body and opened.type is None and ids.title is None:
            return 0

        siblings[index:close + 1] = [self._container(body, opened.type, ids, fence)]
        return 1

    def _container(self, body: list[Node], type_: Optional[str], ids: Identifiers, fence: Fence) -> Node:
        title = self.builder.build_title(type_, ids.title, ids.title_props)
        children = ([title] if title else []) + body
        return self.builder.build_container(children, type_, ids.title, ids.container_props, fence)


def transform(tree: Node, options: Optional[ContainerOptions] = None, max_passes: int = MAX_PASSES) -> Node:
    """Return a copy of tree with fenced regions rewritten into container nodes."""
    return ContainerTransformer(options, max_passes)(tree)
