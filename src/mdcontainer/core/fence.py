"""Fence lexer: detect container fences in paragraph text"""

import re
from typing import Optional

from mdcontainer.core.models import MARKER, TEXT, Fence, Node


MIN_FENCE = 3

FENCE_RE = re.compile(rf'^{re.escape(MARKER)}{{{MIN_FENCE},}}')
LEADING_RUN_RE = re.compile(rf'^{re.escape(MARKER)}+')


def leading_run(value: str) -> int:
    """Return the length of the marker run at the start of value (0 if none)."""
    m = LEADING_RUN_RE.match(value)
    return len(m.group(0)) if m else 0


def opening_fence(node: Node) -> Optional[Fence]:
    """Return the fence opening this paragraph, or None.

    Only a plain text first child can carry an opener; a leading emphasis,
    link or raw-markup span never does.
    """
    first = node.first
    if first is None or first.type != TEXT or not first.value:
        return None
    m = FENCE_RE.match(first.value)
    return Fence(len(m.group(0))) if m else None


def exact(fence: Fence) -> str:
    """Regex source matching exactly this fence: no marker on either side."""
    m = re.escape(fence.marker)
    return rf'(?<!{m}){re.escape(fence.text)}(?!{m})'


def is_bad_syntax(body: str, fence: Fence) -> bool:
    """True when the line after a bare opener is another fence of the same length.

    `:::` followed by `:::` or `::: tip` is a doubled marker, not an opener.
    """
    return bool(re.match(rf'^{exact(fence)}\s*(?:[\w-]+|\Z)', body))


def ends_with_fence(value: str, fence: Fence) -> bool:
    """True when value ends with exactly `fence` (a longer run does not count)."""
    if not value.endswith(fence.text):
        return False
    return not value[:-fence.length].endswith(fence.marker)


def closing_re(fence: Fence) -> re.Pattern:
    """Pattern for a closing fence at the end of a text run, trailing blanks allowed."""
    return re.compile(rf'{exact(fence)}\s*\Z')


def closing_line_re(fence: Fence) -> re.Pattern:
    """Pattern for a line consisting of only this fence."""
    return re.compile(rf'^\s*{exact(fence)}\s*\Z')
