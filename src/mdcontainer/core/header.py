"""Header parser: split an opener into type, raw title and body"""

import re
from dataclasses import dataclass
from typing import Optional

from mdcontainer.core.models import Fence


# Opening fence: 3 or more colons, optional type, optional title (trailing spaces allowed)
REGEX_START = re.compile(r'^(:{3,})\s*([A-Za-z0-9_-]+)?\s*(.*\S)?\s*\Z')

HEADER_LINE_RE = re.compile(r'^\s*([A-Za-z0-9_-]+)?\s*(.*\S)?\s*\Z')
ONE_BLANK_RE = re.compile(r'^[^\S\r\n]')


@dataclass
class Header:
    type:      Optional[str] = None
    raw_title: Optional[str] = None
    body:      Optional[str] = None     # None: the opener line is the whole text
    bare:      bool = False             # the fence line carries no type or title


def match_opener(line: str) -> tuple[Optional[str], Optional[str]]:
    """Return (type, raw_title) from a standalone opener line; (None, None) if it is not one."""
    m = REGEX_START.match(line)
    if not m:
        return None, None
    return m.group(2), m.group(3)


def parse_header(value: str, fence: Fence) -> Header:
    """Parse the text of a paragraph's first inline child after its opening fence.

    Without a newline the whole text is the opener line and no body is
    captured. Otherwise the fence and one blank are dropped, the rest of the
    first line is read as `type title`, and everything after the first newline
    is the body.
    """
    if '\n' not in value:
        type_, raw_title = match_opener(value)
        return Header(type=type_, raw_title=raw_title)

    rest = ONE_BLANK_RE.sub('', value[fence.length:], count=1)
    n = rest.index('\n')
    if n == 0:
        return Header(body=rest[1:], bare=True)

    # always matches: every group is optional
    type_, raw_title = HEADER_LINE_RE.match(rest[:n]).groups()
    return Header(
        type=type_,
        raw_title=raw_title,
        body=rest[n + 1:],
        bare=type_ is None and raw_title is None,
    )
