"""Per-node identifiers: `{tag#id.class@attr}` groups around a container title

    ::: info {section#foo.wide} Title Of Information {span#bar@hidden}

The leading group applies to the container node, the trailing group to the
title node. Either may be omitted.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from mdcontainer.core.utils.text import collapse_whitespace


REGEX_CUSTOM = re.compile(r'(\{[^{}]*\})?(\s*[^{}]*\s*)?(\{[^{}]*\})?')
PREFIXES = ('#', '.', '@')


@dataclass
class Identifiers:
    container_props: Optional[list[str]] = None
    title:           Optional[str] = None
    title_props:     Optional[list[str]] = None


@dataclass
class Props:
    """Structured form of an identifier token list."""
    tag_name:   Optional[str] = None
    id:         Optional[str] = None
    classes:    list[str] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)


def normalize_group(group: Optional[str]) -> Optional[list[str]]:
    """Turn `{section#id.a.b}` into ['section', '#id', '.a', '.b']; None when empty."""
    if not group:
        return None
    spaced = group.replace('{', '').replace('}', '')
    for prefix in PREFIXES:
        spaced = spaced.replace(prefix, f' {prefix}')
    tokens = collapse_whitespace(spaced)
    return tokens.split(' ') if tokens else None


def extract_identifiers(raw_title: Optional[str]) -> Identifiers:
    """Split a raw title into container props, normalized title text and title props."""
    if not raw_title or not raw_title.strip():
        return Identifiers()
    m = REGEX_CUSTOM.match(raw_title.strip())
    container_group, main_title, title_group = m.groups()
    title = collapse_whitespace(main_title) if main_title else ''
    return Identifiers(
        container_props=normalize_group(container_group),
        title=title or None,
        title_props=normalize_group(title_group),
    )


def parse_props(tokens: Optional[list[str]]) -> Props:
    """Interpret identifier tokens; punctuation-only tokens contribute nothing."""
    props = Props()
    for token in tokens or []:
        prefix, name = token[0], token[1:]
        if prefix == '#':
            if name and props.id is None:
                props.id = name
        elif prefix == '.':
            if name:
                props.classes.append(name)
        elif prefix == '@':
            key, sep, value = name.partition('=')
            if key:
                props.attributes[key] = value if sep else True
        elif props.tag_name is None:
            props.tag_name = token
    return props
