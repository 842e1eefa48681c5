"""Document tree nodes and the intermediate results of container analysis"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


ROOT = "root"
PARAGRAPH = "paragraph"
TEXT = "text"
BREAK = "break"
HTML = "html"
CONTAINER = "container"

MARKER = ":"
CLASS_KEY = "class"


@dataclass
class Presentation:
    """Rendering metadata for a synthesized node: element name and attributes."""
    tag_name:   str
    attributes: dict[str, Any] = field(default_factory=dict)   # 'class' always first


@dataclass
class Node:
    """A document tree node; block parents hold blocks, paragraphs hold inlines."""
    type:         str
    children:     list["Node"] = field(default_factory=list)
    value:        Optional[str] = None       # text, html and code payloads
    attrs:        dict[str, Any] = field(default_factory=dict)
    presentation: Optional[Presentation] = None

    @property
    def first(self) -> Optional["Node"]:
        return self.children[0] if self.children else None

    @property
    def last(self) -> Optional["Node"]:
        return self.children[-1] if self.children else None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict; empty fields are omitted."""
        d: dict[str, Any] = {"type": self.type}
        if self.value is not None:
            d["value"] = self.value
        if self.attrs:
            d["attrs"] = dict(self.attrs)
        if self.presentation is not None:
            d["presentation"] = {
                "tag_name": self.presentation.tag_name,
                "attributes": dict(self.presentation.attributes),
            }
        if self.children:
            d["children"] = [c.to_dict() for c in self.children]
        return d


def text(value: str) -> Node:
    return Node(TEXT, value=value)


def paragraph(*children: Node) -> Node:
    return Node(PARAGRAPH, children=list(children))


def root(*children: Node) -> Node:
    return Node(ROOT, children=list(children))


@dataclass(frozen=True)
class Fence:
    """A run of marker characters; fences match only on equal length and marker."""
    length: int
    marker: str = MARKER

    @property
    def text(self) -> str:
        return self.marker * self.length


class Status(str, Enum):
    """Classification of a paragraph after fence analysis"""
    complete = "complete"   # opening and closing fence resolved in one paragraph
    mutated = "mutated"     # fences stripped; residual content belongs to the container
    regular = "regular"     # nothing consumed; the paragraph contributes no body


@dataclass
class AnalysisResult:
    """Outcome of analyzing one paragraph; `node` is the rewritten paragraph."""
    status:    Status
    node:      Node
    type:      Optional[str] = None
    raw_title: Optional[str] = None


@dataclass
class ParsedDoc:
    """A markdown file read from disk together with its document tree."""
    path:        Path
    slug:        str
    markdown:    str               # body only (frontmatter stripped)
    frontmatter: dict[str, Any]
    tree:        Node
