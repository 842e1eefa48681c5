"""File discovery, frontmatter extraction, and markdown-it tree building"""

import re
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdcontainer.core.models import BREAK, HTML, PARAGRAPH, ROOT, TEXT, Node, ParsedDoc, text
from mdcontainer.core.utils.slug import slugify


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}

INLINE_TYPES = {'em': 'emphasis', 'strong': 'strong', 's': 'delete'}
BLOCK_TYPES = {
    'blockquote':  'blockquote',
    'bullet_list': 'list',
    'ordered_list': 'list',
    'list_item':   'listItem',
    'hr':          'thematicBreak',
}


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _strip_frontmatter(text_: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text_)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text_[m.end():]
    return {}, text_


def _merge_text(nodes: list[Node]) -> list[Node]:
    """Join adjacent text runs so soft line breaks live inside one text value."""
    out: list[Node] = []
    for node in nodes:
        if node.type == TEXT and out and out[-1].type == TEXT:
            out[-1] = text(out[-1].value + node.value)
        else:
            out.append(node)
    return out


def _inline(node: SyntaxTreeNode) -> list[Node]:
    """Convert the children of an inline node."""
    out: list[Node] = []
    for child in node.children:
        t = child.type
        if t in ('text', 'text_special'):
            out.append(text(child.content))
        elif t == 'softbreak':
            out.append(text('\n'))
        elif t == 'hardbreak':
            out.append(Node(BREAK))
        elif t == 'code_inline':
            out.append(Node('inlineCode', value=child.content))
        elif t == 'html_inline':
            out.append(Node(HTML, value=child.content))
        elif t == 'image':
            out.append(Node('image', attrs={
                'src': child.attrs.get('src', ''),
                'alt': child.content,
                'title': child.attrs.get('title'),
            }))
        elif t == 'link':
            out.append(Node('link', children=_inline(child), attrs={
                'href': child.attrs.get('href', ''),
                'title': child.attrs.get('title'),
            }))
        else:
            out.append(Node(INLINE_TYPES.get(t, t), children=_inline(child), attrs={'tag': child.tag}))
    return _merge_text(out)


def _children(node: SyntaxTreeNode) -> list[Node]:
    """Block children, with an inline child flattened in place."""
    out: list[Node] = []
    for child in node.children:
        if child.type == 'inline':
            out.extend(_inline(child))
        else:
            out.append(_block(child))
    return out


def _block(node: SyntaxTreeNode) -> Node:
    """Convert one block-level syntax node."""
    t = node.type
    if t == 'paragraph':
        return Node(PARAGRAPH, children=_children(node), attrs={'tight': True} if node.hidden else {})
    if t == 'heading':
        return Node('heading', children=_children(node), attrs={'level': int(node.tag[1:])})
    if t in ('fence', 'code_block'):
        lang = node.info.split()[0] if node.info.strip() else None
        return Node('code', value=node.content, attrs={'lang': lang} if lang else {})
    if t == 'html_block':
        return Node(HTML, value=node.content.rstrip('\n'))
    if t == 'ordered_list':
        start = int(node.attrs.get('start', 1))
        return Node('list', children=_children(node), attrs={'ordered': True, 'start': start})
    if t == 'bullet_list':
        return Node('list', children=_children(node), attrs={'ordered': False})
    if t in BLOCK_TYPES:
        return Node(BLOCK_TYPES[t], children=_children(node))
    # tables and plugin blocks keep their html tag and attributes
    return Node(t, children=_children(node), attrs={'tag': node.tag, **node.attrs})


def tokens_to_tree(tokens: list) -> Node:
    """Build the document tree from a markdown-it token stream."""
    return Node(ROOT, children=[_block(c) for c in SyntaxTreeNode(tokens).children])


def parse_text(markdown: str, parser_config: str = 'gfm-like') -> Node:
    """Parse markdown text into a document tree."""
    return tokens_to_tree(_make_parser(parser_config).parse(markdown))


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def parse_file(path: Path, parser_config: str = 'gfm-like') -> ParsedDoc:
    """Parse a single markdown file into a ParsedDoc carrying its tree."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)
    slug = slugify(frontmatter.get('slug') or path.stem, fallback='index')
    return ParsedDoc(
        path=path,
        slug=slug,
        markdown=body,
        frontmatter=frontmatter,
        tree=parse_text(body, parser_config),
    )
