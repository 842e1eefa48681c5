"""Reference HTML renderer for transformed document trees

Containers and titles render through their presentation metadata; the rest of
the tree follows CommonMark HTML. Raw html is dropped unless `allow_html` is
set.
"""

from typing import Any

from markdown_it.common.utils import escapeHtml

from mdcontainer.core.models import BREAK, HTML, PARAGRAPH, ROOT, TEXT, Node


INLINE_TAGS = {'emphasis': 'em', 'strong': 'strong', 'delete': 'del'}


def render_attributes(attributes: dict[str, Any]) -> str:
    """Serialize attributes; True renders bare, None/False and empty lists are skipped."""
    parts = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = ' '.join(str(v) for v in value)
        if value is True:
            parts.append(f' {key}')
        else:
            parts.append(f' {key}="{escapeHtml(str(value))}"')
    return ''.join(parts)


class HtmlRenderer:
    """Render a document tree to an HTML string."""

    def __init__(self, allow_html: bool = False):
        self.allow_html = allow_html

    def render(self, tree: Node) -> str:
        return self._block(tree)

    def _blocks(self, nodes: list[Node], sep: str = '\n') -> str:
        return sep.join(out for out in (self._block(n) for n in nodes) if out)

    def _inlines(self, nodes: list[Node]) -> str:
        return ''.join(self._inline(n) for n in nodes)

    def _block(self, node: Node) -> str:
        t = node.type
        if node.presentation is not None:
            tag = node.presentation.tag_name
            inner = self._inlines(node.children) if t == PARAGRAPH else self._blocks(node.children, sep='')
            return f'<{tag}{render_attributes(node.presentation.attributes)}>{inner}</{tag}>'
        if t == ROOT:
            return self._blocks(node.children)
        if t == PARAGRAPH:
            inner = self._inlines(node.children)
            return inner if node.attrs.get('tight') else f'<p>{inner}</p>'
        if t == 'heading':
            level = node.attrs.get('level', 1)
            return f'<h{level}>{self._inlines(node.children)}</h{level}>'
        if t == 'code':
            lang = node.attrs.get('lang')
            cls = f' class="language-{escapeHtml(lang)}"' if lang else ''
            return f'<pre><code{cls}>{escapeHtml(node.value or "")}</code></pre>'
        if t == HTML:
            return (node.value or '') if self.allow_html else ''
        if t == 'thematicBreak':
            return '<hr>'
        if t == 'blockquote':
            return f'<blockquote>\n{self._blocks(node.children)}\n</blockquote>'
        if t == 'list':
            return self._list(node)
        if t == 'listItem':
            return self._list_item(node)
        return self._generic(node)

    def _list(self, node: Node) -> str:
        if node.attrs.get('ordered'):
            start = node.attrs.get('start', 1)
            attrs = f' start="{start}"' if start != 1 else ''
            return f'<ol{attrs}>\n{self._blocks(node.children)}\n</ol>'
        return f'<ul>\n{self._blocks(node.children)}\n</ul>'

    def _list_item(self, node: Node) -> str:
        tight = all(c.type != PARAGRAPH or c.attrs.get('tight') for c in node.children)
        if tight or not node.children:
            return f'<li>{self._blocks(node.children)}</li>'
        return f'<li>\n{self._blocks(node.children)}\n</li>'

    def _generic(self, node: Node) -> str:
        attrs = dict(node.attrs)
        tag = attrs.pop('tag', None) or 'div'
        inline = any(c.type == TEXT for c in node.children)
        inner = self._inlines(node.children) if inline else self._blocks(node.children)
        if node.children and not inline:
            inner = f'\n{inner}\n'
        return f'<{tag}{render_attributes(attrs)}>{inner}</{tag}>'

    def _inline(self, node: Node) -> str:
        t = node.type
        if t == TEXT:
            return escapeHtml(node.value or '')
        if t == BREAK:
            return '<br>\n'
        if t == HTML:
            return (node.value or '') if self.allow_html else ''
        if t == 'inlineCode':
            return f'<code>{escapeHtml(node.value or "")}</code>'
        if t == 'link':
            attrs = render_attributes({'href': node.attrs.get('href'), 'title': node.attrs.get('title')})
            return f'<a{attrs}>{self._inlines(node.children)}</a>'
        if t == 'image':
            attrs = render_attributes({
                'src': node.attrs.get('src'),
                'alt': node.attrs.get('alt', ''),
                'title': node.attrs.get('title'),
            })
            return f'<img{attrs}>'
        tag = INLINE_TAGS.get(t) or node.attrs.get('tag') or 'span'
        return f'<{tag}>{self._inlines(node.children)}</{tag}>'


def render_html(tree: Node, allow_html: bool = False) -> str:
    """Render a (transformed) document tree to HTML."""
    return HtmlRenderer(allow_html).render(tree)
