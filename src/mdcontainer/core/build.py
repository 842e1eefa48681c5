"""Container and title node construction"""

import logging
from typing import Any, Optional

from mdcontainer.core.identifiers import Props, parse_props
from mdcontainer.core.models import CLASS_KEY, CONTAINER, PARAGRAPH, Fence, Node, Presentation, text
from mdcontainer.core.options import DEFER, ContainerOptions, NameSpec, PropertyFunction, resolve, resolve_classes
from mdcontainer.core.utils.text import collapse_whitespace


logger = logging.getLogger(__name__)

RESERVED_KEYS = {CLASS_KEY, "className"}


def _keys(type_: Optional[str], title: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """Lower-cased type and whitespace-collapsed title passed to every callback."""
    return (
        type_.lower() if type_ else None,
        collapse_whitespace(title) if title else None,
    )


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, (list, tuple)) and not value)


def _properties(fn: Optional[PropertyFunction], type_: Optional[str], title: Optional[str]) -> dict[str, Any]:
    """Call a property hook, dropping empty values and any class key."""
    if fn is None:
        return {}
    return {
        k: v for k, v in (fn(type_, title) or {}).items()
        if k not in RESERVED_KEYS and not _is_empty(v)
    }


class ContainerBuilder:
    """Build container and title nodes from a parsed opener."""

    def __init__(self, options: Optional[ContainerOptions] = None):
        self.options = options or ContainerOptions()

    def _presentation(
        self,
        tag_spec: NameSpec,
        class_spec: NameSpec,
        properties: Optional[PropertyFunction],
        type_: Optional[str],
        title: Optional[str],
        props: Props,
        ) -> Presentation:
        classes = [c for c in resolve_classes(class_spec, type_, title) + props.classes if c]
        attributes: dict[str, Any] = {CLASS_KEY: classes}
        attributes.update(_properties(properties, type_, title))
        attributes.update(props.attributes)
        if props.id:
            attributes["id"] = props.id
        return Presentation(
            tag_name=props.tag_name or resolve(tag_spec, type_, title),
            attributes=attributes,
        )

    def build_title(
        self,
        type_: Optional[str],
        title: Optional[str],
        tokens: Optional[list[str]] = None,
        ) -> Optional[Node]:
        """Return the title node, or None when there is no title to show.

        A title hook returning None suppresses the title unless the title
        carries its own identifier group; DEFER or an empty string falls back
        to the written title. An identifier group always yields a title node,
        with empty text when there is no title to show.
        """
        type_, title = _keys(type_, title)
        opts = self.options

        override = opts.title(type_, title) if opts.title else DEFER
        if override is None and not tokens:
            return None
        if override is None or override is DEFER or override == "":
            main = title
        else:
            main = str(override)
        if not main and not tokens:
            return None

        presentation = self._presentation(
            opts.title_tag_name, opts.title_class_name, opts.title_properties,
            type_, title, parse_props(tokens),
        )
        return Node(PARAGRAPH, children=[text(main or "")], attrs={"title": True}, presentation=presentation)

    def build_container(
        self,
        children: list[Node],
        type_: Optional[str],
        title: Optional[str],
        tokens: Optional[list[str]] = None,
        fence: Optional[Fence] = None,
        ) -> Node:
        """Return a container node wrapping children."""
        type_, title = _keys(type_, title)
        opts = self.options
        presentation = self._presentation(
            opts.container_tag_name, opts.container_class_name, opts.container_properties,
            type_, title, parse_props(tokens),
        )
        logger.debug("built <%s> container type=%r title=%r with %d child(ren)",
                     presentation.tag_name, type_, title, len(children))
        return Node(
            CONTAINER,
            children=list(children),
            attrs={"fence": fence.length} if fence else {},
            presentation=presentation,
        )
