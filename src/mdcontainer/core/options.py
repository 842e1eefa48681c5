"""Caller-facing options for naming and decorating container and title nodes"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


NameFunction = Callable[[Optional[str], Optional[str]], Any]
PropertyFunction = Callable[[Optional[str], Optional[str]], dict[str, Any]]
TitleFunction = Callable[[Optional[str], Optional[str]], Any]


class _Defer:
    """Sentinel a title callback returns to fall back to the written title."""

    def __repr__(self) -> str:
        return "DEFER"


DEFER = _Defer()


@dataclass(frozen=True)
class Static:
    """A name fixed at configuration time."""
    value: str


@dataclass(frozen=True)
class Computed:
    """A name computed per node from (type, title)."""
    fn: NameFunction


NameSpec = Union[Static, Computed]


def as_name_spec(value: Any) -> NameSpec:
    """Coerce a string or callable into a NameSpec."""
    if isinstance(value, (Static, Computed)):
        return value
    if isinstance(value, str):
        return Static(value)
    if callable(value):
        return Computed(value)
    raise ValueError(f"expected a string or a callable, got {type(value).__name__}")


def resolve(spec: NameSpec, type_: Optional[str], title: Optional[str]) -> Any:
    """Return the literal value, or the callback's result for (type, title)."""
    if isinstance(spec, Static):
        return spec.value
    return spec.fn(type_, title)


def resolve_classes(spec: NameSpec, type_: Optional[str], title: Optional[str]) -> list[str]:
    """Class list for a node: a static base name is followed by the type."""
    if isinstance(spec, Static):
        return [spec.value, type_ or ""]
    return list(spec.fn(type_, title) or [])


class ContainerOptions(BaseModel):
    """Naming, class and property hooks used when building containers and titles.

    Tag and class names accept a string or a function of (type, title); the
    function form for class names returns the complete class list.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    title:                Optional[TitleFunction] = None
    container_tag_name:   NameSpec = Field(default=Static("div"))
    container_class_name: NameSpec = Field(default=Static("remark-container"))
    container_properties: Optional[PropertyFunction] = None
    title_tag_name:       NameSpec = Field(default=Static("div"))
    title_class_name:     NameSpec = Field(default=Static("remark-container-title"))
    title_properties:     Optional[PropertyFunction] = None

    @field_validator(
        "container_tag_name", "container_class_name", "title_tag_name", "title_class_name",
        mode="before",
    )
    @classmethod
    def _coerce_name(cls, value: Any) -> NameSpec:
        return as_name_spec(value)
