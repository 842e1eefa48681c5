"""Unit tests for core/options.py"""

import pytest
from pydantic import ValidationError

from mdcontainer.core.options import Computed, ContainerOptions, DEFER, Static, resolve, resolve_classes


def test_defaults_are_static():
    """Default tag and class names are static strings."""
    opts = ContainerOptions()
    assert opts.container_tag_name == Static("div")
    assert opts.container_class_name == Static("remark-container")
    assert opts.title_tag_name == Static("div")
    assert opts.title_class_name == Static("remark-container-title")
    assert opts.title is None


def test_strings_and_callables_are_coerced():
    """Strings become Static and callables become Computed."""
    fn = lambda type_, title: "section"
    opts = ContainerOptions(container_tag_name="aside", title_tag_name=fn)
    assert opts.container_tag_name == Static("aside")
    assert isinstance(opts.title_tag_name, Computed)
    assert opts.title_tag_name.fn is fn


def test_invalid_name_rejected():
    """A name that is neither a string nor a callable fails validation."""
    with pytest.raises(ValidationError):
        ContainerOptions(container_tag_name=42)


def test_options_are_frozen():
    """Options cannot be mutated after construction."""
    opts = ContainerOptions()
    with pytest.raises(ValidationError):
        opts.container_tag_name = Static("span")


def test_resolve_static_and_computed():
    """resolve returns the literal or the callback result."""
    assert resolve(Static("div"), "tip", None) == "div"
    assert resolve(Computed(lambda t, x: f"{t}-{x}"), "tip", "Hi") == "tip-Hi"


def test_resolve_classes_static_appends_type():
    """A static class name is followed by the container type."""
    assert resolve_classes(Static("remark-container"), "tip", None) == ["remark-container", "tip"]
    assert resolve_classes(Static("remark-container"), None, None) == ["remark-container", ""]


def test_resolve_classes_computed_is_complete():
    """A computed class name supplies the whole list."""
    spec = Computed(lambda t, x: [f"custom-{t}"])
    assert resolve_classes(spec, "tip", None) == ["custom-tip"]
    assert resolve_classes(Computed(lambda t, x: None), "tip", None) == []


def test_defer_repr():
    """DEFER has a readable repr."""
    assert repr(DEFER) == "DEFER"
