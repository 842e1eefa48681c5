"""Shared fixtures for end-to-end tests: markdown text in, HTML out"""

from textwrap import dedent

import pytest

from mdcontainer.core.options import ContainerOptions
from mdcontainer.core.parse import parse_text
from mdcontainer.core.render import render_html
from mdcontainer.core.transform import transform


@pytest.fixture(name="process")
def process_fixture():
    def _process(markdown: str, options: ContainerOptions = None, allow_html: bool = False) -> str:
        tree = transform(parse_text(dedent(markdown).strip("\n")), options)
        return render_html(tree, allow_html=allow_html)
    return _process
