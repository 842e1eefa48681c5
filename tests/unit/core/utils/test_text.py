"""Unit tests for core/utils/text.py"""

import pytest

from mdcontainer.core.utils.text import collapse_whitespace


@pytest.mark.parametrize("text,expected", [
    ("danger      My      Title       ", "danger My Title"),
    ("  a\tb\nc  ", "a b c"),
    ("   ", ""),
    ("single", "single"),
])
def test_collapse_whitespace(text, expected):
    """collapse_whitespace folds runs of any whitespace into one space and trims."""
    assert collapse_whitespace(text) == expected
