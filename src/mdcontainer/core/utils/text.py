"""Whitespace normalization for titles and identifier groups"""

import re


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return re.sub(r'\s+', ' ', text).strip()
