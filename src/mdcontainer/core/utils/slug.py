"""Output file names derived from document slugs"""

import re


SLUG_STRIP_RE = re.compile(r'[^\w\s-]')
SLUG_SEP_RE = re.compile(r'[\s_]+')


def slugify(text: str, fallback: str = "") -> str:
    """Lowercase, hyphen-separated, path-safe form of text; `fallback` when nothing is left."""
    text = SLUG_SEP_RE.sub('-', SLUG_STRIP_RE.sub('', str(text).lower()))
    return re.sub(r'-+', '-', text).strip('-') or fallback
