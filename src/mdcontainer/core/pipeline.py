"""Pipeline step functions: parse, transform and render orchestration"""

import json
import logging
from pathlib import Path
from typing import Optional

from mdcontainer.config import Settings
from mdcontainer.core.models import ParsedDoc
from mdcontainer.core.parse import discover_files, parse_file
from mdcontainer.core.render import render_html
from mdcontainer.core.transform import ContainerTransformer


logger = logging.getLogger(__name__)


def transform_doc(parsed: ParsedDoc, settings: Settings) -> ParsedDoc:
    """Return parsed with its tree rewritten into containers."""
    transformer = ContainerTransformer(settings.to_options(), settings.max_passes)
    tree = transformer(parsed.tree)
    logger.debug("%s: %d pass(es)", parsed.path, transformer.last_passes)
    return ParsedDoc(
        path=parsed.path,
        slug=parsed.slug,
        markdown=parsed.markdown,
        frontmatter=parsed.frontmatter,
        tree=tree,
    )


def render_doc(parsed: ParsedDoc, settings: Settings) -> str:
    """Transform and render one parsed document to HTML."""
    doc = transform_doc(parsed, settings)
    return render_html(doc.tree, allow_html=settings.allow_html) + "\n"


def render_path(path: Path, settings: Settings) -> str:
    """Render a single markdown file to an HTML string."""
    try:
        return render_doc(parse_file(path, settings.parser_config), settings)
    except Exception as e:
        raise RuntimeError(f"Failed to render {path}: {e}") from e


def tree_json(path: Path, settings: Settings) -> str:
    """Transformed tree of a single markdown file as indented JSON."""
    try:
        doc = transform_doc(parse_file(path, settings.parser_config), settings)
    except Exception as e:
        raise RuntimeError(f"Failed to render {path}: {e}") from e
    return json.dumps(doc.tree.to_dict(), indent=2)


def run_render(
    path: str,
    settings: Settings,
    output_dir: Optional[Path] = None,
    ) -> list[tuple[Path, Path]]:
    """Render every markdown file under path into output_dir. Returns (source_path, html_file) pairs."""
    output_dir = output_dir or Path(settings.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    results = []
    for p in discover_files(Path(path)):
        try:
            parsed = parse_file(p, settings.parser_config)
            html = render_doc(parsed, settings)
            out_file = output_dir / f"{parsed.slug}.html"
            out_file.write_text(html, encoding="utf-8")
            results.append((p, out_file))
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
        logger.info("rendered %s -> %s", p, out_file)
    return results
