"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdcontainer.config import Settings, load_config
from mdcontainer.core.pipeline import render_path, run_render, tree_json


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def render_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    allow_html: Annotated[Optional[bool], typer.Option("--allow-html", help="Pass raw html through")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    passes: Annotated[Optional[int], typer.Option("--max-passes", help="Max rewrite passes")] = None,
    ):
    """Render a file to stdout, or a directory (or a file with --out-dir) to .html files."""
    settings = _settings(overrides={
        "output_dir": out, "allow_html": allow_html,
        "parser_config": parser, "max_passes": passes,
    })
    source = Path(path)
    if not source.exists():
        _fail(f"No such file or directory: {path}")

    if source.is_file() and out is None:
        try:
            typer.echo(render_path(source, settings), nl=False)
        except RuntimeError as e:
            _fail(str(e))
        return

    output_dir = Path(settings.output_dir)
    try:
        results = run_render(path, settings, output_dir)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No markdown files found under {path}.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")


def tree_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to transform")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    passes: Annotated[Optional[int], typer.Option("--max-passes", help="Max rewrite passes")] = None,
    ):
    """Print the transformed document tree as JSON."""
    settings = _settings(overrides={"parser_config": parser, "max_passes": passes})
    source = Path(path)
    if not source.is_file():
        _fail(f"Not a file: {path}")
    try:
        typer.echo(tree_json(source, settings))
    except RuntimeError as e:
        _fail(str(e))
