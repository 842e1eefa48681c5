"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from mdcontainer.cli.commands import render_cmd, tree_cmd


app = typer.Typer(name="mdcontainer", no_args_is_help=True, help="Render ::: fenced containers in markdown")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log each pass and container")] = False,
    ):
    """Markdown container transform."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="render")(render_cmd)
app.command(name="tree")(tree_cmd)
