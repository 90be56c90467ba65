#!/usr/bin/env python
"""Command line interface for pyformkit."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from pyformkit.cli.commands import kinds, render

app = typer.Typer(help="Render declarative form documents to HTML")

app.command(name="render")(render.main)
app.command(name="kinds")(kinds.main)


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
):
    """Render HTML form controls from JSON documents."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True), rich_tracebacks=True, show_time=False
            )
        ],
    )
    if verbose:
        logging.getLogger("pyformkit").setLevel(logging.DEBUG)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
