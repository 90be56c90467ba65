"""Render command: turn a JSON form document into HTML."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from pyformkit.cli.utils.config import load_config
from pyformkit.exceptions import FormKitException
from pyformkit.models.document import load_document
from pyformkit.renderer import FormRenderer
from pyformkit.rendering.exporter import render_document
from pyformkit.rendering.options import RenderConfig
from pyformkit.rendering.sink import StreamSink

console = Console(stderr=True)


def _render(form, config: RenderConfig, sink: StreamSink, page: bool) -> None:
    render_document(form, FormRenderer(config, sink), page=page)
    sink.write("\n")


def main(
    document: Path = typer.Argument(..., help="Path to a JSON form document"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write HTML to this file instead of stdout"
    ),
    page: bool = typer.Option(
        False, "--page", help="Wrap the fieldsets in a standalone HTML page"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="JSON file with render configuration"
    ),
):
    """Render every fieldset of DOCUMENT."""
    config = RenderConfig.from_mapping(load_config(config_file))

    try:
        form = load_document(document)
        if output is None:
            _render(form, config, StreamSink(), page)
            return
        with open(output, "w", encoding="utf-8") as f:
            _render(form, config, StreamSink(f), page)
        console.print(f"Wrote [bold]{output}[/bold]")
    except FormKitException as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)
