"""Example of rendering a settings form from Python and from a JSON document."""

import argparse
import logging
import os

from rich.console import Console
from rich.traceback import install

from pyformkit import BufferSink, FormRenderer, RenderConfig
from pyformkit.models import load_document
from pyformkit.rendering.exporter import render_document

install(show_locals=True)

console = Console()

HERE = os.path.dirname(os.path.abspath(__file__))


def build_inline(renderer: FormRenderer) -> None:
    """Render a fieldset assembled in code."""
    renderer.fieldset(
        "General",
        [
            ["input", "general[name]", {"id": "general-name"}],
            ["input", "general[email]", {"type": "email"}],
            [
                "select",
                "general[roles]",
                {"multiple": True},
                {"options": {"admin": "Admin", "editor": "Editor"}, "selected": ["editor"]},
            ],
        ],
        {"class": "general"},
    )


def main():
    """Main function."""
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="pyformkit example.")
    parser.add_argument(
        "--document",
        default=os.path.join(HERE, "settings_form.json"),
        help="Form document to render after the inline fieldset.",
    )
    parser.add_argument(
        "--page", action="store_true", help="Wrap the document in a full page."
    )
    args = parser.parse_args()

    sink = BufferSink()
    renderer = FormRenderer(RenderConfig(editor_rows=6), sink=sink)

    build_inline(renderer)
    console.rule("Inline fieldset")
    console.print(sink.getvalue(), markup=False, highlight=False)

    sink.clear()
    render_document(load_document(args.document), renderer, page=args.page)
    console.rule("Document")
    console.print(sink.getvalue(), markup=False, highlight=False)
    logging.info("Rendered %d fragment(s)", len(sink.fragments))


if __name__ == "__main__":
    main()
