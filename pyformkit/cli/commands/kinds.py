"""List the registered control kinds."""

from rich.console import Console
from rich.table import Table

from pyformkit.rendering.registry import DEFAULT_REGISTRY

console = Console()


def main():
    """List all registered control kinds."""
    table = Table("Kind", "Builder")
    for kind in sorted(DEFAULT_REGISTRY):
        table.add_row(kind, type(DEFAULT_REGISTRY[kind]).__name__)
    console.print(table)
