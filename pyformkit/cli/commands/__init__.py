"""Command modules for the pyformkit CLI."""

from pyformkit.cli.commands import kinds, render

__all__ = ["kinds", "render"]
