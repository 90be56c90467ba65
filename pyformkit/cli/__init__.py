"""Command line interface for pyformkit."""
