"""Command-line interface for osmgeo.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Graph summaries (entity counts, extent, highway intersections)
- Turn listing with restriction annotations
- Way joining and reversal
- GeoJSON export
"""

from osmgeo.cli.app import cli, main

__all__ = ["cli", "main"]
