"""Command-line interface for strokeskel.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Thin images or contour files and save the skeleton image
- Print skeleton coordinates
- Compare strategies with an optional time budget
- Detailed error reporting
"""

from strokeskel.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
