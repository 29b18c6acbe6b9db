"""Command-line interface for sfdpreview.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Render a glyph of an SFD document to SVG
- List the glyphs of a document
- Verbose/quiet output modes and optional log file
"""

from sfdpreview.cli.app import cli, main

__all__ = ["cli", "main"]
