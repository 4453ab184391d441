"""Command-line interface for glyphstyler.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for batch styling
- Style presets listing
- Outline and control point inspection for a single glyph
- Name table metadata display and editing
"""

from glyphstyler.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
