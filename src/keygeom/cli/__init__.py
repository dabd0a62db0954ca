"""Command-line interface for keygeom.

This module provides the CLI using Typer with rich output.

Commands:
- show: print outlines and keysym matrices of a document
- check: validate outlines and the default outline fallback
- rotate: rotate every outline and save a new document
"""

from keygeom.cli.app import cli, main

__all__ = ["cli", "main"]
