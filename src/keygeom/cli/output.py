"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from keygeom.core import keysym_name
from keygeom.domain import KeysymMatrix, Outline, ShapeDocument

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]keygeom[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(path: str, document: ShapeDocument) -> None:
    """Print a one-line summary of a document.

    Args:
        path: Path the document was loaded from
        document: Loaded document
    """
    line = Text("  ")
    line.append(path)
    console.print(line)
    bounds = document.bounds
    console.print(
        f"  {len(document.outlines)} outlines {SYM_DOT} "
        f"{len(document.symbols)} keys {SYM_DOT} "
        f"{bounds.width:g}x{bounds.height:g}"
    )


def outline_table(outlines: dict[str, Outline]) -> Table:
    """Build a table describing each outline."""
    table = Table(title="Outlines", title_justify="left")
    table.add_column("Name")
    table.add_column("Vertices", justify="right")
    table.add_column("Radius", justify="right")
    table.add_column("Bounds")
    table.add_column("Long side", justify="right")

    for name, outline in outlines.items():
        bounds = outline.bounds()
        table.add_row(
            name,
            str(outline.num_points),
            f"{outline.corner_radius:g}",
            f"{bounds.x:g},{bounds.y:g} {bounds.width:g}x{bounds.height:g}",
            f"{bounds.long_side:g}",
        )
    return table


def symbol_table(symbols: dict[str, KeysymMatrix]) -> Table:
    """Build a table with one row per key and group."""
    table = Table(title="Symbols", title_justify="left")
    table.add_column("Key")
    table.add_column("Group", justify="right")
    table.add_column("Levels")

    for name, matrix in symbols.items():
        for group in range(matrix.num_groups):
            levels = " ".join(keysym_name(code) for code in matrix.group(group))
            table.add_row(name, str(group), levels)
    return table


def print_problems(problems: list[str]) -> None:
    """Print validation problems, one per line."""
    for problem in problems:
        console.print(f"  [red]{SYM_ERR}[/red] {problem}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")


def print_error(message: str, details: str | None = None) -> None:
    """Print an error message.

    Args:
        message: Main error message
        details: Optional additional details
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  [dim]{details}[/dim]")
