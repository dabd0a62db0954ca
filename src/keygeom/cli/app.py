"""CLI application entry point for keygeom.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from keygeom import __version__
from keygeom.cli.output import (
    console,
    outline_table,
    print_document_info,
    print_error,
    print_header,
    print_problems,
    print_step,
    print_success,
    symbol_table,
)
from keygeom.config import KeyGeomSettings, LoggingConfig
from keygeom.core import bounding_bounds, edge_lengths, is_simple_polygon, rotate_points
from keygeom.domain import Bounds, Outline, Point, ShapeDocument
from keygeom.exceptions import KeyGeomError
from keygeom.io import ShapeReader, ShapeWriter
from keygeom.utils import LogWarnings, configure_logging

# Create the Typer app
app = typer.Typer(
    name="keygeom",
    help="Inspect, check and rotate keyboard geometry documents.",
    add_completion=False,
    no_args_is_help=True,
)

InputDocument = Annotated[
    Path,
    typer.Argument(
        help="Path to a JSON geometry document",
        show_default=False,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]keygeom[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Work with keyboard key outlines and keysym matrices."""
    settings = KeyGeomSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = settings


def _load(path: Path) -> ShapeDocument:
    try:
        return ShapeReader(path).load()
    except KeyGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


@app.command()
def show(
    input_document: InputDocument,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only print the tables"),
    ] = False,
) -> None:
    """Print the outlines and keysym matrices of a document."""
    document = _load(input_document)

    if not quiet:
        print_header(__version__)
        print_document_info(str(input_document), document)

    console.print()
    console.print(outline_table(document.outlines))
    if document.symbols:
        console.print()
        console.print(symbol_table(document.symbols))


def find_outline_problems(name: str, outline: Outline) -> list[str]:
    """List shape problems a renderer would trip over.

    Args:
        name: Outline name, used in messages
        outline: Outline to check

    Returns:
        Human-readable problem descriptions, empty if the outline is fine
    """
    problems = []
    if outline.num_points < 3:
        problems.append(f"{name}: needs at least 3 vertices, has {outline.num_points}")
        return problems

    if any(length == 0 for length in edge_lengths(outline.points)):
        problems.append(f"{name}: has repeated consecutive vertices")
    elif not is_simple_polygon(outline.points):
        problems.append(f"{name}: edges cross each other")

    return problems


@app.command()
def check(
    ctx: typer.Context,
    input_document: InputDocument,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Treat fallback warnings as problems"),
    ] = False,
) -> None:
    """Validate a document and report shape problems."""
    settings: KeyGeomSettings = ctx.obj or KeyGeomSettings()

    print_step(f"Checking {input_document}")
    document = _load(input_document)

    problems: list[str] = []
    for name, outline in document.outlines.items():
        problems.extend(find_outline_problems(name, outline))
        radius = outline.effective_corner_radius()
        if radius < outline.corner_radius:
            console.print(
                f"  {name}: corner radius {outline.corner_radius:g} drawn as {radius:g}"
            )

    warnings = LogWarnings()
    document.catalog(settings.catalog).resolve(None, warnings)
    if strict:
        problems.extend(warnings.warnings)
    else:
        for warning in warnings.warnings:
            console.print(f"  [yellow]{warning}[/yellow]")

    if problems:
        print_problems(problems)
        print_error(f"{len(problems)} problem(s) found")
        raise typer.Exit(code=1)

    print_success(f"{len(document.outlines)} outlines, {len(document.symbols)} keys OK")


def rotate_document(document: ShapeDocument, angle: float) -> ShapeDocument:
    """Rotate every outline and the keyboard size by angle degrees.

    The keyboard bounds keep their top left corner; only the size follows
    the rotation.
    """
    size = document.bounds
    corners = [
        Point(0.0, 0.0),
        Point(size.width, 0.0),
        Point(size.width, size.height),
        Point(0.0, size.height),
    ]
    rotated = bounding_bounds(rotate_points(corners, angle))
    return ShapeDocument(
        bounds=Bounds(size.x, size.y, rotated.width, rotated.height),
        outlines={name: o.rotate(angle) for name, o in document.outlines.items()},
        symbols=dict(document.symbols),
        colors=dict(document.colors),
    )


@app.command()
def rotate(
    input_document: InputDocument,
    angle: Annotated[
        float,
        typer.Option(
            "--angle",
            "-a",
            help="Rotation in degrees, counter-clockwise (multiples of 90 are exact)",
        ),
    ] = 90.0,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-rotated.json)",
        ),
    ] = None,
) -> None:
    """Rotate all outlines of a document and save the result."""
    document = _load(input_document)
    output_path = output or ShapeWriter.get_rotated_path(input_document)

    try:
        ShapeWriter(output_path).save(rotate_document(document, angle))
    except KeyGeomError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    print_success(f"Rotated {len(document.outlines)} outlines by {angle:g}°")
    console.print(f"  {output_path}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
