"""Converters between plain dictionaries and ShapeDocument.

The dictionary form is what the JSON reader and writer exchange. Every
object is checked for exactly the expected fields so that typos in a
hand-edited document are reported instead of silently ignored.
"""

from typing import Any

from keygeom.domain import Bounds, Color, KeysymMatrix, Outline
from keygeom.domain.document import ShapeDocument

_DOCUMENT_REQUIRED = {"bounds", "outlines"}
_DOCUMENT_OPTIONAL = {"symbols", "colors"}
_BOUNDS_FIELDS = {"x", "y", "width", "height"}
_OUTLINE_FIELDS = {"corner_radius", "points"}
_POINT_FIELDS = {"x", "y"}
_MATRIX_FIELDS = {"num_groups", "num_levels", "data"}
_COLOR_FIELDS = {"red", "green", "blue", "alpha"}


def _check_fields(
    data: Any,
    where: str,
    required: set[str],
    optional: frozenset[str] | set[str] = frozenset(),
) -> dict[str, Any]:
    """Ensure data is an object with all required and no unknown fields.

    Raises:
        ValueError: Describing the first problem found
    """
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected an object, got {type(data).__name__}")

    missing = sorted(required - data.keys())
    if missing:
        raise ValueError(f"{where}: missing field `{missing[0]}`")

    unknown = sorted(data.keys() - required - optional)
    if unknown:
        raise ValueError(f"{where}: unknown field `{unknown[0]}`")

    return data


def _named(data: Any, where: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected an object, got {type(data).__name__}")
    return data


def outline_from_dict(data: Any, where: str) -> Outline:
    """Convert and validate one outline object."""
    _check_fields(data, where, _OUTLINE_FIELDS)
    points = data["points"]
    if not isinstance(points, list):
        raise ValueError(f"{where}.points: expected a list")
    for i, point in enumerate(points):
        _check_fields(point, f"{where}.points[{i}]", _POINT_FIELDS)
    return Outline.from_dict(data)


def matrix_from_dict(data: Any, where: str) -> KeysymMatrix:
    """Convert and validate one keysym matrix, returning it frozen."""
    _check_fields(data, where, _MATRIX_FIELDS)
    if not isinstance(data["data"], list):
        raise ValueError(f"{where}.data: expected a list")
    return KeysymMatrix.from_dict(data).freeze()


def document_from_dict(data: Any) -> ShapeDocument:
    """Build a ShapeDocument from its dictionary form.

    Args:
        data: Parsed JSON content

    Returns:
        ShapeDocument with frozen keysym matrices

    Raises:
        ValueError: If the structure is wrong
        TypeError: If a field holds a value of the wrong type
        KeyGeomError: If a value breaks a domain invariant
    """
    _check_fields(data, "document", _DOCUMENT_REQUIRED, _DOCUMENT_OPTIONAL)

    bounds = Bounds.from_dict(_check_fields(data["bounds"], "bounds", _BOUNDS_FIELDS))

    outlines = {
        name: outline_from_dict(outline, f"outlines.{name}")
        for name, outline in _named(data["outlines"], "outlines").items()
    }

    symbols = {
        name: matrix_from_dict(matrix, f"symbols.{name}")
        for name, matrix in _named(data.get("symbols", {}), "symbols").items()
    }

    colors = {
        name: Color.from_dict(_check_fields(color, f"colors.{name}", _COLOR_FIELDS))
        for name, color in _named(data.get("colors", {}), "colors").items()
    }

    return ShapeDocument(bounds=bounds, outlines=outlines, symbols=symbols, colors=colors)


def document_to_dict(document: ShapeDocument) -> dict[str, Any]:
    """Convert a ShapeDocument to its dictionary form.

    Outline vertex order and matrix shapes are preserved exactly.
    """
    return {
        "bounds": document.bounds.to_dict(),
        "outlines": {name: o.to_dict() for name, o in document.outlines.items()},
        "symbols": {name: m.to_dict() for name, m in document.symbols.items()},
        "colors": {name: c.to_dict() for name, c in document.colors.items()},
    }
