"""Domain models for keygeom.

This module contains the value types describing keyboard key geometry and
symbols. All models are designed to be:

- Immutable once shared (frozen dataclasses, freezable symbol matrices)
- Serializable to plain dictionaries for interchange documents
- Independent of any rendering toolkit

Key classes:
- Point: A 2D vertex with exact right-angle rotation
- Bounds: An element's bounding box
- Outline: A rounded polygon key shape
- KeysymMatrix: The group x level keysyms of a key
- Color: An RGBA drawing color
- OutlineCatalog: Named outlines shared between keys
- ShapeDocument: All values exchanged for one keyboard
"""

from keygeom.domain.bounds import Bounds, long_side
from keygeom.domain.catalog import OutlineCatalog
from keygeom.domain.color import Color, new_color
from keygeom.domain.document import ShapeDocument
from keygeom.domain.keysym_matrix import (
    NO_SYMBOL,
    VOID_SYMBOL,
    KeysymMatrix,
    get_symbol,
    set_symbol,
)
from keygeom.domain.outline import Outline
from keygeom.domain.point import Point, rotate_point

__all__: list[str] = [
    # Constants
    "NO_SYMBOL",
    "VOID_SYMBOL",
    # Core types
    "Point",
    "Bounds",
    "Outline",
    "KeysymMatrix",
    "Color",
    "OutlineCatalog",
    "ShapeDocument",
    # Operations
    "rotate_point",
    "long_side",
    "get_symbol",
    "set_symbol",
    "new_color",
]
