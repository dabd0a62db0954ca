"""Pure helpers built on the domain models.

This module contains:

- Geometry operations (signed area, bounds, simple-polygon checks, rotation)
- Keysym conversions (characters to keysyms and back, readable names)

All functions are stateless and safe to call from any thread.
"""

from keygeom.core.geometry import (
    bounding_bounds,
    edge_lengths,
    is_simple_polygon,
    rotate_points,
    segments_intersect,
    signed_area,
)
from keygeom.core.keysyms import (
    keysym_from_char,
    keysym_name,
    keysym_to_char,
    matrix_from_text,
)

__all__ = [
    "bounding_bounds",
    "edge_lengths",
    "is_simple_polygon",
    "keysym_from_char",
    "keysym_name",
    "keysym_to_char",
    "matrix_from_text",
    "rotate_points",
    "segments_intersect",
    "signed_area",
]
