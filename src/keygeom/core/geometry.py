"""Geometric operations on outline vertices.

This module provides polygon utilities for:
- Signed area calculation (shoelace formula)
- Bounding boxes of vertex sequences
- Edge lengths of closed polygons
- Segment intersection and simple-polygon checks
- Rotation of whole vertex sequences

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from keygeom.domain import Bounds, Point


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])  # CCW square
        1.0
        >>> signed_area([p1, p4, p3, p2])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def bounding_bounds(points: Sequence[Point]) -> Bounds:
    """Return the axis-aligned box around points.

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Cannot compute bounds of an empty point list")

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    min_x, min_y = min(xs), min(ys)
    return Bounds(min_x, min_y, max(xs) - min_x, max(ys) - min_y)


def edge_lengths(points: Sequence[Point]) -> list[float]:
    """Lengths of the edges of the closed polygon, last vertex back to first."""
    n = len(points)
    if n < 2:
        return []
    return [
        math.hypot(points[(i + 1) % n].x - points[i].x, points[(i + 1) % n].y - points[i].y)
        for i in range(n)
    ]


def _orientation(a: Point, b: Point, c: Point) -> int:
    cross = (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)
    if abs(cross) < 1e-10:
        return 0
    return 1 if cross > 0 else -1


def _on_segment(a: Point, b: Point, p: Point) -> bool:
    return min(a.x, b.x) <= p.x <= max(a.x, b.x) and min(a.y, b.y) <= p.y <= max(a.y, b.y)


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """Check whether segment p1-p2 touches or crosses segment p3-p4.

    Collinear overlapping segments and shared endpoints count as
    intersecting.

    Examples:
        >>> segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        True
        >>> segments_intersect(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1))
        False
    """
    o1 = _orientation(p1, p2, p3)
    o2 = _orientation(p1, p2, p4)
    o3 = _orientation(p3, p4, p1)
    o4 = _orientation(p3, p4, p2)

    if o1 != o2 and o3 != o4:
        return True

    # Collinear cases
    if o1 == 0 and _on_segment(p1, p2, p3):
        return True
    if o2 == 0 and _on_segment(p1, p2, p4):
        return True
    if o3 == 0 and _on_segment(p3, p4, p1):
        return True
    if o4 == 0 and _on_segment(p3, p4, p2):
        return True

    return False


def is_simple_polygon(points: Sequence[Point]) -> bool:
    """Check that a closed polygon does not cross itself.

    Every pair of non-adjacent edges is tested, so this is quadratic in the
    vertex count. Key outlines rarely have more than a dozen vertices.

    Args:
        points: Vertices of the closed polygon

    Returns:
        True if the polygon has at least three vertices and no two
        non-adjacent edges intersect
    """
    n = len(points)
    if n < 3:
        return False

    for i in range(n):
        a1, a2 = points[i], points[(i + 1) % n]
        for j in range(i + 2, n):
            # First and last edges share vertex 0
            if i == 0 and j == n - 1:
                continue
            b1, b2 = points[j], points[(j + 1) % n]
            if segments_intersect(a1, a2, b1, b2):
                return False

    return True


def rotate_points(points: Sequence[Point], angle: float) -> list[Point]:
    """Rotate every point about the origin by angle degrees."""
    return [p.rotate(angle) for p in points]
