"""Rounded polygon outlines used to draw and hit-test keys.

An Outline is built once and then shared by every key of the same physical
shape. Vertices are stored as a tuple of frozen Points, so a shared
instance can be read from any thread without locking.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from keygeom.domain.bounds import Bounds
from keygeom.domain.point import Point
from keygeom.exceptions import DegenerateGeometryError


@dataclass(frozen=True, slots=True)
class Outline:
    """2D rounded polygon used to draw a key shape.

    Attributes:
        corner_radius: Radius of the rounded corners
        points: Vertices of the polygon, in drawing order
    """

    corner_radius: float
    points: tuple[Point, ...]

    def __init__(self, corner_radius: float, points: Iterable[Point]) -> None:
        vertices = tuple(points)
        if not vertices:
            raise DegenerateGeometryError("Outline needs at least one vertex")
        if corner_radius < 0:
            raise DegenerateGeometryError(
                f"Corner radius must be non-negative, got {corner_radius}"
            )
        object.__setattr__(self, "corner_radius", float(corner_radius))
        object.__setattr__(self, "points", vertices)

    @classmethod
    def rectangle(cls, width: float, height: float, corner_radius: float = 0.0) -> "Outline":
        """Build a rectangular outline with its top left corner at the origin."""
        return cls(
            corner_radius,
            [
                Point(0.0, 0.0),
                Point(width, 0.0),
                Point(width, height),
                Point(0.0, height),
            ],
        )

    @property
    def num_points(self) -> int:
        return len(self.points)

    def bounds(self) -> Bounds:
        """Calculate the axis-aligned box around the vertices.

        Returns:
            Bounds whose top left corner is the minimum x/y of the vertices
        """
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        min_x, min_y = min(xs), min(ys)
        return Bounds(min_x, min_y, max(xs) - min_x, max(ys) - min_y)

    def effective_corner_radius(self) -> float:
        """Corner radius clamped to half of the shortest edge.

        This is the radius a renderer can actually draw. The stored
        corner_radius is left untouched.
        """
        n = len(self.points)
        if n < 2:
            return 0.0
        shortest = min(
            math.hypot(
                self.points[(i + 1) % n].x - self.points[i].x,
                self.points[(i + 1) % n].y - self.points[i].y,
            )
            for i in range(n)
        )
        return min(self.corner_radius, shortest / 2.0)

    def rotate(self, angle: float) -> "Outline":
        """Return a new outline with every vertex rotated about the origin."""
        return Outline(self.corner_radius, (p.rotate(angle) for p in self.points))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with corner_radius and the ordered list of points
        """
        return {
            "corner_radius": self.corner_radius,
            "points": [p.to_dict() for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Outline":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with corner_radius and points fields

        Returns:
            Outline instance

        Raises:
            DegenerateGeometryError: If there are no points or the radius is negative
        """
        return cls(
            corner_radius=float(data["corner_radius"]),
            points=[Point.from_dict(p) for p in data["points"]],
        )
