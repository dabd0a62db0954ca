"""2D point type and rotation.

Points are used both as outline vertices and as offsets when placing keys.
Rotation is about the origin, counter-clockwise for positive angles.
"""

import math
from dataclasses import dataclass
from typing import Any

from keygeom.exceptions import GeometryError


def _quarter_turns(angle: float) -> int | None:
    """Return the number of quarter turns in angle, or None if not a multiple of 90."""
    if angle % 90 != 0:
        return None
    return int(angle // 90) % 4


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable so the same vertex tuple can be shared by
    every key that uses an outline.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def rotate(self, angle: float) -> "Point":
        """Rotate the point about the origin.

        Multiples of 90 degrees are computed by swapping and negating the
        coordinates, so right-angle rotations are exact. Other angles go
        through cos/sin and carry the usual floating-point rounding.

        Args:
            angle: Rotation in degrees, counter-clockwise

        Returns:
            The rotated point

        Raises:
            GeometryError: If angle is infinite or NaN
        """
        if not math.isfinite(angle):
            raise GeometryError(f"Rotation angle must be finite, got {angle!r}")
        quarter = _quarter_turns(angle)
        if quarter == 0:
            return Point(self.x, self.y)
        if quarter == 1:
            return Point(0.0 - self.y, self.x)
        if quarter == 2:
            return Point(0.0 - self.x, 0.0 - self.y)
        if quarter == 3:
            return Point(self.y, 0.0 - self.x)

        theta = math.radians(angle)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        return Point(
            self.x * cos_t - self.y * sin_t,
            self.x * sin_t + self.y * cos_t,
        )

    def translate(self, dx: float, dy: float) -> "Point":
        """Return the point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


def rotate_point(point: Point, angle: float) -> Point:
    """Rotate point about the origin by angle degrees."""
    return point.rotate(angle)
