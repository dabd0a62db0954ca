"""Axis-aligned bounding boxes of keyboard elements."""

from dataclasses import dataclass
from typing import Any

from keygeom.exceptions import DegenerateGeometryError


@dataclass(frozen=True, slots=True)
class Bounds:
    """The rectangle containing an element's bounding box.

    A zero-size box is the "unset" value used before layout has been
    computed. Negative sizes are rejected.

    Attributes:
        x: X coordinate of the top left point
        y: Y coordinate of the top left point
        width: Width of the box
        height: Height of the box
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise DegenerateGeometryError(
                f"Bounds size must be non-negative, got {self.width}x{self.height}"
            )

    @classmethod
    def unset(cls) -> "Bounds":
        """Return the zero-size sentinel."""
        return cls()

    @property
    def is_unset(self) -> bool:
        """True when both width and height are zero."""
        return self.width == 0 and self.height == 0

    @property
    def long_side(self) -> float:
        """Length of the longer side, used for default label sizing."""
        return self.width if self.width > self.height else self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, x: float, y: float) -> bool:
        """Check whether (x, y) lies inside the box, edges included."""
        return self.x <= x <= self.right and self.y <= y <= self.bottom

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, width and height fields
        """
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bounds":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y, width and height fields

        Returns:
            Bounds instance

        Raises:
            DegenerateGeometryError: If width or height is negative
        """
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )


def long_side(bounds: Bounds) -> float:
    """Return max(width, height) of bounds."""
    return bounds.long_side
