"""RGBA colors used for drawing keys."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Color:
    """Color used for drawing.

    Components are conventionally between 0.0 and 1.0. Values outside that
    range are kept as given; clamping is left to the renderer.

    Attributes:
        red: Red component
        green: Green component
        blue: Blue component
        alpha: Alpha component
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse "#rrggbb" or "#rrggbbaa".

        Raises:
            ValueError: If the string is not 6 or 8 hex digits
        """
        digits = value.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected #rrggbb or #rrggbbaa, got {value!r}")
        channels = [int(digits[i : i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
        return cls(*channels)

    def to_rgba8(self) -> tuple[int, int, int, int]:
        """Clamp each component to [0, 1] and scale to 0-255."""
        return tuple(  # type: ignore[return-value]
            round(min(1.0, max(0.0, c)) * 255)
            for c in (self.red, self.green, self.blue, self.alpha)
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "red": self.red,
            "green": self.green,
            "blue": self.blue,
            "alpha": self.alpha,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Color":
        return cls(
            red=float(data["red"]),
            green=float(data["green"]),
            blue=float(data["blue"]),
            alpha=float(data["alpha"]),
        )


def new_color(red: float, green: float, blue: float, alpha: float) -> Color:
    """Create a color from its four components, unchanged."""
    return Color(red, green, blue, alpha)
