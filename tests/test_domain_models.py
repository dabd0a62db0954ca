"""Tests for domain models to verify they work correctly."""

import math

import pytest

from keygeom.domain import (
    Bounds,
    Color,
    KeysymMatrix,
    Outline,
    Point,
    long_side,
    new_color,
    rotate_point,
)
from keygeom.exceptions import DegenerateGeometryError, GeometryError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(-3.5, 7.25)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_translate(self) -> None:
        """Test translation returns a moved copy."""
        p = Point(1.0, 2.0)
        assert p.translate(3.0, -1.0) == Point(4.0, 1.0)
        assert p == Point(1.0, 2.0)

    @pytest.mark.parametrize(
        ("angle", "expected"),
        [
            (0, Point(1.0, 0.0)),
            (90, Point(0.0, 1.0)),
            (180, Point(-1.0, 0.0)),
            (270, Point(0.0, -1.0)),
        ],
    )
    def test_rotate_canonical_angles_exact(self, angle: int, expected: Point) -> None:
        """Test right-angle rotations are exact, with no rounding error."""
        result = rotate_point(Point(1.0, 0.0), angle)
        assert result.x == expected.x
        assert result.y == expected.y

    def test_rotate_full_turn_is_identity(self) -> None:
        """Test rotating by 360 degrees returns the same point."""
        p = Point(3.0, -4.5)
        assert p.rotate(360) == p

    @pytest.mark.parametrize("k", [0, 1, 2, 3])
    def test_rotate_composes(self, k: int) -> None:
        """Test rotate(rotate(p, 90), 90k) equals rotate(p, 90(k+1))."""
        p = Point(2.5, -1.5)
        assert p.rotate(90).rotate(90 * k) == p.rotate(90 * (k + 1))

    def test_rotate_negative_and_large_angles(self) -> None:
        """Test multiples of 90 outside [0, 360) are normalized."""
        p = Point(1.0, 0.0)
        assert p.rotate(-90) == Point(0.0, -1.0)
        assert p.rotate(450.0) == Point(0.0, 1.0)

    def test_rotate_arbitrary_angle(self) -> None:
        """Test non-right angles fall back to trigonometry."""
        result = Point(1.0, 0.0).rotate(45)
        half_sqrt2 = math.sqrt(2) / 2
        assert result.x == pytest.approx(half_sqrt2)
        assert result.y == pytest.approx(half_sqrt2)

    def test_rotate_does_not_produce_negative_zero(self) -> None:
        """Test exact rotations keep zero coordinates positive."""
        result = Point(0.0, 0.0).rotate(180)
        assert math.copysign(1.0, result.x) == 1.0
        assert math.copysign(1.0, result.y) == 1.0

    @pytest.mark.parametrize("angle", [math.inf, -math.inf, math.nan])
    def test_rotate_non_finite_angle_rejected(self, angle: float) -> None:
        """Test infinite and NaN angles raise GeometryError."""
        with pytest.raises(GeometryError, match="must be finite"):
            Point(1.0, 2.0).rotate(angle)


class TestBounds:
    """Tests for Bounds class."""

    def test_long_side_width(self) -> None:
        """Test long side picks the width when it is larger."""
        assert long_side(Bounds(x=0, y=0, width=5, height=3)) == 5

    def test_long_side_square(self) -> None:
        """Test long side of a square."""
        assert Bounds(width=2, height=2).long_side == 2

    def test_long_side_height(self) -> None:
        """Test long side picks the height when it is larger."""
        assert Bounds(width=1, height=4).long_side == 4

    def test_unset_sentinel(self) -> None:
        """Test zero-size bounds are the unset value."""
        assert Bounds.unset().is_unset
        assert Bounds().is_unset
        assert not Bounds(width=1).is_unset

    def test_negative_size_rejected(self) -> None:
        """Test negative width or height fails construction."""
        with pytest.raises(DegenerateGeometryError):
            Bounds(width=-1, height=2)
        with pytest.raises(DegenerateGeometryError):
            Bounds(width=1, height=-2)

    def test_edges_and_contains(self) -> None:
        """Test right/bottom edges and containment."""
        b = Bounds(10, 20, 30, 40)
        assert b.right == 40
        assert b.bottom == 60
        assert b.contains(10, 20)
        assert b.contains(40, 60)
        assert not b.contains(41, 30)

    def test_bounds_serialization(self) -> None:
        """Test bounds serialization and deserialization."""
        b1 = Bounds(1.5, 2.5, 3.0, 4.0)
        assert Bounds.from_dict(b1.to_dict()) == b1


class TestOutline:
    """Tests for Outline class."""

    def test_outline_creation(self) -> None:
        """Test outline keeps radius and vertex order."""
        points = [Point(0, 0), Point(10, 0), Point(10, 5), Point(0, 5)]
        outline = Outline(1.5, points)
        assert outline.corner_radius == 1.5
        assert outline.points == tuple(points)
        assert outline.num_points == 4

    def test_outline_copies_input(self) -> None:
        """Test later changes to the input list do not reach the outline."""
        points = [Point(0, 0), Point(1, 0), Point(1, 1)]
        outline = Outline(0.0, points)
        points.append(Point(0, 1))
        assert outline.num_points == 3

    def test_outline_immutable(self) -> None:
        """Test that outline fields cannot be reassigned."""
        outline = Outline.rectangle(1.0, 1.0)
        with pytest.raises(AttributeError):
            outline.corner_radius = 2.0  # type: ignore

    def test_empty_outline_rejected(self) -> None:
        """Test zero vertices fail construction."""
        with pytest.raises(DegenerateGeometryError):
            Outline(1.0, [])

    def test_negative_radius_rejected(self) -> None:
        """Test a negative corner radius fails construction."""
        with pytest.raises(DegenerateGeometryError):
            Outline(-0.5, [Point(0, 0), Point(1, 0), Point(1, 1)])

    def test_bounds(self) -> None:
        """Test bounding box of the vertices."""
        outline = Outline(0.0, [Point(-2, 1), Point(4, 3), Point(1, 7)])
        assert outline.bounds() == Bounds(-2, 1, 6, 6)

    def test_effective_corner_radius(self) -> None:
        """Test radius is clamped to half the shortest edge."""
        outline = Outline.rectangle(10.0, 2.0, corner_radius=3.0)
        assert outline.effective_corner_radius() == 1.0
        assert outline.corner_radius == 3.0

    def test_rotate(self) -> None:
        """Test rotating an outline rotates every vertex."""
        outline = Outline.rectangle(2.0, 1.0, corner_radius=0.25)
        rotated = outline.rotate(90)
        assert rotated.points == (
            Point(0.0, 0.0),
            Point(0.0, 2.0),
            Point(-1.0, 2.0),
            Point(-1.0, 0.0),
        )
        assert rotated.corner_radius == 0.25
        assert rotated.bounds() == Bounds(-1.0, 0.0, 1.0, 2.0)

    def test_outline_serialization(self) -> None:
        """Test outline serialization keeps vertex order."""
        o1 = Outline(0.5, [Point(3, 0), Point(0, 0), Point(0, 3)])
        o2 = Outline.from_dict(o1.to_dict())
        assert o2 == o1
        assert [p.to_tuple() for p in o2.points] == [(3, 0), (0, 0), (0, 3)]


class TestColor:
    """Tests for Color class."""

    def test_new_color_pass_through(self) -> None:
        """Test construction keeps the exact four components."""
        color = new_color(0.2, 0.4, 0.6, 1.0)
        assert (color.red, color.green, color.blue, color.alpha) == (0.2, 0.4, 0.6, 1.0)

    def test_out_of_range_not_rejected(self) -> None:
        """Test components outside [0, 1] are kept as given."""
        color = new_color(1.5, -0.25, 0.0, 2.0)
        assert color.red == 1.5
        assert color.green == -0.25

    def test_to_rgba8_clamps(self) -> None:
        """Test byte conversion clamps out-of-range components."""
        assert new_color(1.5, -0.25, 0.0, 1.0).to_rgba8() == (255, 0, 0, 255)

    def test_from_hex(self) -> None:
        """Test parsing hex colors with and without alpha."""
        assert Color.from_hex("#ff0000") == Color(1.0, 0.0, 0.0, 1.0)
        assert Color.from_hex("00ff0080").to_rgba8() == (0, 255, 0, 128)

    def test_from_hex_invalid(self) -> None:
        """Test malformed hex strings are rejected."""
        with pytest.raises(ValueError):
            Color.from_hex("#fff")

    def test_color_serialization(self) -> None:
        """Test color serialization and deserialization."""
        c1 = Color(0.1, 0.2, 0.3, 0.4)
        assert Color.from_dict(c1.to_dict()) == c1


class TestKeysymMatrixBasics:
    """Quick checks of KeysymMatrix alongside the other value types."""

    def test_matrix_creation(self) -> None:
        """Test a matrix exposes its dimensions and data."""
        matrix = KeysymMatrix([0x61, 0x41], num_groups=1, num_levels=2)
        assert matrix.num_groups == 1
        assert matrix.num_levels == 2
        assert matrix.data == (0x61, 0x41)
        assert len(matrix) == 2
