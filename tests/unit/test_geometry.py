"""Tests for polygon geometry helpers."""

import pytest

from keygeom.core.geometry import (
    bounding_bounds,
    edge_lengths,
    is_simple_polygon,
    rotate_points,
    segments_intersect,
    signed_area,
)
from keygeom.domain import Bounds, Point


@pytest.fixture
def square() -> list[Point]:
    """Counter-clockwise unit square."""
    return [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]


class TestSignedArea:
    """Tests for signed_area."""

    def test_counter_clockwise(self, square):
        """Test a CCW square has positive area."""
        assert signed_area(square) == 1.0

    def test_clockwise(self, square):
        """Test reversing the vertices flips the sign."""
        assert signed_area(list(reversed(square))) == -1.0

    def test_degenerate(self):
        """Test fewer than three points have no area."""
        assert signed_area([Point(0, 0), Point(1, 1)]) == 0.0


class TestBoundingBounds:
    """Tests for bounding_bounds."""

    def test_box(self):
        """Test min/max extents become a Bounds."""
        points = [Point(2, -1), Point(5, 3), Point(-1, 0)]
        assert bounding_bounds(points) == Bounds(-1, -1, 6, 4)

    def test_single_point(self):
        """Test a single point gives zero-size bounds at that point."""
        bounds = bounding_bounds([Point(3, 4)])
        assert bounds == Bounds(3, 4, 0, 0)
        assert bounds.is_unset

    def test_empty(self):
        """Test an empty list is rejected."""
        with pytest.raises(ValueError):
            bounding_bounds([])


class TestEdgeLengths:
    """Tests for edge_lengths."""

    def test_closed_polygon(self):
        """Test the closing edge is included."""
        points = [Point(0, 0), Point(3, 0), Point(3, 4)]
        assert edge_lengths(points) == [3.0, 4.0, 5.0]

    def test_too_few_points(self):
        """Test a lone vertex has no edges."""
        assert edge_lengths([Point(0, 0)]) == []


class TestSegmentsIntersect:
    """Tests for segments_intersect."""

    def test_crossing(self):
        """Test an X shape intersects."""
        assert segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))

    def test_parallel(self):
        """Test parallel segments do not intersect."""
        assert not segments_intersect(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1))

    def test_touching_endpoint(self):
        """Test a shared endpoint counts as intersecting."""
        assert segments_intersect(Point(0, 0), Point(1, 0), Point(1, 0), Point(1, 1))

    def test_collinear_overlap(self):
        """Test overlapping collinear segments intersect."""
        assert segments_intersect(Point(0, 0), Point(2, 0), Point(1, 0), Point(3, 0))

    def test_collinear_disjoint(self):
        """Test separated collinear segments do not intersect."""
        assert not segments_intersect(Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0))


class TestIsSimplePolygon:
    """Tests for is_simple_polygon."""

    def test_square(self, square):
        """Test a square is simple."""
        assert is_simple_polygon(square)

    def test_bowtie(self):
        """Test a self-crossing bowtie is not simple."""
        bowtie = [Point(0, 0), Point(1, 1), Point(1, 0), Point(0, 1)]
        assert not is_simple_polygon(bowtie)

    def test_l_shape(self):
        """Test a concave L-shaped key (ISO enter style) is simple."""
        l_shape = [
            Point(0, 0),
            Point(2, 0),
            Point(2, 2),
            Point(1, 2),
            Point(1, 1),
            Point(0, 1),
        ]
        assert is_simple_polygon(l_shape)

    def test_triangle(self):
        """Test the smallest polygon is simple."""
        assert is_simple_polygon([Point(0, 0), Point(1, 0), Point(0, 1)])

    def test_too_few_points(self):
        """Test fewer than three vertices cannot form a polygon."""
        assert not is_simple_polygon([Point(0, 0), Point(1, 0)])


class TestRotatePoints:
    """Tests for rotate_points."""

    def test_quarter_turn(self, square):
        """Test every point is rotated exactly."""
        assert rotate_points(square, 90) == [
            Point(0, 0),
            Point(0, 1),
            Point(-1, 1),
            Point(-1, 0),
        ]

    def test_keeps_order(self, square):
        """Test the result has the same length and order as the input."""
        rotated = rotate_points(square, 180)
        assert [p.rotate(180) for p in rotated] == square
