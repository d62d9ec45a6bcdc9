"""Tests for point proximity checks."""

from __future__ import annotations

import pytest

from geoquiz.core.models import Point
from geoquiz.core.proximity import DEFAULT_TOLERANCE, calculate_distance, is_near


class TestCalculateDistance:
    """Test calculate_distance."""

    def test_pythagorean_triple(self) -> None:
        assert calculate_distance(Point(x=0, y=0), Point(x=3, y=4)) == pytest.approx(5.0)

    def test_same_point(self) -> None:
        assert calculate_distance(Point(x=7, y=7), Point(x=7, y=7)) == 0.0

    def test_symmetric(self) -> None:
        a, b = Point(x=-2, y=10), Point(x=5, y=-1)
        assert calculate_distance(a, b) == calculate_distance(b, a)


class TestIsNear:
    """Test is_near."""

    def test_boundary_is_not_near(self) -> None:
        assert is_near(Point(x=0, y=0), Point(x=3, y=4), 5) is False

    def test_inside_tolerance(self) -> None:
        assert is_near(Point(x=0, y=0), Point(x=3, y=4), 6) is True

    def test_default_tolerance(self) -> None:
        assert DEFAULT_TOLERANCE == 30
        assert is_near(Point(x=100, y=100), Point(x=120, y=120)) is True
        assert is_near(Point(x=100, y=100), Point(x=130, y=100)) is False
