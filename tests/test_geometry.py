"""Tests for geometric primitives."""

import math

import pytest

from section_grid.layout.geometry import AffineTransform, EdgeInsets, Point, Rect, Size


class TestRect:
    def test_properties(self):
        r = Rect(10, 20, 100, 50)
        assert r.right == 110
        assert r.bottom == 70
        assert r.center == Point(60, 45)
        assert r.size == Size(100, 50)

    def test_contains_is_half_open(self):
        r = Rect(10, 20, 100, 50)
        assert r.contains(10, 20)
        assert r.contains(50, 40)
        assert not r.contains(110, 40)
        assert not r.contains(50, 70)
        assert not r.contains(5, 40)

    def test_contains_point(self):
        r = Rect(0, 0, 10, 10)
        assert r.contains_point(Point(5, 5))
        assert not r.contains_point(Point(-1, 5))

    def test_intersects(self):
        r = Rect(0, 0, 100, 100)
        assert r.intersects(Rect(50, 50, 100, 100))
        assert r.intersects(Rect(10, 10, 5, 5))
        assert not r.intersects(Rect(200, 0, 10, 10))

    def test_touching_edges_do_not_intersect(self):
        r = Rect(0, 0, 100, 100)
        assert not r.intersects(Rect(100, 0, 50, 50))
        assert not r.intersects(Rect(0, 100, 50, 50))

    def test_empty_rect_never_intersects(self):
        r = Rect(0, 0, 100, 100)
        assert Rect(10, 10, 0, 50).is_empty
        assert not r.intersects(Rect(10, 10, 0, 50))

    def test_inset_by(self):
        r = Rect(0, 0, 100, 50).inset_by(EdgeInsets(top=5, left=10, bottom=5, right=20))
        assert r == Rect(10, 5, 70, 40)

    def test_centered_at(self):
        r = Rect.centered_at(Point(100, 100), Size(40, 20))
        assert r == Rect(80, 90, 40, 20)

    def test_to_dict(self):
        r = Rect(10, 20, 100, 50)
        assert r.to_dict() == {"x": 10, "y": 20, "width": 100, "height": 50}


class TestEdgeInsets:
    def test_totals(self):
        insets = EdgeInsets(top=0, left=20, bottom=10, right=20)
        assert insets.horizontal == 40
        assert insets.vertical == 10


class TestAffineTransform:
    def test_identity(self):
        assert AffineTransform.identity().is_identity

    def test_rotation(self):
        t = AffineTransform.rotation(math.pi / 2)
        assert t.a == pytest.approx(0.0, abs=1e-12)
        assert t.b == pytest.approx(1.0)
        assert t.c == pytest.approx(-1.0)
        assert not t.is_identity

    def test_concat_rotations(self):
        quarter = AffineTransform.rotation(math.pi / 4)
        half = quarter.concat(quarter)
        expected = AffineTransform.rotation(math.pi / 2)
        assert half.a == pytest.approx(expected.a, abs=1e-12)
        assert half.b == pytest.approx(expected.b)

    def test_scale(self):
        t = AffineTransform.scale(2.0)
        assert (t.a, t.d) == (2.0, 2.0)
        assert AffineTransform.scale(2.0, 3.0).d == 3.0
