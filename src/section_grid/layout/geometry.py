"""Geometric primitives for layout computation."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A position in container space."""

    x: float
    y: float


@dataclass(frozen=True)
class Size:
    """A width/height pair."""

    width: float
    height: float

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


ZERO_SIZE = Size(0.0, 0.0)


@dataclass(frozen=True)
class EdgeInsets:
    """Insets applied to the four edges of a rectangle."""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def to_dict(self) -> dict:
        return {
            "top": self.top,
            "left": self.left,
            "bottom": self.bottom,
            "right": self.right,
        }


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in container space.

    Containment is half-open: the left and top edges belong to the rect,
    the right and bottom edges do not, so neighbouring frames never both
    claim a point on a shared edge.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.right and self.y <= py < self.bottom

    def contains_point(self, point: Point) -> bool:
        return self.contains(point.x, point.y)

    def intersects(self, other: Rect) -> bool:
        """True when the two rects share a region of non-zero area."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def inset_by(self, insets: EdgeInsets) -> Rect:
        return Rect(
            x=self.x + insets.left,
            y=self.y + insets.top,
            width=self.width - insets.horizontal,
            height=self.height - insets.vertical,
        )

    @classmethod
    def centered_at(cls, center: Point, size: Size) -> Rect:
        return cls(
            x=center.x - size.width / 2.0,
            y=center.y - size.height / 2.0,
            width=size.width,
            height=size.height,
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class AffineTransform:
    """2D affine transform ``[a b; c d] + (tx, ty)`` applied around a frame's center."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> AffineTransform:
        return cls()

    @classmethod
    def rotation(cls, angle: float) -> AffineTransform:
        """Counter-clockwise rotation by ``angle`` radians."""
        cos, sin = math.cos(angle), math.sin(angle)
        return cls(a=cos, b=sin, c=-sin, d=cos)

    @classmethod
    def scale(cls, sx: float, sy: float | None = None) -> AffineTransform:
        return cls(a=sx, d=sx if sy is None else sy)

    @property
    def is_identity(self) -> bool:
        return self == AffineTransform()

    def concat(self, other: AffineTransform) -> AffineTransform:
        """Return ``self`` followed by ``other``."""
        return AffineTransform(
            a=self.a * other.a + self.b * other.c,
            b=self.a * other.b + self.b * other.d,
            c=self.c * other.a + self.d * other.c,
            d=self.c * other.b + self.d * other.d,
            tx=self.tx * other.a + self.ty * other.c + other.tx,
            ty=self.tx * other.b + self.ty * other.d + other.ty,
        )

    def to_dict(self) -> dict:
        return {
            "a": self.a, "b": self.b, "c": self.c,
            "d": self.d, "tx": self.tx, "ty": self.ty,
        }
