"""Quadrilateral and triangle vertex containers used to tessellate a ``Rect``."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

import numpy as np

from .sequence import IndexedIterator
from .types import GeometryError, Point2, PointLike, as_point


def _vertices(points: Iterable[PointLike], expect: int, kind: str) -> Tuple[Point2, ...]:
    vertices = tuple(as_point(p) for p in points)
    if len(vertices) != expect:
        raise GeometryError(f"{kind} expects {expect} vertices, got {len(vertices)}")
    return vertices


class Tri(tuple):
    """Three vertices of a triangle."""

    __slots__ = ()

    def __new__(cls, *points: PointLike) -> "Tri":
        return super().__new__(cls, _vertices(points, 3, "triangle"))

    def __getnewargs__(self) -> Tuple[Point2, ...]:
        return tuple(self)

    def signed_area(self) -> float:
        """Positive for counter-clockwise winding, negative for clockwise."""

        (ax, ay), (bx, by), (cx, cy) = self
        return ((bx - ax) * (cy - ay) - (cx - ax) * (by - ay)) / 2

    def to_array(self) -> np.ndarray:
        return np.asarray(self, dtype=float)

    def __repr__(self) -> str:
        return f"Tri{tuple(tuple(p) for p in self)!r}"


class Quad(tuple):
    """Four vertices of a quadrilateral, in winding order."""

    __slots__ = ()

    def __new__(cls, *points: PointLike) -> "Quad":
        return super().__new__(cls, _vertices(points, 4, "quad"))

    def __getnewargs__(self) -> Tuple[Point2, ...]:
        return tuple(self)

    def triangles(self) -> Tuple[Tri, Tri]:
        """Split the quad along its ``a``-``c`` diagonal."""

        a, b, c, d = self
        return Tri(a, b, c), Tri(a, c, d)

    def triangles_iter(self) -> "Triangles":
        return Triangles(self)

    def to_array(self) -> np.ndarray:
        return np.asarray(self, dtype=float)

    def __repr__(self) -> str:
        return f"Quad{tuple(tuple(p) for p in self)!r}"


class Triangles(IndexedIterator[Tri]):
    """Yields the two triangles of a ``Quad``."""

    count = 2

    def __init__(self, quad: Quad) -> None:
        super().__init__()
        self._triangles = quad.triangles()

    def item_at(self, index: int) -> Optional[Tri]:
        if 0 <= index < self.count:
            return self._triangles[index]
        return None


__all__ = ["Tri", "Quad", "Triangles"]
