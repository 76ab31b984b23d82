"""Axis-aligned rectangles described by a ``Range`` per axis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Optional, Tuple

import numpy as np

from .quad import Quad, Tri, Triangles
from .range import Range
from .scalar import S, partial_max
from .sequence import IndexedIterator
from .types import (
    Align,
    Corner,
    GeometryError,
    Point2,
    PointLike,
    Vector2,
    VectorLike,
    as_point,
    as_vector,
)

# Number of subdivisions when halving a ``Rect`` along both axes.
NUM_SUBDIVISIONS = 4

NUM_CORNERS = 4

# Number of triangles used to represent a ``Rect``.
NUM_TRIANGLES = 2


def _points_array(points) -> np.ndarray:
    """Return ``points`` as an ``(N, 2)`` float array or raise ``GeometryError``."""

    try:
        arr = np.asarray(points, dtype=float)
    except (TypeError, ValueError) as exc:
        raise GeometryError(f"cannot read points: {exc}") from exc
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise GeometryError(f"expected an (N, 2) array of points, got shape {arr.shape}")
    return arr


@dataclass(frozen=True)
class Padding(Generic[S]):
    """Distances to trim from the start and end of each axis.

    ``x.start``/``x.end`` trim the left/right edges and ``y.start``/``y.end``
    the bottom/top edges.
    """

    x: Range[S]
    y: Range[S]

    @classmethod
    def none(cls) -> "Padding":
        return cls(Range(0, 0), Range(0, 0))

    @classmethod
    def uniform(cls, pad: S) -> "Padding[S]":
        return cls(Range(pad, pad), Range(pad, pad))


@dataclass(frozen=True)
class Rect(Generic[S]):
    """A rectangle's bounds across the x and y axes.

    The stored ranges may run in either direction; edge and corner queries
    always read the absolute form, so ``left() <= right()`` and
    ``bottom() <= top()``.
    """

    x: Range[S]
    y: Range[S]

    # construction

    @classmethod
    def from_xy_wh(cls, xy: PointLike, wh: VectorLike) -> "Rect[S]":
        """A rect centered on ``xy`` with the given dimensions."""

        px, py = as_point(xy)
        w, h = as_vector(wh)
        return cls(Range.from_pos_and_len(px, w), Range.from_pos_and_len(py, h))

    @classmethod
    def from_x_y_w_h(cls, x: S, y: S, w: S, h: S) -> "Rect[S]":
        return cls.from_xy_wh(Point2(x, y), Vector2(w, h))

    @classmethod
    def from_wh(cls, wh: VectorLike) -> "Rect[S]":
        """A rect centered on the origin."""

        return cls.from_xy_wh(Point2(0, 0), wh)

    @classmethod
    def from_w_h(cls, w: S, h: S) -> "Rect[S]":
        return cls.from_wh(Vector2(w, h))

    @classmethod
    def from_corners(cls, a: PointLike, b: PointLike) -> "Rect[S]":
        """The rect with opposite corners ``a`` and ``b``, in any order."""

        ax, ay = as_point(a)
        bx, by = as_point(b)
        left, right = (ax, bx) if ax < bx else (bx, ax)
        bottom, top = (ay, by) if ay < by else (by, ay)
        return cls(Range(left, right), Range(bottom, top))

    @classmethod
    def from_points(cls, points: Iterable[PointLike]) -> "Rect[float]":
        """The smallest rect containing every point in ``points``."""

        arr = _points_array(list(points))
        if arr.size == 0:
            raise GeometryError("cannot bound an empty set of points")
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return cls(Range(float(lo[0]), float(hi[0])), Range(float(lo[1]), float(hi[1])))

    def absolute(self) -> "Rect[S]":
        return Rect(self.x.absolute(), self.y.absolute())

    # combination

    def overlap(self, other: "Rect[S]") -> Optional["Rect[S]"]:
        """The area covered by both rects, or ``None`` if they are disjoint on either axis."""

        x = self.x.overlap(other.x)
        if x is None:
            return None
        y = self.y.overlap(other.y)
        if y is None:
            return None
        return Rect(x, y)

    def max(self, other: "Rect[S]") -> "Rect[S]":
        """The smallest rect that encloses both ``self`` and ``other``."""

        return Rect(self.x.max(other.x), self.y.max(other.y))

    # position and edges

    def mid_x(self) -> S:
        return self.x.middle()

    def mid_y(self) -> S:
        return self.y.middle()

    def xy(self) -> Point2:
        return Point2(self.mid_x(), self.mid_y())

    def x_y(self) -> Tuple[S, S]:
        return self.mid_x(), self.mid_y()

    def bottom(self) -> S:
        return self.y.absolute().start

    def top(self) -> S:
        return self.y.absolute().end

    def left(self) -> S:
        return self.x.absolute().start

    def right(self) -> S:
        return self.x.absolute().end

    def top_left(self) -> Point2:
        return Point2(self.left(), self.top())

    def bottom_left(self) -> Point2:
        return Point2(self.left(), self.bottom())

    def top_right(self) -> Point2:
        return Point2(self.right(), self.top())

    def bottom_right(self) -> Point2:
        return Point2(self.right(), self.bottom())

    def l_r_b_t(self) -> Tuple[S, S, S, S]:
        """The edges as a ``(left, right, bottom, top)`` tuple."""

        return self.left(), self.right(), self.bottom(), self.top()

    # dimensions

    def w(self) -> S:
        return self.x.length()

    def h(self) -> S:
        return self.y.length()

    def wh(self) -> Vector2:
        return Vector2(self.w(), self.h())

    def w_h(self) -> Tuple[S, S]:
        return self.w(), self.h()

    def xy_wh(self) -> Tuple[Point2, Vector2]:
        return self.xy(), self.wh()

    def x_y_w_h(self) -> Tuple[S, S, S, S]:
        return self.mid_x(), self.mid_y(), self.w(), self.h()

    def length(self) -> S:
        """The length of the longest side."""

        return partial_max(self.w(), self.h())

    def area(self) -> S:
        return self.w() * self.h()

    def l_t_w_h(self) -> Tuple[S, S, S, S]:
        w, h = self.w_h()
        return self.left(), self.top(), w, h

    def l_b_w_h(self) -> Tuple[S, S, S, S]:
        w, h = self.w_h()
        return self.left(), self.bottom(), w, h

    # shifting

    def shift_x(self, x: S) -> "Rect[S]":
        return Rect(self.x.shift(x), self.y)

    def shift_y(self, y: S) -> "Rect[S]":
        return Rect(self.x, self.y.shift(y))

    def shift(self, v: VectorLike) -> "Rect[S]":
        dx, dy = as_vector(v)
        return self.shift_x(dx).shift_y(dy)

    def relative_to_x(self, x: S) -> "Rect[S]":
        """The rect positioned relative to ``x`` on the x axis."""

        return Rect(self.x.shift(-x), self.y)

    def relative_to_y(self, y: S) -> "Rect[S]":
        return Rect(self.x, self.y.shift(-y))

    def relative_to(self, p: PointLike) -> "Rect[S]":
        px, py = as_point(p)
        return self.relative_to_x(px).relative_to_y(py)

    # containment

    def contains(self, p: PointLike) -> bool:
        """Whether ``p`` lies inside or on the edge of the rect."""

        px, py = as_point(p)
        return self.x.contains(px) and self.y.contains(py)

    def contains_points(self, points) -> np.ndarray:
        """Boolean mask of which rows of an ``(N, 2)`` array lie within the rect."""

        arr = _points_array(points)
        left, right, bottom, top = self.l_r_b_t()
        xs = arr[:, 0]
        ys = arr[:, 1]
        return (xs >= left) & (xs <= right) & (ys >= bottom) & (ys <= top)

    def stretch_to_point(self, p: PointLike) -> "Rect[S]":
        """Stretch the closest edge(s) to ``p`` if it lies outside the rect."""

        px, py = as_point(p)
        return Rect(self.x.stretch_to_value(px), self.y.stretch_to_value(py))

    # alignment

    def left_of(self, other: "Rect[S]") -> "Rect[S]":
        """Place ``self``'s right edge on the left edge of ``other``."""

        return Rect(self.x.align_before(other.x), self.y)

    def right_of(self, other: "Rect[S]") -> "Rect[S]":
        """Place ``self``'s left edge on the right edge of ``other``."""

        return Rect(self.x.align_after(other.x), self.y)

    def below(self, other: "Rect[S]") -> "Rect[S]":
        """Place ``self``'s top edge on the bottom edge of ``other``."""

        return Rect(self.x, self.y.align_before(other.y))

    def above(self, other: "Rect[S]") -> "Rect[S]":
        """Place ``self``'s bottom edge on the top edge of ``other``."""

        return Rect(self.x, self.y.align_after(other.y))

    def align_x_of(self, align: Align, other: "Rect[S]") -> "Rect[S]":
        return Rect(self.x.align_to(align, other.x), self.y)

    def align_y_of(self, align: Align, other: "Rect[S]") -> "Rect[S]":
        return Rect(self.x, self.y.align_to(align, other.y))

    def align_left_of(self, other: "Rect[S]") -> "Rect[S]":
        return Rect(self.x.align_start_of(other.x), self.y)

    def align_middle_x_of(self, other: "Rect[S]") -> "Rect[S]":
        return Rect(self.x.align_middle_of(other.x), self.y)

    def align_right_of(self, other: "Rect[S]") -> "Rect[S]":
        return Rect(self.x.align_end_of(other.x), self.y)

    def align_bottom_of(self, other: "Rect[S]") -> "Rect[S]":
        return Rect(self.x, self.y.align_start_of(other.y))

    def align_middle_y_of(self, other: "Rect[S]") -> "Rect[S]":
        return Rect(self.x, self.y.align_middle_of(other.y))

    def align_top_of(self, other: "Rect[S]") -> "Rect[S]":
        return Rect(self.x, self.y.align_end_of(other.y))

    def top_left_of(self, other: "Rect[S]") -> "Rect[S]":
        return self.align_left_of(other).align_top_of(other)

    def top_right_of(self, other: "Rect[S]") -> "Rect[S]":
        return self.align_right_of(other).align_top_of(other)

    def bottom_left_of(self, other: "Rect[S]") -> "Rect[S]":
        return self.align_left_of(other).align_bottom_of(other)

    def bottom_right_of(self, other: "Rect[S]") -> "Rect[S]":
        return self.align_right_of(other).align_bottom_of(other)

    def mid_top_of(self, other: "Rect[S]") -> "Rect[S]":
        return self.align_middle_x_of(other).align_top_of(other)

    def mid_bottom_of(self, other: "Rect[S]") -> "Rect[S]":
        return self.align_middle_x_of(other).align_bottom_of(other)

    def mid_left_of(self, other: "Rect[S]") -> "Rect[S]":
        return self.align_left_of(other).align_middle_y_of(other)

    def mid_right_of(self, other: "Rect[S]") -> "Rect[S]":
        return self.align_right_of(other).align_middle_y_of(other)

    def middle_of(self, other: "Rect[S]") -> "Rect[S]":
        return self.align_middle_x_of(other).align_middle_y_of(other)

    # padding

    def pad_left(self, pad: S) -> "Rect[S]":
        return Rect(self.x.pad_start(pad), self.y)

    def pad_right(self, pad: S) -> "Rect[S]":
        return Rect(self.x.pad_end(pad), self.y)

    def pad_bottom(self, pad: S) -> "Rect[S]":
        return Rect(self.x, self.y.pad_start(pad))

    def pad_top(self, pad: S) -> "Rect[S]":
        return Rect(self.x, self.y.pad_end(pad))

    def pad(self, pad: S) -> "Rect[S]":
        """Trim ``pad`` from every edge."""

        return Rect(self.x.pad(pad), self.y.pad(pad))

    def padding(self, padding: Padding[S]) -> "Rect[S]":
        return Rect(
            self.x.pad_ends(padding.x.start, padding.x.end),
            self.y.pad_ends(padding.y.start, padding.y.end),
        )

    # corners

    def closest_corner(self, p: PointLike) -> Corner:
        px, py = as_point(p)
        return Corner.from_edges(self.x.closest_edge(px), self.y.closest_edge(py))

    def corner(self, corner: Corner) -> Point2:
        if corner is Corner.TOP_LEFT:
            return self.top_left()
        if corner is Corner.TOP_RIGHT:
            return self.top_right()
        if corner is Corner.BOTTOM_LEFT:
            return self.bottom_left()
        if corner is Corner.BOTTOM_RIGHT:
            return self.bottom_right()
        raise ValueError(f"unknown corner {corner!r}")

    def corner_at_index(self, index: int) -> Optional[Point2]:
        """The corner at ``index``: bottom-left, bottom-right, top-left, top-right."""

        corner = Corner.from_index(index)
        if corner is None:
            return None
        return self.corner(corner)

    def corners(self) -> Quad:
        """The four corners wound bottom-left, top-left, top-right, bottom-right."""

        l, r, b, t = self.l_r_b_t()
        return Quad(Point2(l, b), Point2(l, t), Point2(r, t), Point2(r, b))

    def corners_iter(self) -> "Corners[S]":
        return Corners(self)

    def triangles(self) -> Tuple[Tri, Tri]:
        return self.corners().triangles()

    def triangles_iter(self) -> Triangles:
        return self.corners().triangles_iter()

    # subdivision

    def subdivision_ranges(self) -> "SubdivisionRanges[S]":
        """The halves of each axis, split at the axis midpoint."""

        x, y = self.x_y()
        return SubdivisionRanges(
            x_a=Range(self.x.start, x),
            x_b=Range(x, self.x.end),
            y_a=Range(self.y.start, y),
            y_b=Range(y, self.y.end),
        )

    def subdivisions(self) -> Tuple["Rect[S]", "Rect[S]", "Rect[S]", "Rect[S]"]:
        """Halve the rect along both axes.

        Subdivisions are returned bottom-left, bottom-right, top-left,
        top-right.
        """

        return self.subdivision_ranges().rects()

    def subdivisions_iter(self) -> "Subdivisions[S]":
        return self.subdivision_ranges().rects_iter()

    def approx_eq(self, other: "Rect[S]", abs_tol: Optional[float] = None) -> bool:
        return self.x.approx_eq(other.x, abs_tol) and self.y.approx_eq(other.y, abs_tol)


@dataclass(frozen=True)
class SubdivisionRanges(Generic[S]):
    """The first and second half of each axis of a ``Rect``."""

    x_a: Range[S]
    x_b: Range[S]
    y_a: Range[S]
    y_b: Range[S]

    def subdivision_at_index(self, index: int) -> Optional[Rect[S]]:
        if index == 0:
            return Rect(self.x_a, self.y_a)
        if index == 1:
            return Rect(self.x_b, self.y_a)
        if index == 2:
            return Rect(self.x_a, self.y_b)
        if index == 3:
            return Rect(self.x_b, self.y_b)
        return None

    def rects(self) -> Tuple[Rect[S], Rect[S], Rect[S], Rect[S]]:
        return (
            Rect(self.x_a, self.y_a),
            Rect(self.x_b, self.y_a),
            Rect(self.x_a, self.y_b),
            Rect(self.x_b, self.y_b),
        )

    def rects_iter(self) -> "Subdivisions[S]":
        return Subdivisions(self)


class Corners(IndexedIterator[Point2], Generic[S]):
    """Yields the four corners of a ``Rect`` in ``corner_at_index`` order."""

    count = NUM_CORNERS

    def __init__(self, rect: Rect[S]) -> None:
        super().__init__()
        self.rect = rect

    def item_at(self, index: int) -> Optional[Point2]:
        return self.rect.corner_at_index(index)


class Subdivisions(IndexedIterator[Rect[S]], Generic[S]):
    """Yields the four even subdivisions of a ``Rect``."""

    count = NUM_SUBDIVISIONS

    def __init__(self, ranges: SubdivisionRanges[S]) -> None:
        super().__init__()
        self.ranges = ranges

    def item_at(self, index: int) -> Optional[Rect[S]]:
        return self.ranges.subdivision_at_index(index)


__all__ = [
    "NUM_SUBDIVISIONS",
    "NUM_CORNERS",
    "NUM_TRIANGLES",
    "Padding",
    "Rect",
    "SubdivisionRanges",
    "Corners",
    "Subdivisions",
]
