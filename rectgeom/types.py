from __future__ import annotations

import enum
from typing import NamedTuple, Optional, Sequence, Tuple, Union


class GeometryError(ValueError):
    """Raised when a shape cannot be built from the given input."""


class Point2(NamedTuple):
    x: float
    y: float


class Vector2(NamedTuple):
    x: float
    y: float


PointLike = Union[Point2, Tuple[float, float], Sequence[float]]
VectorLike = Union[Vector2, Tuple[float, float], Sequence[float]]


class Edge(enum.Enum):
    """Either end of a ``Range``."""

    START = "start"
    END = "end"


class Align(enum.Enum):
    """Where one range sits against another when aligned."""

    START = "start"
    MIDDLE = "middle"
    END = "end"


class Corner(enum.Enum):
    """Either of the four corners of a ``Rect``."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"

    @classmethod
    def from_index(cls, index: int) -> Optional["Corner"]:
        """Return the corner at ``index`` in bottom-left, bottom-right, top-left, top-right order."""

        if 0 <= index < len(_CORNER_ORDER):
            return _CORNER_ORDER[index]
        return None

    @classmethod
    def from_edges(cls, x_edge: Edge, y_edge: Edge) -> "Corner":
        return _CORNER_BY_EDGES[(x_edge, y_edge)]


_CORNER_ORDER: Tuple[Corner, ...] = (
    Corner.BOTTOM_LEFT,
    Corner.BOTTOM_RIGHT,
    Corner.TOP_LEFT,
    Corner.TOP_RIGHT,
)

_CORNER_BY_EDGES = {
    (Edge.START, Edge.START): Corner.BOTTOM_LEFT,
    (Edge.START, Edge.END): Corner.TOP_LEFT,
    (Edge.END, Edge.START): Corner.BOTTOM_RIGHT,
    (Edge.END, Edge.END): Corner.TOP_RIGHT,
}


def as_point(value: PointLike) -> Point2:
    """Return ``value`` as a ``Point2``; any 2-item sequence is accepted."""

    if isinstance(value, Point2):
        return value
    x, y = value
    return Point2(x, y)


def as_vector(value: VectorLike) -> Vector2:
    if isinstance(value, Vector2):
        return value
    x, y = value
    return Vector2(x, y)


__all__ = [
    "GeometryError",
    "Point2",
    "Vector2",
    "PointLike",
    "VectorLike",
    "Edge",
    "Align",
    "Corner",
    "as_point",
    "as_vector",
]
