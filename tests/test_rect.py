import math

import numpy as np
import pytest

from rectgeom import GeometryError, Point2, Range, Rect, Vector2


def test_from_x_y_w_h_centers_on_point():
    rect = Rect.from_x_y_w_h(0, 0, 10, 10)
    assert rect.left() == -5
    assert rect.right() == 5
    assert rect.bottom() == -5
    assert rect.top() == 5


def test_constructor_variants_agree():
    assert Rect.from_xy_wh((1, 2), (4, 6)) == Rect(Range(-1, 3), Range(-1, 5))
    assert Rect.from_wh((4, 2)) == Rect(Range(-2, 2), Range(-1, 1))
    assert Rect.from_w_h(4, 2) == Rect.from_wh(Vector2(4, 2))
    assert Rect.from_x_y_w_h(1, 2, 4, 6) == Rect.from_xy_wh(Point2(1, 2), Vector2(4, 6))


@pytest.mark.parametrize(
    "a, b",
    [
        ((0, 0), (4, 2)),
        ((4, 2), (0, 0)),
        ((0, 2), (4, 0)),
        ((4, 0), (0, 2)),
    ],
)
def test_from_corners_orders_ranges(a, b):
    rect = Rect.from_corners(a, b)
    assert rect == Rect(Range(0, 4), Range(0, 2))
    assert rect.left() <= rect.right()
    assert rect.bottom() <= rect.top()


def test_inverted_ranges_report_absolute_edges():
    rect = Rect(Range(5, -5), Range(3, -1))
    assert rect.l_r_b_t() == (-5, 5, -1, 3)
    assert rect.absolute() == Rect(Range(-5, 5), Range(-1, 3))
    assert rect.absolute().left() == rect.left()
    assert rect.top_left() == Point2(-5, 3)
    assert rect.bottom_left() == Point2(-5, -1)
    assert rect.top_right() == Point2(5, 3)
    assert rect.bottom_right() == Point2(5, -1)


def test_dimensions():
    rect = Rect(Range(5, -5), Range(3, -1))
    assert rect.w() == 10
    assert rect.h() == 4
    assert rect.wh() == Vector2(10, 4)
    assert rect.w_h() == (10, 4)
    assert rect.length() == 10
    assert rect.area() == 40
    assert rect.xy() == Point2(0, 1)
    assert rect.x_y() == (0, 1)
    assert rect.mid_x() == 0
    assert rect.mid_y() == 1
    assert rect.xy_wh() == (Point2(0, 1), Vector2(10, 4))
    assert rect.x_y_w_h() == (0, 1, 10, 4)
    assert rect.l_t_w_h() == (-5, 3, 10, 4)
    assert rect.l_b_w_h() == (-5, -1, 10, 4)


def test_length_picks_longest_side():
    assert Rect.from_w_h(3, 7).length() == 7
    assert Rect.from_w_h(0, 0).length() == 0


def test_contains_includes_edges():
    rect = Rect.from_corners((0, 0), (4, 2))
    assert rect.contains((2, 1))
    assert rect.contains((0, 0))
    assert rect.contains(Point2(4, 2))
    assert not rect.contains((4.5, 1))
    assert not rect.contains((2, -0.1))


def test_contains_points_matches_contains():
    rect = Rect(Range(4, 0), Range(0, 2))
    points = np.array([[2, 1], [0, 0], [4.5, 1], [2, -0.1], [4, 2]])
    mask = rect.contains_points(points)
    assert mask.dtype == bool
    assert mask.tolist() == [rect.contains(p) for p in points]


@pytest.mark.parametrize(
    "points",
    [np.array([[1, 1, 100], [100, 1, 1]]), np.zeros((4,)), [(1, 2), (3,)]],
)
def test_contains_points_rejects_bad_shapes(points):
    rect = Rect.from_corners((0, 0), (4, 2))
    with pytest.raises(GeometryError):
        rect.contains_points(points)


def test_contains_points_of_no_points_is_empty():
    mask = Rect.from_corners((0, 0), (4, 2)).contains_points([])
    assert mask.shape == (0,)


def test_overlap_of_disjoint_rects_is_none():
    a = Rect.from_x_y_w_h(0, 0, 4, 4)
    b = Rect.from_x_y_w_h(10, 0, 4, 4)
    assert a.overlap(b) is None
    assert b.overlap(a) is None


def test_overlap_requires_both_axes():
    a = Rect.from_x_y_w_h(0, 0, 4, 4)
    b = Rect.from_x_y_w_h(0, 10, 4, 4)
    assert a.overlap(b) is None


def test_overlap_of_intersecting_rects():
    a = Rect.from_x_y_w_h(0, 0, 4, 4)
    c = Rect.from_x_y_w_h(2, 2, 4, 4)
    assert a.overlap(c) == Rect(Range(0, 2), Range(0, 2))


def test_overlap_of_touching_rects_is_degenerate():
    a = Rect.from_x_y_w_h(0, 0, 4, 4)
    d = Rect.from_x_y_w_h(4, 0, 4, 4)
    touching = a.overlap(d)
    assert touching == Rect(Range(2, 2), Range(-2, 2))
    assert touching.area() == 0


def test_self_overlap_is_absolute_self():
    rect = Rect(Range(5, -5), Range(3, -1))
    assert rect.overlap(rect) == rect.absolute()


def test_max_encloses_both():
    a = Rect.from_x_y_w_h(0, 0, 4, 4)
    b = Rect.from_x_y_w_h(10, 0, 4, 4)
    assert a.max(b) == Rect(Range(-2, 12), Range(-2, 2))


def test_stretch_to_point():
    rect = Rect.from_corners((0, 0), (4, 2))
    assert rect.stretch_to_point((6, -1)) == Rect(Range(0, 6), Range(-1, 2))
    assert rect.stretch_to_point((1, 1)) == rect


def test_shift_and_relative_to():
    rect = Rect.from_corners((0, 0), (4, 2))
    assert rect.shift_x(1) == Rect(Range(1, 5), Range(0, 2))
    assert rect.shift_y(-1) == Rect(Range(0, 4), Range(-1, 1))
    assert rect.shift((1, 2)) == Rect(Range(1, 5), Range(2, 4))
    assert rect.relative_to((1, 1)) == rect.shift((-1, -1))
    assert rect.relative_to_x(4) == Rect(Range(-4, 0), Range(0, 2))
    assert rect.relative_to_y(2) == Rect(Range(0, 4), Range(-2, 0))


def test_from_points_bounds_every_point():
    rect = Rect.from_points([(1, 5), (-2, 3), (4, -1)])
    assert rect == Rect(Range(-2, 4), Range(-1, 5))


def test_from_points_of_corners_is_absolute_rect():
    rect = Rect(Range(5, -5), Range(3, -1))
    assert Rect.from_points(rect.corners()) == rect.absolute()


@pytest.mark.parametrize("points", [[], [(1, 2, 3)], [(1, 2), (3,)]])
def test_from_points_rejects_bad_input(points):
    with pytest.raises(GeometryError):
        Rect.from_points(points)


def test_approx_eq():
    a = Rect(Range(0.1 + 0.2, 1.0), Range(0.0, 2.0))
    b = Rect(Range(0.3, 1.0), Range(0.0, 2.0))
    assert a != b
    assert a.approx_eq(b)
    assert not a.approx_eq(b.shift_x(0.5))


def test_degenerate_rect_is_valid():
    rect = Rect.from_w_h(0, 0)
    assert rect.w() == 0
    assert rect.contains((0, 0))
    assert math.isclose(rect.area(), 0.0)
    assert len(rect.subdivisions()) == 4
