import pytest

from rectgeom import NUM_CORNERS, NUM_TRIANGLES, Corner, Point2, Quad, Range, Rect, Tri

RECT = Rect.from_corners((0, 0), (4, 2))


@pytest.mark.parametrize(
    "point, expected",
    [
        ((1, 0.5), Corner.BOTTOM_LEFT),
        ((1, 1.5), Corner.TOP_LEFT),
        ((3, 0.5), Corner.BOTTOM_RIGHT),
        ((3, 1.5), Corner.TOP_RIGHT),
        ((-10, 10), Corner.TOP_LEFT),
        ((2, 1), Corner.BOTTOM_LEFT),
    ],
)
def test_closest_corner(point, expected):
    assert RECT.closest_corner(point) is expected


def test_corner_at_index_order():
    assert RECT.corner_at_index(0) == Point2(0, 0)
    assert RECT.corner_at_index(1) == Point2(4, 0)
    assert RECT.corner_at_index(2) == Point2(0, 2)
    assert RECT.corner_at_index(3) == Point2(4, 2)


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_corner_at_index_outside_range_is_none(index):
    assert RECT.corner_at_index(index) is None
    assert Corner.from_index(index) is None


def test_corner_lookup_by_enum():
    for index in range(NUM_CORNERS):
        corner = Corner.from_index(index)
        assert RECT.corner(corner) == RECT.corner_at_index(index)


def test_corners_quad_winding():
    quad = RECT.corners()
    assert isinstance(quad, Quad)
    assert list(quad) == [(0, 0), (0, 2), (4, 2), (4, 0)]


def test_corners_iter_forward_and_backward_mirror():
    forward = list(RECT.corners_iter())
    backward = list(reversed(RECT.corners_iter()))
    assert forward == [(0, 0), (4, 0), (0, 2), (4, 2)]
    assert forward == backward[::-1]


def test_corners_iter_mixed_consumption_yields_each_corner_once():
    corners = RECT.corners_iter()
    assert len(corners) == 4
    assert next(corners) == (0, 0)
    assert len(corners) == 3
    assert corners.next_back() == (4, 2)
    assert len(corners) == 2
    assert list(corners) == [(4, 0), (0, 2)]
    assert len(corners) == 0
    assert corners.next_back() is None
    with pytest.raises(StopIteration):
        next(corners)


def test_corners_iter_restarts_by_reconstruction():
    first = RECT.corners_iter()
    list(first)
    assert len(first) == 0
    assert len(RECT.corners_iter()) == NUM_CORNERS


def test_triangles_cover_the_rect():
    first, second = RECT.triangles()
    assert first == Tri((0, 0), (0, 2), (4, 2))
    assert second == Tri((0, 0), (4, 2), (4, 0))
    assert abs(first.signed_area()) + abs(second.signed_area()) == RECT.area()


def test_triangles_iter_matches_triangles():
    triangles = RECT.triangles_iter()
    assert len(triangles) == NUM_TRIANGLES
    assert tuple(triangles) == RECT.triangles()


def test_corners_of_inverted_rect_use_absolute_edges():
    rect = Rect(Range(4, 0), Range(2, 0))
    assert rect.corners() == RECT.corners()
    assert list(rect.corners_iter()) == list(RECT.corners_iter())


def test_corner_rejects_unknown_variant():
    with pytest.raises(ValueError):
        RECT.corner("top_left")
