from undercroft.util.coordinates import (
    Rect,
    euclidean_distance,
    manhattan_distance,
)


def test_rect_bounds_are_half_open():
    rect = Rect(2, 3, 4, 5)
    assert (rect.x1, rect.z1, rect.x2, rect.z2) == (2, 3, 6, 8)
    assert rect.contains((2, 3))
    assert rect.contains((5, 7))
    assert not rect.contains((6, 7))
    assert not rect.contains((5, 8))


def test_rect_center_uses_floor_division():
    assert Rect(0, 0, 3, 3).center() == (1, 1)
    assert Rect(10, 4, 4, 2).center() == (12, 5)


def test_rect_expanded_and_clipped():
    grown = Rect(1, 1, 2, 2).expanded(3)
    assert grown == Rect.from_bounds(-2, -2, 6, 6)
    assert grown.clipped(5, 4) == Rect.from_bounds(0, 0, 5, 4)


def test_rect_cells_are_x_major():
    assert list(Rect(0, 0, 2, 2).cells()) == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_distances():
    assert manhattan_distance((0, 0), (3, 4)) == 7
    assert euclidean_distance((0, 0), (3, 4)) == 5.0

