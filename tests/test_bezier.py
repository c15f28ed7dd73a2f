import pytest

from autog.geom.bezier import (
    CubicBezier,
    b30,
    b30_plus_b31,
    b31,
    b32,
    b32_plus_b33,
    b33,
    make_spline,
)
from autog.geom.point import Point as P

DELTA = 1e-2


def test_make_spline_vertically_aligned():
    s = make_spline(P(20, 30), P(20, 50))
    assert s.p0 == s.p1
    assert s.p2 == s.p3


def test_make_spline_horizontal_segment():
    a, b = P(20, 10), P(50, 10)
    s = make_spline(a, b)
    assert s.p0 == a
    assert s.p1.x == pytest.approx(25.7, abs=DELTA)
    assert s.p1.y == pytest.approx(8.14, abs=DELTA)
    assert s.p2.x == pytest.approx(44.3, abs=DELTA)
    assert s.p2.y == pytest.approx(8.14, abs=DELTA)
    assert s.p3 == b


def test_make_spline_negative_slope():
    a, b = P(50, 20), P(20, 10)
    s = make_spline(a, b)
    assert s.p0 == a
    assert s.p1.x == pytest.approx(44.91, abs=DELTA)
    assert s.p1.y == pytest.approx(16.24, abs=DELTA)
    assert s.p2.x == pytest.approx(26.32, abs=DELTA)
    assert s.p2.y == pytest.approx(10.04, abs=DELTA)
    assert s.p3 == b


def test_make_spline_positive_slope():
    a, b = P(20, 10), P(50, 20)
    s = make_spline(a, b)
    assert s.p0 == a
    assert s.p1.x == pytest.approx(26.32, abs=DELTA)
    assert s.p1.y == pytest.approx(10.04, abs=DELTA)
    assert s.p2.x == pytest.approx(44.91, abs=DELTA)
    assert s.p2.y == pytest.approx(16.24, abs=DELTA)
    assert s.p3 == b


def test_bernstein_endpoints():
    assert b30(0.0) == 1.0
    assert b33(1.0) == 1.0
    assert b31(0.0) == 0.0
    assert b32(1.0) == 0.0


@pytest.mark.parametrize("x", [0.0, 0.1, 0.25, 0.5, 0.8, 1.0])
def test_bernstein_partition_of_unity(x):
    assert b30_plus_b31(x) == pytest.approx(b30(x) + b31(x))
    assert b32_plus_b33(x) == pytest.approx(b32(x) + b33(x))
    assert b30_plus_b31(x) + b32_plus_b33(x) == pytest.approx(1.0)


def test_curve_point_endpoints():
    bz = CubicBezier(P(0, 0), P(1, 5), P(4, 5), P(6, 2))
    assert bz.curve_point(0.0) == P(0, 0)
    assert bz.curve_point(1.0) == P(6, 2)


def test_adjust_moves_inner_points():
    bz = CubicBezier(P(0, 0), P(3, 0), P(0, 3), P(10, 10))
    adj = bz.adjust(1)
    assert adj.p0 == P(0, 0)
    assert adj.p3 == P(10, 10)
    assert adj.p1.x == pytest.approx(1.0)
    assert adj.p1.y == pytest.approx(0.0)
    assert adj.p2.x == pytest.approx(10.0)
    assert adj.p2.y == pytest.approx(9.0)


def test_dist_of_straight_control_polygon():
    bz = CubicBezier(P(0, 0), P(1, 0), P(2, 0), P(3, 0))
    assert bz.dist() == pytest.approx(3.0)


def test_coefficients():
    bz = CubicBezier(P(0, 1), P(1, 2), P(2, 3), P(3, 4))
    assert bz.xcoeff() == [0, 3, 0, 0]
    assert bz.ycoeff() == [1, 3, 0, 0]
    assert bz.scoeff(1.0) == [1, 0, 0, 0]


def test_to_points_and_str():
    bz = CubicBezier(P(1, 2), P(3, 4), P(5, 6), P(7, 8))
    assert bz.to_points() == [(1, 2), (3, 4), (5, 6), (7, 8)]
    assert str(bz) == (
        '<path d="M 1.00 2.00 C 3.00 4.00, 5.00 6.00, 7.00 8.00" stroke="black"/>'
    )


def test_max_error_picks_farthest_inner_point():
    bz = CubicBezier(P(0, 0), P(0, 0), P(3, 0), P(3, 0))
    path = [P(0, 0), P(1, 1), P(2, 5), P(3, 0)]
    t = [0.0, 1 / 3, 2 / 3, 1.0]
    assert bz.max_error(path, t) == 2


def test_max_error_unequal_lengths():
    bz = CubicBezier(P(0, 0), P(0, 0), P(3, 0), P(3, 0))
    with pytest.raises(ValueError):
        bz.max_error([P(0, 0), P(3, 0)], [0.0])