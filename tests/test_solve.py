import math

import pytest

from autog.geom.solve import is_zero, solve1, solve2, solve3

REL = 1e-6


def test_solve_cubic_three_roots():
    a, b, c, d = -1.0, 7.0, -4.0, -10.0
    roots = sorted(solve3([d, c, b, a]))
    assert len(roots) == 3
    assert roots[0] == pytest.approx(-0.900052, rel=REL)
    assert roots[1] == pytest.approx(1.830534, rel=REL)
    assert roots[2] == pytest.approx(6.069517, rel=REL)


def test_solve_cubic_one_root():
    a, b, c, d = 5.0, 0.0, 2.0, -2.0
    roots = solve3([d, c, b, a])
    assert len(roots) == 1
    assert roots[0] == pytest.approx(0.560286, rel=REL)


def test_solve_quadratic_roots_through_cubic():
    a, b, c, d = 0.0, math.e, -5.45, 2.0
    roots = sorted(solve3([d, c, b, a]))
    assert len(roots) == 2
    assert roots[0] == pytest.approx(0.4836360, rel=REL)
    assert roots[1] == pytest.approx(1.521306, rel=REL)


def test_solve2_double_root():
    assert solve2([1.0, -2.0, 1.0]) == [1.0]


def test_solve2_no_real_roots():
    assert solve2([1.0, 0.0, 1.0]) == []


def test_solve1_linear():
    assert solve1([2.0, 4.0]) == [-0.5]


def test_solve1_degenerate():
    assert solve1([0.0, 0.0]) is None
    assert solve1([5.0, 0.0]) == []


def test_solve3_falls_through_to_linear():
    assert solve3([3.0, -1.5, 0.0, 0.0]) == [2.0]


def test_is_zero():
    assert is_zero(0.0)
    assert is_zero(-5e-8)
    assert not is_zero(1e-7)
    assert not is_zero(-1e-6)