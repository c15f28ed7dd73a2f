import pytest

from autog.collectors import new_mat
from autog.geom.point import Point
from autog.geom.shapes import Rect, Segment, Tri
from autog.geom.shortest import (
    common_vertex,
    crossed_diagonals,
    dual_graph,
    shortest,
)

P = Point

RECTS = [
    Rect(P(406.00, 1.00), P(464.00, 35.00)),
    Rect(P(110.00, 35.00), P(437.00, 69.00)),
    Rect(P(201.00, 69.00), P(331.00, 103.00)),
    Rect(P(188.00, 103.00), P(295.00, 137.00)),
    Rect(P(179.00, 137.00), P(232.00, 171.00)),
    Rect(P(193.00, 171.00), P(429.00, 205.00)),
    Rect(P(11.00, 205.00), P(298.00, 239.00)),
    Rect(P(170.00, 239.00), P(276.00, 273.00)),
    Rect(P(219.00, 273.00), P(342.00, 307.00)),
    Rect(P(324.00, 307.00), P(375.00, 341.00)),
    Rect(P(219.00, 341.00), P(361.00, 375.00)),
    Rect(P(226.00, 375.00), P(247.00, 409.00)),
    Rect(P(157.00, 409.00), P(245.00, 443.00)),
    Rect(P(3.00, 443.00), P(181.00, 477.00)),
    Rect(P(139.00, 477.00), P(392.00, 511.00)),
]

START = P(RECTS[0].tl.x + RECTS[0].width() / 2, RECTS[0].tl.y)

WANT = [
    P(435.00, 1.00),
    P(406.00, 35.00),
    P(331.00, 69.00),
    P(232.00, 137.00),
    P(232.00, 171.00),
    P(276.00, 273.00),
    P(324.00, 307.00),
    P(324.00, 341.00),
    P(247.00, 375.00),
    P(226.00, 409.00),
    P(181.00, 443.00),
    P(181.00, 477.00),
    P(202.25, 494.00),
]


def _assert_path(want, got):
    assert len(got) == len(want)
    for prev, cur in zip(got, got[1:]):
        assert prev.y < cur.y
    assert got == want


def test_shortest_main_path():
    last = RECTS[-1]
    end = P(last.tl.x + last.width() / 4, last.tl.y + last.height() / 2)
    path = shortest(START, end, RECTS)
    assert len(path) == 13
    _assert_path(WANT, list(reversed(path)))


def test_shortest_to_left_end():
    end = P(42.25, 464.00)
    path = shortest(START, end, RECTS)
    want = WANT[:9] + [P(226.00, 409.00), P(157.00, 443.00), end]
    _assert_path(want, list(reversed(path)))


def test_shortest_to_middle():
    end = P(372.25, 334.00)
    path = shortest(START, end, RECTS)
    want = WANT[:6] + [end]
    _assert_path(want, list(reversed(path)))


def test_shortest_same_triangle():
    end = P(START.x, START.y + 20)
    path = shortest(START, end, RECTS)
    assert path == [end, START]


def test_shortest_different_triangles_straight_line():
    end = P(405.00, 61.00)
    path = shortest(START, end, RECTS)
    _assert_path([START, end], list(reversed(path)))


def test_shortest_path_starts_at_end_and_finishes_at_start():
    end = P(372.25, 334.00)
    path = shortest(START, end, RECTS)
    assert path[0] == end
    assert path[-1] == START


def test_common_vertex():
    a, b, c = P(0, 0), P(1, 1), P(2, 0)
    assert common_vertex(Segment(a, b), Segment(b, c)) == b
    assert common_vertex(Segment(a, b), Segment(c, a)) == a
    assert common_vertex(Segment(b, a), Segment(a, c)) == a


def test_crossed_diagonals_found():
    adj = new_mat(4)
    s12 = Segment(P(0, 0), P(1, 0))
    s23 = Segment(P(1, 0), P(1, 1))
    adj[1][2] = adj[2][1] = s12
    adj[2][3] = adj[3][2] = s23
    assert crossed_diagonals(1, 3, adj, set()) == [s12, s23]


def test_crossed_diagonals_same_node_and_unreachable():
    adj = new_mat(3)
    assert crossed_diagonals(1, 1, adj, set()) == []
    assert crossed_diagonals(1, 2, adj, set()) is None


def test_dual_graph_links_triangles_sharing_a_side():
    t1 = Tri(1, P(0, 0), P(1, 1), P(1, 0))
    t2 = Tri(2, P(0, 0), P(1, 1), P(0, 1))
    adj = dual_graph(t1, [t1, t2])
    shared = Segment(P(0, 0), P(1, 1))
    assert adj[1][2] == shared
    assert adj[2][1] == shared
    assert len(adj) == 3


def test_shortest_outside_point_raises():
    with pytest.raises(ValueError):
        shortest(START, P(-1000.0, -1000.0), RECTS)