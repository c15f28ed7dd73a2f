"""Shortest path through the polygon formed by vertically stacked rectangles."""

from __future__ import annotations

from autog.collectors import Deque, new_mat
from autog.geom.point import Orientation, Point, orientation
from autog.geom.shapes import Rect, Segment, Tri
from autog.geom.triangulate import triangulate


def shortest(p1: Point, p2: Point, rects: list[Rect]) -> list[Point]:
    """Find the shortest path from p1 to p2 inside the merged rectangles.

    The returned points are ordered from p2 back to p1.
    """
    tris = triangulate(rects)

    start: Tri | None = None
    end: Tri | None = None
    for t in tris:
        if t.contains(p1):
            start = t
        if t.contains(p2):
            end = t

    start_id = start.id if start is not None else 0
    end_id = end.id if end is not None else 0
    if start_id == end_id:
        return [p2, p1]
    if start is None or end is None:
        raise ValueError("shortest path: endpoint lies outside the polygon")

    adj = dual_graph(start, tris)
    crossed = crossed_diagonals(start.id, end.id, adj, set())
    if not crossed:
        raise ValueError("shortest path: triangulation is disconnected")

    diagonals = [*crossed, Segment(crossed[-1].a, p2)]

    predecessor: dict[Point, Point] = {}

    deq: Deque[Point] = Deque(len(rects) * 2)
    deq.push_front(p1)
    apex = deq.front()

    first = diagonals[0]
    if orientation(p1, first.a, first.b) == Orientation.CCW:
        deq.push_front(first.a)
        deq.push_back(first.b)
    else:
        deq.push_front(first.b)
        deq.push_back(first.a)

    def outside_left(v: Point) -> bool:
        if len(deq) < 2:
            return True
        d = orientation(deq.peek_front(2), deq.peek_front(1), v)
        return (deq.front() < apex and d != Orientation.CCW) or (
            deq.front() >= apex and d != Orientation.CW
        )

    def outside_right(v: Point) -> bool:
        if len(deq) < 2:
            return True
        d = orientation(deq.peek_back(2), deq.peek_back(1), v)
        return (deq.back() > apex and d != Orientation.CW) or (
            deq.back() <= apex and d != Orientation.CCW
        )

    for prev_diag, diag in zip(diagonals, diagonals[1:]):
        c = common_vertex(prev_diag, diag)
        if deq.peek_back(1) == c:
            v = diag.other(c)
            while not outside_left(v):
                deq.pop_front()
            apex = max(apex, deq.front())
            predecessor[v] = deq.peek_front(1)
            deq.push_front(v)
        elif deq.peek_front(1) == c:
            v = diag.other(c)
            while not outside_right(v):
                deq.pop_back()
            apex = min(apex, deq.back())
            predecessor[v] = deq.peek_back(1)
            deq.push_back(v)
        else:
            raise ValueError(
                "shortest path: funnels: disconnected triangulation diagonal"
            )

    path = [p2]
    u = p2
    while u in predecessor:
        u = predecessor[u]
        path.append(u)
    if path[-1] != p1:
        path.append(p1)
    return path


def dual_graph(start: Tri, tris: list[Tri]) -> list[list[Segment | None]]:
    """Adjacency matrix of the triangulation's dual graph.

    Cell (i, j) holds the diagonal shared by the triangles with ids i and j,
    or None when they aren't adjacent.
    """
    owner: dict[Segment, int] = {start.ordered_side(0): start.id}
    adj = new_mat(len(tris) + 1)

    for t in tris:
        for i in range(3):
            side = t.ordered_side(i)
            tid = owner.get(side)
            if tid is None:
                owner[side] = t.id
            else:
                adj[tid][t.id] = side
                adj[t.id][tid] = side
    return adj


def crossed_diagonals(
    start_id: int,
    end_id: int,
    adj: list[list[Segment | None]],
    visited: set[int] | None = None,
) -> list[Segment] | None:
    """Diagonals crossed walking the dual graph from start_id to end_id.

    Returns None when end_id cannot be reached.
    """
    if visited is None:
        visited = set()
    if start_id == end_id:
        return []
    visited.add(start_id)
    for tid, diagonal in enumerate(adj[start_id]):
        if diagonal is not None and tid not in visited:
            rest = crossed_diagonals(tid, end_id, adj, visited)
            if rest is not None:
                return [diagonal, *rest]
    return None


def common_vertex(d1: Segment, d2: Segment) -> Point:
    """Return the vertex shared by d1 and d2, assuming they share one."""
    if d1.a == d2.a or d1.b == d2.a:
        return d2.a
    return d2.b