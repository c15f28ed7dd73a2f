"""Triangulation of the polygon formed by vertically stacked rectangles."""

from __future__ import annotations

from itertools import count

from autog.geom.point import Point
from autog.geom.shapes import Rect, Tri


def triangulate(rects: list[Rect]) -> list[Tri]:
    """Triangulate the polygon obtained by merging the rectangles.

    The rectangles aren't actually merged. For every output triangle the
    side (a, b) is a diagonal of the polygon. Triangle ids start at 1.
    """
    ids = count(1)

    if len(rects) == 1:
        r = rects[0]
        return [
            Tri(next(ids), r.br, r.tl, Point(r.br.x, r.tl.y)),
            Tri(next(ids), r.br, r.tl, Point(r.tl.x, r.br.y)),
        ]

    tris: list[Tri] = []
    last = len(rects) - 1
    for i, r1 in enumerate(rects):
        r0 = rects[i - 1] if i > 0 else None
        r2 = rects[i + 1] if i < last else None

        if r2 is not None:
            a, b = left_to_right(r1.br, Point(r2.br.x, r2.tl.y))
        else:
            a, b = r1.br, None

        has_merge_point = False
        if r0 is not None:
            if r1.tl.x < r0.tl.x:
                # merge point on the left chain
                s = Point(r0.tl.x, r1.tl.y)
                c = leftmost(r0.br, Point(r1.br.x, r1.tl.y))
                tris.append(Tri(next(ids), a, s, c))
                tris.append(Tri(next(ids), a, r1.tl, s))
                has_merge_point = True
            if r0.br.x < r1.br.x:
                # merge point on the right chain
                s = Point(r0.br.x, r1.tl.y)
                tris.append(Tri(next(ids), a, s, Point(r1.br.x, r1.tl.y)))
                tris.append(Tri(next(ids), a, r1.tl, s))
                has_merge_point = True
            if r2 is None:
                tris.append(Tri(next(ids), r1.br, r1.tl, Point(r1.tl.x, r1.br.y)))
                if not has_merge_point:
                    tris.append(Tri(next(ids), r1.tl, r1.br, Point(r1.br.x, r1.tl.y)))

        if r2 is not None:
            if r1.br.x > r2.br.x:
                # split point on the right chain
                s = Point(r1.br.x, r1.tl.y)
                tris.append(Tri(next(ids), a, s, b))
            # horizontal diagonal from the right to the left chain
            tris.append(
                Tri(next(ids), a, rightmost(Point(r1.tl.x, r1.br.y), r2.tl), r1.tl)
            )
            if not has_merge_point:
                tris.append(Tri(next(ids), r1.tl, a, Point(r1.br.x, r1.tl.y)))
            if r1.tl.x < r2.tl.x:
                # split point on the left chain
                tris.append(Tri(next(ids), r2.tl, r1.tl, Point(r1.tl.x, r1.br.y)))

    return tris


def rightmost(p1: Point, p2: Point) -> Point:
    return p2 if p1.x < p2.x else p1


def leftmost(p1: Point, p2: Point) -> Point:
    return p1 if p1.x < p2.x else p2


def left_to_right(p1: Point, p2: Point) -> tuple[Point, Point]:
    return (p1, p2) if p1.x < p2.x else (p2, p1)