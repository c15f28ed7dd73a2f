"""Rectangles, segments, polygons and triangles."""

from __future__ import annotations

from dataclasses import dataclass

from autog.geom.point import Orientation, Point, orientation


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left and bottom-right vertices."""

    tl: Point
    br: Point

    def width(self) -> float:
        return self.br.x - self.tl.x

    def height(self) -> float:
        return self.br.y - self.tl.y

    def svg(self) -> str:
        return (
            f'<rect class="rect" x="{self.tl.x:.2f}" y="{self.tl.y:.2f}" '
            f'width="{self.width():.2f}" height="{self.height():.2f}" '
            'style="fill: lightgrey; stroke: black;" />'
        )

    def __str__(self) -> str:
        return (
            f"{{Point{{{self.tl.x:.2f},{self.tl.y:.2f}}},"
            f"Point{{{self.br.x:.2f},{self.br.y:.2f}}}}}"
        )


@dataclass(frozen=True)
class Segment:
    a: Point
    b: Point

    def svg(self) -> str:
        return (
            f'<path d="M {self.a.x:.2f},{self.a.y:.2f} '
            f'{self.b.x:.2f},{self.b.y:.2f}" stroke="blue" />'
        )

    def other(self, v: Point) -> Point:
        """Return the endpoint that is not v."""
        return self.b if self.a == v else self.a


@dataclass(frozen=True)
class Polygon:
    """Polygon given as a counterclockwise list of points.

    ``right_start`` is the index at which the right chain begins.
    """

    points: tuple[Point, ...]
    right_start: int = 0

    def sides(self) -> list[Segment]:
        pts = self.points
        return [Segment(p, q) for p, q in zip(pts, pts[1:] + pts[:1])]


def merge_rects(rects: list[Rect]) -> Polygon:
    """Merge vertically stacked rectangles into the outline polygon."""
    if not rects:
        raise ValueError("cannot merge an empty list of rectangles")

    first = rects[0]
    left = [first.tl]
    right = [Point(first.br.x, first.tl.y)]

    prev = first
    for r in rects[1:]:
        if prev.tl.x != r.tl.x:
            left.extend((Point(prev.tl.x, r.tl.y), r.tl))
        else:
            left.append(r.tl)

        if prev.br.x != r.br.x:
            right.extend((prev.br, Point(r.br.x, prev.br.y)))
        else:
            right.append(prev.br)
        prev = r

    left.append(Point(prev.tl.x, prev.br.y))
    right.append(prev.br)

    return Polygon(tuple(left) + tuple(reversed(right)), len(left))


@dataclass(frozen=True)
class Tri:
    """Triangle with an identifier and vertices a, b, c."""

    id: int
    a: Point
    b: Point
    c: Point

    def svg(self) -> str:
        return (
            f'<path d="M {self.a.x:.2f},{self.a.y:.2f} {self.b.x:.2f},{self.b.y:.2f} '
            f'{self.c.x:.2f},{self.c.y:.2f} Z" stroke="blue" fill="none"/>'
        )

    def barycenter(self) -> Point:
        return Point(
            (self.a.x + self.b.x + self.c.x) / 3,
            (self.a.y + self.b.y + self.c.y) / 3,
        )

    def contains(self, p: Point) -> bool:
        """Whether p lies inside the triangle or on its boundary."""
        vertices = (self.a, self.b, self.c)
        inner = 0
        for q, r in zip(vertices, vertices[1:] + vertices[:1]):
            side = orientation(q, r, p)
            if side == Orientation.COLLINEAR:
                return (
                    min(q.x, r.x) <= p.x <= max(q.x, r.x)
                    and min(q.y, r.y) <= p.y <= max(q.y, r.y)
                )
            if side != Orientation.CW:
                inner += 1
        return inner in (0, 3)

    def ordered_side(self, i: int) -> Segment:
        """Side i, with endpoints ordered by x and then by y."""
        vertices = (self.a, self.b, self.c)
        a, b = vertices[i % 3], vertices[(i + 1) % 3]
        if a.x < b.x:
            return Segment(a, b)
        if b.x < a.x:
            return Segment(b, a)
        if a.y < b.y:
            return Segment(a, b)
        return Segment(b, a)