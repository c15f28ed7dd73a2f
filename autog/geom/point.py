"""Points on the plane and basic vector operations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

_NORM_EPSILON = 1e-6


@dataclass(frozen=True)
class Point:
    """A point on the plane in SVG-like coordinates (y grows downward)."""

    x: float = 0.0
    y: float = 0.0

    def svg(self) -> str:
        return f'<circle r="4" cx="{self.x:.2f}" cy="{self.y:.2f}" fill="black"/>'


class Orientation(IntEnum):
    CCW = -1
    COLLINEAR = 0
    CW = 1


def add_points(p1: Point, p2: Point) -> Point:
    return Point(p1.x + p2.x, p1.y + p2.y)


def sub_points(p1: Point, p2: Point) -> Point:
    return Point(p1.x - p2.x, p1.y - p2.y)


def scale_point(p: Point, c: float) -> Point:
    return Point(p.x * c, p.y * c)


def dot(p1: Point, p2: Point) -> float:
    return p1.x * p2.x + p1.y * p2.y


def dist(p: Point, q: Point) -> float:
    return math.hypot(q.x - p.x, q.y - p.y)


def sq_dist(p: Point, q: Point) -> float:
    return (q.x - p.x) * (q.x - p.x) + (q.y - p.y) * (q.y - p.y)


def normalize(p: Point) -> Point:
    """Scale the vector p to unit length; very short vectors are returned as is."""
    d = p.x * p.x + p.y * p.y
    if d > _NORM_EPSILON:
        d = math.sqrt(d)
        return Point(p.x / d, p.y / d)
    return p


def rotate(p: Point, theta: float) -> Point:
    cs, sn = math.cos(theta), math.sin(theta)
    return Point(p.x * cs - p.y * sn, p.x * sn + p.y * cs)


def orientation(a: Point, b: Point, c: Point) -> Orientation:
    """Orientation of the triple (a, b, c) in SVG coordinates."""
    d = (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)
    if d < 0:
        return Orientation.CCW
    if d > 0:
        return Orientation.CW
    return Orientation.COLLINEAR