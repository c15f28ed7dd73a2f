"""Cubic Bezier control points and Bernstein basis polynomials."""

from __future__ import annotations

import math
from dataclasses import dataclass

from autog.geom.point import Point, add_points, dist, rotate, scale_point, sub_points


def b30(x: float) -> float:
    c = 1 - x
    return c * c * c


def b31(x: float) -> float:
    c = 1 - x
    return 3 * x * c * c


def b30_plus_b31(x: float) -> float:
    """b30(x) + b31(x), i.e. 2x^3 - 3x^2 + 1."""
    return 2 * x * x * x - (3 * x * x) + 1


def b32(x: float) -> float:
    return 3 * x * x * (1 - x)


def b33(x: float) -> float:
    return x * x * x


def b32_plus_b33(x: float) -> float:
    """b32(x) + b33(x), i.e. x^2 (3 - 2x)."""
    return x * x * (3 - 2 * x)


@dataclass(frozen=True)
class CubicBezier:
    """Control points of a cubic Bezier curve."""

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    def __str__(self) -> str:
        p0, p1, p2, p3 = self.p0, self.p1, self.p2, self.p3
        return (
            f'<path d="M {p0.x:.2f} {p0.y:.2f} C {p1.x:.2f} {p1.y:.2f}, '
            f'{p2.x:.2f} {p2.y:.2f}, {p3.x:.2f} {p3.y:.2f}" stroke="black"/>'
        )

    def to_points(self) -> list[tuple[float, float]]:
        return [(p.x, p.y) for p in (self.p0, self.p1, self.p2, self.p3)]

    def adjust(self, a: float) -> CubicBezier:
        """Keep p0 and p3; place p1 and p2 along their tangents scaled by a/3."""
        return CubicBezier(
            self.p0,
            add_points(self.p0, scale_point(self.p1, a / 3.0)),
            sub_points(self.p3, scale_point(self.p2, a / 3.0)),
            self.p3,
        )

    def dist(self) -> float:
        """Length of the control polygon."""
        return dist(self.p0, self.p1) + dist(self.p1, self.p2) + dist(self.p2, self.p3)

    def xcoeff(self) -> list[float]:
        return _coeff(self.p0.x, self.p1.x, self.p2.x, self.p3.x)

    def ycoeff(self) -> list[float]:
        return _coeff(self.p0.y, self.p1.y, self.p2.y, self.p3.y)

    def scoeff(self, slope: float) -> list[float]:
        return _coeff(
            *(p.y - slope * p.x for p in (self.p0, self.p1, self.p2, self.p3))
        )

    def curve_point(self, t: float) -> Point:
        """Point on the curve at parameter t."""
        w0, w1, w2, w3 = b30(t), b31(t), b32(t), b33(t)
        return Point(
            w0 * self.p0.x + w1 * self.p1.x + w2 * self.p2.x + w3 * self.p3.x,
            w0 * self.p0.y + w1 * self.p1.y + w2 * self.p2.y + w3 * self.p3.y,
        )

    def max_error(self, path: list[Point], t: list[float]) -> int:
        """Index of the inner path point farthest from the curve, or -1 if none."""
        if len(path) != len(t):
            raise ValueError("spline: path and parameters have unequal length")
        max_d = -1.0
        max_i = -1
        for i in range(1, len(path) - 1):
            d = dist(self.curve_point(t[i]), path[i])
            if d > max_d:
                max_d = d
                max_i = i
        return max_i


def _coeff(v0: float, v1: float, v2: float, v3: float) -> list[float]:
    """Coefficients of the polynomial form, lowest degree first."""
    return [
        v0,
        3 * (v1 - v0),
        3 * v0 + 3 * v2 - 6 * v1,
        v3 + 3 * v1 - (v0 + 3 * v2),
    ]


def make_spline(a: Point, b: Point) -> CubicBezier:
    """Cubic Bezier from a to b that curves gently in the direction of the slope."""
    k = 0.2
    if a.x == b.x:
        return CubicBezier(a, a, b, b)
    v = Point(b.x - a.x, b.y - a.y)

    # rotate clockwise for a rightward vector, counterclockwise otherwise (SVG plane)
    direction = -1.0 if v.x > 0 else 1.0
    theta1 = direction * math.pi * (1.0 / 10.0)
    theta2 = direction * math.pi * (9.0 / 10.0)

    r = rotate(v, theta1)
    q = rotate(v, theta2)
    p1 = Point(a.x + k * r.x, a.y + k * r.y)
    p2 = Point(b.x + k * q.x, b.y + k * q.y)
    return CubicBezier(a, p1, p2, b)