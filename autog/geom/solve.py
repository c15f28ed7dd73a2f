"""Real roots of polynomials up to degree three."""

from __future__ import annotations

import math

_ZERO_EPSILON = 1e-7


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def solve3(coeff: list[float]) -> list[float] | None:
    """Real roots of coeff[3]x^3 + coeff[2]x^2 + coeff[1]x + coeff[0].

    Returns None when every x is a solution.
    """
    a, b, c, d = coeff[3], coeff[2], coeff[1], coeff[0]
    if is_zero(a):
        return solve2(coeff)
    b_over_3a = b / (3 * a)
    c_over_a = c / a
    d_over_a = d / a

    p = b_over_3a * b_over_3a
    q = 2 * b_over_3a * p - b_over_3a * c_over_a + d_over_a
    p = c_over_a / 3 - p
    disc = q * q + 4 * p * p * p

    if disc < 0:
        r = 0.5 * math.sqrt(-disc + q * q)
        theta = math.atan2(math.sqrt(-disc), -q)
        temp = 2 * _cbrt(r)
        roots = [
            temp * math.cos(theta / 3),
            temp * math.cos((theta + 2 * math.pi) / 3),
            temp * math.cos((theta - 2 * math.pi) / 3),
        ]
    else:
        alpha = 0.5 * (math.sqrt(disc) - q)
        beta = -q - alpha
        s = _cbrt(alpha) + _cbrt(beta)
        roots = [s] if disc > 0 else [s, -0.5 * s, -0.5 * s]

    return [root - b_over_3a for root in roots]


def solve2(coeff: list[float]) -> list[float] | None:
    """Real roots of coeff[2]x^2 + coeff[1]x + coeff[0]."""
    a, b, c = coeff[2], coeff[1], coeff[0]
    if is_zero(a):
        return solve1(coeff)
    b_over_2a = b / (2 * a)
    c_over_a = c / a

    disc = b_over_2a * b_over_2a - c_over_a
    if disc < 0:
        return []
    if disc > 0:
        u = -b_over_2a + math.sqrt(disc)
        return [u, -2 * b_over_2a - u]
    return [-b_over_2a]


def solve1(coeff: list[float]) -> list[float] | None:
    """Root of coeff[1]x + coeff[0]; None when every x is a solution."""
    a, b = coeff[1], coeff[0]
    if is_zero(a):
        if is_zero(b):
            return None
        return []
    return [-b / a]


def is_zero(x: float) -> bool:
    return -_ZERO_EPSILON < x < _ZERO_EPSILON