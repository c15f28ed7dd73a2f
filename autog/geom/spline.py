"""Fit piece-wise cubic Bezier curves to polygonal paths inside barriers."""

from __future__ import annotations

import math

from autog.geom.bezier import (
    CubicBezier,
    b30_plus_b31,
    b31,
    b32,
    b32_plus_b33,
)
from autog.geom.point import (
    Point,
    add_points,
    dist,
    dot,
    normalize,
    scale_point,
    sq_dist,
    sub_points,
)
from autog.geom.shapes import Segment
from autog.geom.solve import solve3

_NUM_THRESHOLD = 1e-6
_EPSILON1 = 1e-3
_EPSILON2 = 1e-6
_SLIDE_INIT = 3.0
_SLIDE_THRESHOLD = 0.01
_SLIDE_MIN = 0.005


def fit_spline(
    path: list[Point],
    tanv1: Point,
    tanv2: Point,
    barriers: list[Segment],
) -> list[CubicBezier]:
    """Cubic Bezier pieces that fit the polygonal path without crossing barriers.

    The path points must be ordered from start to end. The tangents set the
    exit directions at the first and last points.
    """
    if len(path) < 2:
        raise ValueError("spline: path needs at least two points")

    tanv1 = normalize(tanv1)
    tanv2 = normalize(tanv2)

    t = chord_length(path)
    a = a_terms(tanv1, tanv2, t)
    alpha1, alpha2 = alphas(t, a, path)

    bz = CubicBezier(
        path[0],
        scale_point(tanv1, alpha1),
        scale_point(tanv2, alpha2),
        path[-1],
    )

    fitted, ok = try_fit(bz, path, barriers)
    if ok:
        return [fitted]

    bz = fitted.adjust(1)
    k = bz.max_error(path, t)
    if k < 1:
        raise ValueError("spline: cannot split a path without inner points")

    tan_before = normalize(sub_points(path[k], path[k - 1]))
    tan_after = normalize(sub_points(path[k + 1], path[k]))
    tan_split = normalize(add_points(tan_before, tan_after))

    upper = fit_spline(path[: k + 1], tanv1, tan_split, barriers)
    lower = fit_spline(path[k:], tan_split, tanv2, barriers)
    return upper + lower


def chord_length(path: list[Point]) -> list[float]:
    """Parametrize the path by normalized cumulative distance."""
    t = [0.0]
    for prev, cur in zip(path, path[1:]):
        t.append(t[-1] + dist(cur, prev))
    total = t[-1]
    if total == 0:
        return t
    return [t[0]] + [v / total for v in t[1:]]


def a_terms(tanv1: Point, tanv2: Point, t: list[float]) -> list[tuple[Point, Point]]:
    """The A(i,1) and A(i,2) terms of Schneider's method."""
    return [(scale_point(tanv1, b31(ti)), scale_point(tanv2, b32(ti))) for ti in t]


def alphas(
    t: list[float], a: list[tuple[Point, Point]], path: list[Point]
) -> tuple[float, float]:
    """Scale factors of the movable control points along their tangents."""
    a1sq = 0.0
    a2sq = 0.0
    a1a2 = 0.0
    x1 = 0.0
    x2 = 0.0

    first, last = path[0], path[-1]
    for ti, (ai1, ai2), d in zip(t, a, path):
        a1sq += dot(ai1, ai1)
        a1a2 += dot(ai1, ai2)
        a2sq += dot(ai2, ai2)

        q = add_points(
            scale_point(first, b30_plus_b31(ti)),
            scale_point(last, b32_plus_b33(ti)),
        )
        diff = sub_points(d, q)
        x1 += dot(diff, ai1)
        x2 += dot(diff, ai2)

    det_c1x = a1sq * x2 - x1 * a1a2
    det_xc2 = x1 * a2sq - a1a2 * x2
    det_c = a1sq * a2sq - a1a2 * a1a2

    alpha1 = alpha2 = 0.0
    stable = abs(det_c) >= _NUM_THRESHOLD
    if stable:
        alpha1 = det_xc2 / det_c
        alpha2 = det_c1x / det_c
    if not stable or alpha1 <= 0 or alpha2 <= 0:
        k = dist(first, last) / 3.0
        alpha1 = alpha2 = k
    return alpha1, alpha2


def try_fit(
    bz: CubicBezier, path: list[Point], barriers: list[Segment]
) -> tuple[CubicBezier, bool]:
    """Slide the movable control points until the curve fits within the barriers.

    Returns the fitting control points and True, or the given ones and False.
    """
    slide = _SLIDE_INIT
    path_d = sum(dist(cur, prev) for prev, cur in zip(path, path[1:]))
    first = True

    while True:
        candidate = bz.adjust(slide)

        if first:
            if candidate.dist() < path_d - _EPSILON1:
                return bz, False
            first = False

        if curve_contained(candidate, barriers):
            return candidate, True

        if slide < _SLIDE_MIN:
            if len(path) == 2:
                return candidate, True
            return bz, False

        slide = slide / 2 if slide > _SLIDE_THRESHOLD else 0.0


def curve_contained(bz: CubicBezier, barriers: list[Segment]) -> bool:
    """Whether the curve crosses none of the barriers away from their endpoints."""
    for barrier in barriers:
        roots = curve_intersects(bz, barrier)
        if roots is None:
            continue
        for r in roots:
            if r < _EPSILON2 or r > 1 - _EPSILON2:
                continue
            rp = bz.curve_point(r)
            if sq_dist(rp, barrier.a) < _EPSILON1 or sq_dist(rp, barrier.b) < _EPSILON1:
                continue
            return False
    return True


def _eval(coeff: list[float], t: float) -> float:
    return coeff[0] + t * (coeff[1] + t * (coeff[2] + t * coeff[3]))


def curve_intersects(bz: CubicBezier, seg: Segment) -> list[float] | None:
    """Curve parameters in [0, 1] at which the curve meets the segment.

    Returns None when the intersection cannot be determined as a finite set.
    """
    xc0 = seg.a.x
    xc1 = seg.b.x - seg.a.x
    yc0 = seg.a.y
    yc1 = seg.b.y - seg.a.y

    def in_unit(values: list[float]) -> list[float]:
        return [r for r in values if 0 <= r <= 1]

    if xc1 == 0:
        if yc1 == 0:
            # the segment degenerates into a point
            curve_x = bz.xcoeff()
            curve_x[0] -= xc0
            xroots = solve3(curve_x)

            curve_y = bz.ycoeff()
            curve_y[0] -= yc0
            yroots = solve3(curve_y)

            if xroots is None:
                if yroots is None:
                    return None
                return in_unit(yroots)
            if yroots is None:
                return in_unit(xroots)
            return in_unit([xr for xr in xroots for yr in yroots if xr == yr])

        # vertical segment
        curve_x = bz.xcoeff()
        curve_x[0] -= xc0
        xroots = solve3(curve_x)
        if xroots is None:
            return None
        curve_y = bz.ycoeff()
        roots = []
        for tv in xroots:
            if 0 <= tv <= 1:
                sv = (_eval(curve_y, tv) - yc0) / yc1
                if 0 <= sv <= 1:
                    roots.append(tv)
        return roots

    slope = yc1 / xc1
    curve_s = bz.scoeff(slope)
    curve_s[0] += slope * xc0 - yc0
    sroots = solve3(curve_s)
    if sroots is None:
        return None
    curve_x = bz.xcoeff()
    roots = []
    for tv in sroots:
        if 0 <= tv <= 1:
            sv = (_eval(curve_x, tv) - xc0) / xc1
            if 0 <= sv <= 1:
                roots.append(tv)
    return roots