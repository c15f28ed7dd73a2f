"""Layout results returned to callers."""

from __future__ import annotations

from dataclasses import dataclass, field

from autog.graph.dgraph import EdgeSlice, Source
from autog.graph.elements import Size

__all__ = ["EdgeSlice", "Layout", "LayoutEdge", "LayoutNode", "Size", "Source"]


@dataclass
class LayoutNode:
    """A positioned node: (x, y) is its top-left corner, w and h its size."""

    id: str
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    @property
    def size(self) -> Size:
        return Size(self.x, self.y, self.w, self.h)


@dataclass
class LayoutEdge:
    """A routed edge.

    For straight-segment routings, ``points`` holds the start point, any bend
    points and the end point. For curved routings it holds the control points
    of a piece-wise cubic Bezier, in chunks of four.
    """

    from_id: str
    to_id: str
    points: list[tuple[float, float]] = field(default_factory=list)
    # whether the arrow head goes at the start point rather than the end point
    arrow_head_start: bool = False


@dataclass
class Layout:
    nodes: list[LayoutNode] = field(default_factory=list)
    edges: list[LayoutEdge] = field(default_factory=list)