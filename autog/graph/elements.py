"""Nodes, edges and layers of the layered graph."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum


@dataclass
class Size:
    """Dimensions and top-left coordinates of a box on the drawing plane."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


class EdgeList(list):
    """List of edges that compares its items by identity."""

    def add(self, e: Edge) -> None:
        self.append(e)

    def remove(self, e: Edge) -> None:  # type: ignore[override]
        """Remove every occurrence of e; absent edges are ignored."""
        self[:] = [f for f in self if f is not e]


@dataclass(eq=False, repr=False)
class Node:
    """A graph node. (x, y) is its top-left corner; (0, 0) is the top-left of the plane."""

    id: str
    in_edges: EdgeList = field(default_factory=EdgeList)
    out_edges: EdgeList = field(default_factory=EdgeList)
    layer: int = 0
    layer_pos: int = 0
    is_virtual: bool = False
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.in_edges, EdgeList):
            self.in_edges = EdgeList(self.in_edges)
        if not isinstance(self.out_edges, EdgeList):
            self.out_edges = EdgeList(self.out_edges)

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"Node({self.id!r})"

    @property
    def size(self) -> Size:
        return Size(self.x, self.y, self.w, self.h)

    @size.setter
    def size(self, value: Size) -> None:
        self.x, self.y, self.w, self.h = value.x, value.y, value.w, value.h

    def svg(self) -> str:
        return (
            f'<rect id="autog-node-{self.id}" x="{self.x:f}" y="{self.y:f}" '
            f'width="{self.w:f}" height="{self.h:f}" style="fill: none; stroke: blue;" />'
        )

    def indeg(self) -> int:
        """Number of incoming edges."""
        return len(self.in_edges)

    def outdeg(self) -> int:
        """Number of outgoing edges."""
        return len(self.out_edges)

    def deg(self) -> int:
        """Total number of incoming and outgoing edges."""
        return self.indeg() + self.outdeg()

    def all_edges(self) -> Iterator[Edge]:
        """Incoming edges followed by outgoing edges."""
        yield from self.in_edges
        yield from self.out_edges

    def visit_edges(self, visit: Callable[[Edge], object]) -> None:
        for e in self.all_edges():
            visit(e)


class EdgeType(IntEnum):
    """Kind of nodes an edge connects."""

    CONCRETE = 0  # both ends non-virtual
    HYBRID = 1  # one virtual end and one non-virtual end
    VIRTUAL = 2  # both ends virtual


@dataclass(eq=False, repr=False)
class Edge:
    """A directed edge between two nodes."""

    from_node: Node
    to_node: Node
    weight: int = 0
    delta: int = 1
    is_in_spanning_tree: bool = False
    is_reversed: bool = False
    cut_value: int = 0
    points: list[tuple[float, float]] = field(default_factory=list)
    arrow_head_start: bool = False

    def self_loops(self) -> bool:
        return self.from_node is self.to_node

    def is_flat(self) -> bool:
        return self.from_node.layer == self.to_node.layer

    def reverse(self) -> None:
        """Swap the edge's direction and update the adjacency lists of its ends."""
        src, dst = self.from_node, self.to_node
        src.out_edges.remove(self)
        dst.in_edges.remove(self)
        src.in_edges.add(self)
        dst.out_edges.add(self)
        self.from_node, self.to_node = dst, src
        self.is_reversed = not self.is_reversed

    def connected_node(self, n: Node) -> Node:
        """The end of the edge opposite to n."""
        if self.to_node is not n:
            return self.to_node
        return self.from_node

    def crosses(self, f: Edge) -> bool:
        etop, ebtm = self.from_node, self.to_node
        if self.to_node.layer > self.from_node.layer:
            etop, ebtm = self.to_node, self.from_node
        ftop, fbtm = f.from_node, f.to_node
        if f.to_node.layer > f.from_node.layer:
            ftop, fbtm = f.to_node, f.from_node
        return (
            etop.layer_pos < ftop.layer_pos and ebtm.layer_pos > fbtm.layer_pos
        ) or (etop.layer_pos > ftop.layer_pos and ebtm.layer_pos < fbtm.layer_pos)

    def type(self) -> EdgeType:
        src_virtual = self.from_node.is_virtual
        dst_virtual = self.to_node.is_virtual
        if not src_virtual and not dst_virtual:
            return EdgeType.CONCRETE
        if src_virtual != dst_virtual:
            return EdgeType.HYBRID
        return EdgeType.VIRTUAL

    def __str__(self) -> str:
        s = f"{self.from_node.id} -> {self.to_node.id}"
        if self.is_reversed:
            s += " (rev)"
        if not self.is_in_spanning_tree:
            s += " (non-stree)"
        return s

    def __repr__(self) -> str:
        return f"Edge({self})"


@dataclass(eq=False)
class Layer:
    """An ordered row of nodes."""

    nodes: list[Node] = field(default_factory=list)
    index: int = 0
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def __str__(self) -> str:
        return "[" + " ".join(str(n) for n in self.nodes) + "]"

    def __len__(self) -> int:
        return len(self.nodes)

    def head(self) -> Node:
        """The first node in the layer."""
        return self.nodes[0]

    def tail(self) -> Node:
        """The last node in the layer."""
        return self.nodes[-1]