"""The directed graph processed by the layout pipeline, and its sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from autog.graph.elements import Edge, EdgeList, Layer, Node


class Source(ABC):
    """Something that can fill a DGraph with nodes and edges."""

    @abstractmethod
    def populate(self, g: DGraph) -> None:
        """Fill g with the nodes and edges of this source."""


@dataclass(eq=False)
class DGraph:
    nodes: list[Node] = field(default_factory=list)
    edges: EdgeList = field(default_factory=EdgeList)
    layers: list[Layer] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.edges, EdgeList):
            self.edges = EdgeList(self.edges)

    def sources(self) -> Iterator[Node]:
        """Nodes with no incoming edges."""
        return (n for n in self.nodes if n.indeg() == 0)

    def sinks(self) -> Iterator[Node]:
        """Nodes with no outgoing edges."""
        return (n for n in self.nodes if n.outdeg() == 0)

    def virtual_nodes(self) -> Iterator[Node]:
        return (n for n in self.nodes if n.is_virtual)

    def connected_components(self) -> list[DGraph]:
        """Weakly connected components; the graph itself when it has only one."""
        if not self.nodes:
            raise ValueError("graph has no nodes")

        nodes, edges = _walk(self.nodes[0])
        if len(nodes) == len(self.nodes):
            return [self]

        components = [DGraph(list(nodes), EdgeList(edges))]
        visited = set(nodes)
        for n in self.nodes:
            if n not in visited:
                comp_nodes, comp_edges = _walk(n)
                components.append(DGraph(list(comp_nodes), EdgeList(comp_edges)))
                visited.update(comp_nodes)
        return components


def _walk(start: Node) -> tuple[dict[Node, None], dict[Edge, None]]:
    """Depth-first walk ignoring edge direction; returns the nodes and edges reached."""
    nodes: dict[Node, None] = {start: None}
    edges: dict[Edge, None] = {}
    stack = [start]
    while stack:
        n = stack.pop()
        for e in n.all_edges():
            if e in edges:
                continue
            edges[e] = None
            m = e.connected_node(n)
            if m not in nodes:
                nodes[m] = None
                stack.append(m)
    return nodes, edges


class EdgeSlice(Source):
    """A graph source given as a list of (source id, target id) pairs."""

    def __init__(self, edges: Iterable[Sequence[str]]) -> None:
        self.edges = [tuple(e) for e in edges]

    def populate(self, g: DGraph) -> None:
        by_id: dict[str, Node] = {}
        edge_list = EdgeList()

        def node_for(node_id: str) -> Node:
            node = by_id.get(node_id)
            if node is None:
                node = by_id[node_id] = Node(node_id)
            return node

        for pair in self.edges:
            if len(pair) != 2:
                raise ValueError(
                    "graph source: edge must have one source and one target node"
                )
            src = node_for(pair[0])
            dst = node_for(pair[1])
            e = Edge(src, dst, 1)
            edge_list.add(e)
            dst.in_edges.add(e)
            src.out_edges.add(e)

        g.nodes = list(by_id.values())
        g.edges = edge_list