# autog

Building blocks for drawing directed graphs in the layered (Sugiyama)
style: a graph model with connected-component splitting, data classes for
layout options and layout results, a monitor hook for observing values
logged during a run, and the plane geometry used to route edges as
polylines or cubic Bézier splines.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graph model

A graph is filled from a list of `[source, target]` id pairs with
`autog.graph.dgraph.EdgeSlice`:

```python
from autog.graph.dgraph import DGraph, EdgeSlice

g = DGraph()
EdgeSlice([["a", "b"], ["b", "c"], ["f", "g"]]).populate(g)

for component in g.connected_components():
    print(sorted(n.id for n in component.nodes))

print([n.id for n in g.sources()])   # nodes with no incoming edges
print([n.id for n in g.sinks()])     # nodes with no outgoing edges
```

Nodes are created in the order their ids first appear, and every edge gets
weight 1. A pair that does not hold exactly two ids raises `ValueError`.
`connected_components()` returns `[g]` itself when the graph is connected,
and raises `ValueError` on a graph with no nodes.

`autog.graph.elements` holds the building blocks:

- `Node`: id, incoming and outgoing edges (`in_edges`, `out_edges`),
  `layer`, `layer_pos`, `is_virtual`, and position and size `x`, `y`, `w`,
  `h` (also available together as `size`). `indeg()`, `outdeg()`, `deg()`,
  `all_edges()` (incoming first, then outgoing) and `visit_edges()`.
- `Edge`: `from_node`, `to_node`, `weight`, `delta`, `points`,
  `arrow_head_start` and flags used by layout algorithms. `reverse()` swaps
  the direction and updates both nodes' edge lists; `crosses()` tells whether
  two edges between the same pair of layers cross; `type()` returns an
  `EdgeType` (`CONCRETE`, `HYBRID`, `VIRTUAL`).
- `EdgeList`: a list whose `remove()` drops every occurrence of an edge,
  compared by identity.
- `Layer`: an ordered row of nodes with `head()` and `tail()`.
- `Size`: `x`, `y`, `w`, `h`.

## Options and results

`autog.graph.params.Params` is a dataclass of layout options with their
defaults (for example `layer_spacing=150.0`, `node_spacing=60.0`,
`network_simplex_thoroughness=28`, `wmedian_max_iter=24`,
`brandes_koepf_layout=-1`), and `NsBalance` selects vertical or horizontal
balancing.

`autog.layout.Layout` describes a finished layout as lists of `LayoutNode`
(id, position and size) and `LayoutEdge` (end ids, points and arrow head
placement).

## Monitoring

`autog.monitor` passes values logged under a key to a caller-supplied
monitor:

```python
import queue
from autog import monitor

q = queue.Queue()
monitor.set_monitor(monitor.new_filtered_queue(q, monitor.match_all(3, "alg", "crossings")))
monitor.prefix_for(3, "alg")
monitor.log("crossings", 46)
monitor.reset()

print(q.get_nowait())  # 46
```

`FuncMonitor` (or `new_func()`) calls a function with every entry, and
`wrap_filter()` narrows any monitor with a filter function.

## Geometry

`autog.geom` contains the plane geometry used for edge routing:

- `point`: `Point`, vector helpers (`add_points`, `sub_points`,
  `scale_point`, `dot`, `dist`, `sq_dist`, `normalize`, `rotate`) and
  `orientation()`, returning an `Orientation` in SVG coordinates (y grows
  downward).
- `shapes`: `Rect`, `Segment`, `Polygon`, `Tri` and `merge_rects()`, which
  turns a vertical stack of rectangles into its outline polygon.
- `triangulate`: `triangulate()` splits such a stack of rectangles into
  triangles.
- `shortest`: `shortest(p1, p2, rects)` finds the shortest path between two
  points inside a stack of rectangles with the funnel method; the points are
  returned from `p2` back to `p1`.
- `solve`: `solve1`, `solve2`, `solve3` return the real roots of
  polynomials up to degree three (coefficients lowest degree first), or
  `None` when every value is a root.
- `bezier`: `CubicBezier` control points, the Bernstein basis polynomials
  and `make_spline()`, a gently curved Bézier between two points.
- `spline`: `fit_spline(path, tanv1, tanv2, barriers)` fits piece-wise cubic
  Béziers to a polygonal path, splitting it where needed so that no curve
  crosses the barrier segments.

```python
from autog.geom.bezier import make_spline
from autog.geom.point import Point

curve = make_spline(Point(20, 10), Point(50, 20))
print(curve.to_points())
```

## What this package does not do

There is no function that lays out a whole graph: the package contains no
cycle breaking, layering, node ordering, coordinate assignment or edge
routing phases, and nothing here produces a `Layout` from a graph. It has
no command-line program. It supplies the graph model, option and result
types, monitoring, and the geometry that such phases build on.