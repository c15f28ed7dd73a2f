"""Parameters and options used by the layout algorithms."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from autog.graph.elements import Node


class NsBalance(IntEnum):
    """Balancing strategy of the network simplex solver."""

    # vertical balancing, used by the network simplex layerer
    V = 1
    # horizontal balancing, used by the network simplex positioner
    H = 2


@dataclass
class Params:
    """Options that the layout algorithms read but that aren't part of the graph."""

    # Sets the same width and height on all non-virtual nodes.
    node_fixed_size_func: Callable[[Node], None] | None = None
    # Sets a width and height on individual non-virtual nodes.
    node_size_func: Callable[[Node], None] | None = None

    # When true, the greedy cycle breaker picks the next maximum outflow
    # node at random and behaves non-deterministically.
    greedy_cycle_breaker_random_node_choice: bool = False

    # Factor used to determine the maximum number of iterations.
    network_simplex_thoroughness: int = 28
    # If positive, multiplies the thoroughness to give the maximum number
    # of iterations; otherwise ignored.
    network_simplex_max_iter_factor: int = 0
    # Balancing strategy that moves nodes to less crowded layers.
    network_simplex_balance: NsBalance = NsBalance.V

    # Size of virtual nodes (NxN); zero treats them as points.
    virtual_node_fixed_size: float = 0.0
    # Maximum number of iterations of the weighted median orderer.
    wmedian_max_iter: int = 24

    # Spacing between layers (above and below).
    layer_spacing: float = 150.0
    # Space between nodes (above and below).
    node_vertical_spacing: float = 1.0
    # Spacing between nodes (left and right).
    node_spacing: float = 60.0
    # Weight factor for edges in the network simplex positioner.
    network_simplex_auxiliary_graph_weight_factor: int = 4
    # One of the four Brandes-Koepf layouts: 0 bottom-right, 1 bottom-left,
    # 2 top-right, 3 top-left. Any other value selects the balanced layout.
    brandes_koepf_layout: int = -1