"""
layout.py – Node placement via networkx's spring (Fruchterman-Reingold) layout.

The view only depends on the contract

    compute_layout(nodes, edges, config) -> {node_id: (x, y)}

so any placement routine with the same signature can replace this one.
"""
from __future__ import annotations

import logging
import math
import statistics
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import networkx as nx

from .config import (
    LAYOUT_IDEAL_EDGE_LENGTH, LAYOUT_ITERATIONS, LAYOUT_PADDING,
    LAYOUT_LABEL_CHAR_PX,
)
from .models import AccountNode, TransferEdge

log = logging.getLogger(__name__)

Positions = Dict[str, Tuple[float, float]]


@dataclass(frozen=True)
class LayoutConfig:
    name: str = "spring"
    ideal_edge_length: float = LAYOUT_IDEAL_EDGE_LENGTH
    iterations: int = LAYOUT_ITERATIONS
    padding: float = LAYOUT_PADDING
    node_dimensions_include_labels: bool = True
    randomize: bool = True
    # Only consulted when randomize is False.
    seed: Optional[int] = 42
    animate: bool = False

    def as_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "idealEdgeLength": self.ideal_edge_length,
            "iterations": self.iterations,
            "padding": self.padding,
            "nodeDimensionsIncludeLabels": self.node_dimensions_include_labels,
            "randomize": self.randomize,
            "animate": self.animate,
        }


def _spacing(nodes: Sequence[AccountNode], config: LayoutConfig) -> float:
    """Target edge length in pixels, widened by the longest label when labels count."""
    if not config.node_dimensions_include_labels or not nodes:
        return config.ideal_edge_length
    longest = max(len(n.id) for n in nodes)
    return config.ideal_edge_length + longest * LAYOUT_LABEL_CHAR_PX / 2


def compute_layout(
    nodes: Sequence[AccountNode],
    edges: Sequence[TransferEdge],
    config: LayoutConfig = LayoutConfig(),
) -> Positions:
    """
    Place nodes on an undirected spring model and scale the result to pixels.

    Positions are shifted so the top-left node sits ``config.padding`` pixels
    from the origin. Edge direction is ignored for placement.
    """
    if not nodes:
        return {}

    G = nx.Graph()
    G.add_nodes_from(n.id for n in nodes)
    G.add_edges_from(
        (e.source_id, e.target_id) for e in edges
        if e.source_id in G and e.target_id in G
    )

    raw = nx.spring_layout(
        G,
        iterations=config.iterations,
        seed=None if config.randomize else config.seed,
    )

    spacing = _spacing(nodes, config)
    lengths = [
        math.dist(raw[u], raw[v]) for u, v in G.edges() if u != v
    ]
    typical = statistics.median(lengths) if lengths else 0.0
    if typical > 0:
        factor = spacing / typical
    else:
        factor = spacing * math.sqrt(len(nodes)) / 2

    min_x = min(float(p[0]) for p in raw.values())
    min_y = min(float(p[1]) for p in raw.values())
    positions: Positions = {
        node: (
            round((float(p[0]) - min_x) * factor + config.padding, 2),
            round((float(p[1]) - min_y) * factor + config.padding, 2),
        )
        for node, p in raw.items()
    }

    log.debug("Layout computed for %d nodes (spacing %.1fpx)", len(positions), spacing)
    return positions
