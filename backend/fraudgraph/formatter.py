"""
formatter.py – Produce the graph view API response.

JSON contract
-------------
{
  "graph":   {nodes: [{id, total_sent, total_received, suspicion_score,
                       is_suspicious, x, y, ...}],
              edges: [{source, target, amount, count}]},
  "style":   [{selector, style}, ...],
  "layout":  {name, idealEdgeLength, ...},
  "zoom":    {min, max, wheel_sensitivity},
  "tooltip": {visible, markup, left, top, style},  // null when unmounted
  "summary": {total_nodes, total_edges, displayed_nodes, displayed_edges,
              flagged_nodes, neighbor_nodes, fill_nodes, budget, sampled,
              over_budget, processing_time_seconds,
              network_statistics: {graph_density, connected_components, avg_degree}}
}
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

import networkx as nx

from .models import AccountNode, GraphViewResponse, TransferEdge
from .sampler import SampledGraph, sampling_summary
from .view import GraphViewController

log = logging.getLogger(__name__)


def _network_statistics(sampled: SampledGraph) -> Dict[str, Any]:
    """Shape of the displayed subgraph, for the legend under the view."""
    G = nx.DiGraph()
    G.add_nodes_from(n.id for n in sampled.nodes)
    G.add_edges_from((e.source_id, e.target_id) for e in sampled.edges)
    n_nodes = G.number_of_nodes()
    if n_nodes == 0:
        return {"graph_density": 0.0, "connected_components": 0, "avg_degree": 0.0}
    return {
        "graph_density": round(nx.density(G), 6),
        "connected_components": nx.number_weakly_connected_components(G),
        "avg_degree": round((2 * G.number_of_edges()) / n_nodes, 2),
    }


def format_view(
    controller: GraphViewController,
    nodes: Sequence[AccountNode],
    edges: Sequence[TransferEdge],
    processing_time: float,
) -> Dict[str, Any]:
    """
    Build the response for the controller's current surface.

    Parameters
    ----------
    controller      : controller after update(nodes, edges)
    nodes, edges    : the full, unsampled input
    processing_time : elapsed wall-clock seconds
    """
    snapshot = controller.snapshot()
    sampled = controller.sampled or SampledGraph([], [])

    summary = sampling_summary(nodes, edges, sampled, controller.budget).model_dump()
    summary["processing_time_seconds"] = round(processing_time, 3)
    summary["network_statistics"] = _network_statistics(sampled)

    response = GraphViewResponse(
        graph={"nodes": snapshot["nodes"], "edges": snapshot["edges"]},
        style=snapshot["style"],
        layout=controller.layout_config.as_dict(),
        zoom=snapshot["zoom"],
        summary=summary,
        tooltip=snapshot["tooltip"],
    ).model_dump()

    log.info(
        "View formatted: %d/%d nodes displayed (%d flagged)",
        summary["displayed_nodes"], summary["total_nodes"], summary["flagged_nodes"],
    )
    return response
