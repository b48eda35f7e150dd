"""
sampler.py – Reduce an account graph to a node budget without hiding risk.

Retention policy (priority order)
---------------------------------
1. Must-keep   – every account with is_suspicious = True
2. Neighbors   – the other endpoint of every edge touching a must-keep
                 account, in either direction (one hop, computed once from
                 the full edge list)
3. Fill        – remaining slots taken from the other accounts in input order

Flagged accounts and their counterparties always win over the budget: if
tiers 1 + 2 alone exceed it, fill contributes nothing and the result is
larger than the budget.

Edges survive only when both endpoints survive, so the renderer never gets a
dangling edge. No randomness: the same input order always yields the same
output.
"""
from __future__ import annotations

import logging
from typing import Dict, List, NamedTuple, Sequence, Set

from .models import AccountNode, SamplingSummary, TransferEdge

log = logging.getLogger(__name__)


class SampledGraph(NamedTuple):
    nodes: List[AccountNode]
    edges: List[TransferEdge]


def _connected_edges(edges: Sequence[TransferEdge], ids: Set[str]) -> List[TransferEdge]:
    return [e for e in edges if e.source_id in ids and e.target_id in ids]


def flagged_ids(nodes: Sequence[AccountNode]) -> Set[str]:
    return {n.id for n in nodes if n.is_suspicious}


def neighbor_ids(edges: Sequence[TransferEdge], must_keep: Set[str]) -> Set[str]:
    """One-hop counterparties of the must-keep accounts, both directions."""
    neighbors: Set[str] = set()
    for e in edges:
        if e.source_id in must_keep:
            neighbors.add(e.target_id)
        if e.target_id in must_keep:
            neighbors.add(e.source_id)
    return neighbors - must_keep


def sample(
    nodes: Sequence[AccountNode],
    edges: Sequence[TransferEdge],
    budget: int,
) -> SampledGraph:
    """
    Select at most ``budget`` nodes (plus any flagged / neighbor overflow)
    and the edges between them.

    Output nodes keep their input order. When the input already fits the
    budget it is returned as-is; edges pointing at accounts missing from
    ``nodes`` are still dropped.
    """
    if len(nodes) <= budget:
        all_ids = {n.id for n in nodes}
        return SampledGraph(list(nodes), _connected_edges(edges, all_ids))

    must_keep = flagged_ids(nodes)
    keep_ids = must_keep | neighbor_ids(edges, must_keep)

    # Only ids backed by a node record occupy a slot; edges may name
    # accounts the caller never supplied.
    present = sum(1 for n in nodes if n.id in keep_ids)
    slots = max(budget - present, 0)
    if slots:
        for n in nodes:
            if n.id in keep_ids:
                continue
            keep_ids.add(n.id)
            slots -= 1
            if slots == 0:
                break

    kept_nodes = [n for n in nodes if n.id in keep_ids]
    kept_node_ids = {n.id for n in kept_nodes}
    kept_edges = _connected_edges(edges, kept_node_ids)

    log.info(
        "Graph sampled: %d → %d nodes, %d → %d edges (budget %d)",
        len(nodes), len(kept_nodes), len(edges), len(kept_edges), budget,
    )
    return SampledGraph(kept_nodes, kept_edges)


def sampling_summary(
    nodes: Sequence[AccountNode],
    edges: Sequence[TransferEdge],
    sampled: SampledGraph,
    budget: int,
) -> SamplingSummary:
    """Describe where each displayed node came from."""
    must_keep = flagged_ids(nodes)
    neighbors = neighbor_ids(edges, must_keep)
    counts: Dict[str, int] = {"flagged": 0, "neighbor": 0, "fill": 0}
    for n in sampled.nodes:
        if n.id in must_keep:
            counts["flagged"] += 1
        elif n.id in neighbors:
            counts["neighbor"] += 1
        else:
            counts["fill"] += 1

    return SamplingSummary(
        total_nodes=len(nodes),
        total_edges=len(edges),
        displayed_nodes=len(sampled.nodes),
        displayed_edges=len(sampled.edges),
        flagged_nodes=counts["flagged"],
        neighbor_nodes=counts["neighbor"],
        fill_nodes=counts["fill"],
        budget=budget,
        sampled=len(nodes) > budget,
        over_budget=len(sampled.nodes) > budget,
    )
