"""
Graph sampler: retention tiers, referential integrity and determinism.
"""
from hypothesis import given, settings, strategies as st
from hypothesis.strategies import composite

from conftest import make_edge, make_node
from fraudgraph.sampler import neighbor_ids, sample, sampling_summary


# =============================================================================
# STRATEGIES
# =============================================================================

@composite
def graphs(draw):
    """Random graphs with unique node ids; some edges name unknown accounts."""
    n = draw(st.integers(min_value=0, max_value=40))
    flags = draw(st.lists(st.booleans(), min_size=n, max_size=n))
    nodes = [make_node(f"N{i}", flagged=f) for i, f in enumerate(flags)]
    pool = [f"N{i}" for i in range(n)] + ["GHOST_1", "GHOST_2"]
    pairs = draw(st.lists(st.tuples(st.sampled_from(pool), st.sampled_from(pool)), max_size=80))
    edges = [make_edge(s, t) for s, t in pairs]
    budget = draw(st.integers(min_value=0, max_value=45))
    return nodes, edges, budget


def _ids(nodes):
    return [n.id for n in nodes]


# =============================================================================
# PROPERTIES
# =============================================================================

@settings(max_examples=200)
@given(graphs())
def test_flagged_nodes_always_kept(graph):
    nodes, edges, budget = graph
    kept = set(_ids(sample(nodes, edges, budget).nodes))
    assert {n.id for n in nodes if n.is_suspicious} <= kept


@settings(max_examples=200)
@given(graphs())
def test_counterparties_of_flagged_nodes_kept(graph):
    nodes, edges, budget = graph
    present = set(_ids(nodes))
    flagged = {n.id for n in nodes if n.is_suspicious}
    kept = set(_ids(sample(nodes, edges, budget).nodes))
    for e in edges:
        if e.source_id in flagged and e.target_id in present:
            assert e.target_id in kept
        if e.target_id in flagged and e.source_id in present:
            assert e.source_id in kept


@settings(max_examples=200)
@given(graphs())
def test_no_dangling_edges(graph):
    nodes, edges, budget = graph
    result = sample(nodes, edges, budget)
    kept = set(_ids(result.nodes))
    for e in result.edges:
        assert e.source_id in kept and e.target_id in kept


@settings(max_examples=200)
@given(graphs())
def test_budget_respected_unless_flagged_overflow(graph):
    nodes, edges, budget = graph
    result = sample(nodes, edges, budget)
    flagged = {n.id for n in nodes if n.is_suspicious}
    protected = (flagged | neighbor_ids(edges, flagged)) & set(_ids(nodes))
    assert len(result.nodes) <= max(budget, len(protected))


@given(graphs())
def test_sampling_is_deterministic(graph):
    nodes, edges, budget = graph
    first = sample(nodes, edges, budget)
    second = sample(nodes, edges, budget)
    assert _ids(first.nodes) == _ids(second.nodes)
    assert first.edges == second.edges


@given(graphs())
def test_output_keeps_input_order(graph):
    nodes, edges, budget = graph
    order = {node_id: i for i, node_id in enumerate(_ids(nodes))}
    positions = [order[n.id] for n in sample(nodes, edges, budget).nodes]
    assert positions == sorted(positions)


# =============================================================================
# SCENARIOS
# =============================================================================

def test_empty_graph():
    result = sample([], [], 300)
    assert result.nodes == []
    assert result.edges == []


def test_small_graph_is_returned_unchanged(small_graph):
    nodes, edges = small_graph
    result = sample(nodes, edges, 300)
    assert result.nodes == nodes
    assert result.edges == edges


def test_identity_drops_edges_to_unknown_accounts(small_graph):
    nodes, edges = small_graph
    result = sample(nodes, edges + [make_edge("ACC_A", "NOT_SUPPLIED")], 300)
    assert result.nodes == nodes
    assert result.edges == edges


def test_oversized_graph(oversized_graph):
    nodes, edges = oversized_graph
    result = sample(nodes, edges, 300)
    kept = _ids(result.nodes)

    assert len(kept) == 300
    assert {f"FLAG_{i:02d}" for i in range(10)} <= set(kept)
    assert {f"NB_{i:02d}" for i in range(10)} <= set(kept)
    fillers = [k for k in kept if k.startswith("FILL_")]
    assert fillers == [f"FILL_{i:03d}" for i in range(280)]

    pair_edges = [e for e in edges if not e.source_id.startswith("FILL_")]
    assert all(e in result.edges for e in pair_edges)
    for e in result.edges:
        assert e.source_id in kept and e.target_id in kept
    assert not any(e.target_id == "FILL_280" for e in result.edges)
    assert len(result.edges) == 10 + 279


def test_overflow_keeps_every_flagged_and_neighbour():
    hub = make_node("HUB", flagged=True)
    spokes = [make_node(f"SPOKE_{i}") for i in range(8)]
    others = [make_node(f"OTHER_{i}") for i in range(5)]
    edges = [make_edge("HUB", f"SPOKE_{i}") for i in range(8)]

    result = sample(others + spokes + [hub], edges, 4)

    assert set(_ids(result.nodes)) == {"HUB"} | {f"SPOKE_{i}" for i in range(8)}
    assert len(result.edges) == 8


def test_unknown_neighbour_does_not_consume_fill_slot():
    nodes = [make_node("F", flagged=True)] + [make_node(f"X{i}") for i in range(5)]
    edges = [make_edge("F", "NOT_SUPPLIED")]

    result = sample(nodes, edges, 3)

    assert _ids(result.nodes) == ["F", "X0", "X1"]
    assert result.edges == []


def test_neighbours_found_in_both_directions():
    edges = [make_edge("A", "B"), make_edge("C", "A"), make_edge("C", "D")]
    assert neighbor_ids(edges, {"A"}) == {"B", "C"}


def test_sampling_summary_counts_tiers(oversized_graph):
    nodes, edges = oversized_graph
    result = sample(nodes, edges, 300)
    summary = sampling_summary(nodes, edges, result, 300)

    assert summary.total_nodes == 500
    assert summary.displayed_nodes == 300
    assert summary.flagged_nodes == 10
    assert summary.neighbor_nodes == 10
    assert summary.fill_nodes == 280
    assert summary.sampled is True
    assert summary.over_budget is False
