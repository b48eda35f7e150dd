"""
Shared pytest fixtures for the graph view tests.
"""
import pytest

from fraudgraph.models import AccountNode, TransferEdge


def make_node(node_id, flagged=False, score=None, sent=0.0, received=0.0):
    if score is None:
        score = 85.0 if flagged else 10.0
    return AccountNode(
        id=node_id,
        total_sent=sent,
        total_received=received,
        suspicion_score=score,
        is_suspicious=flagged,
    )


def make_edge(source, target, amount=100.0, count=1):
    return TransferEdge(source=source, target=target, amount=amount, count=count)


@pytest.fixture
def small_graph():
    """5 accounts (1 flagged) and 4 transfers."""
    nodes = [
        make_node("ACC_A", flagged=True),
        make_node("ACC_B"),
        make_node("ACC_C"),
        make_node("ACC_D"),
        make_node("ACC_E"),
    ]
    edges = [
        make_edge("ACC_A", "ACC_B"),
        make_edge("ACC_B", "ACC_C"),
        make_edge("ACC_D", "ACC_A"),
        make_edge("ACC_C", "ACC_E"),
    ]
    return nodes, edges


@pytest.fixture
def oversized_graph():
    """
    500 accounts: FLAG_00..FLAG_09 are flagged, each paired with exactly one
    unique neighbour NB_00..NB_09; FILL_000..FILL_479 are unrelated filler
    chained together by transfers.
    """
    flagged = [make_node(f"FLAG_{i:02d}", flagged=True) for i in range(10)]
    neighbours = [make_node(f"NB_{i:02d}") for i in range(10)]
    fillers = [make_node(f"FILL_{i:03d}") for i in range(480)]
    # Fillers first so the tiered policy, not input order, has to rescue the
    # flagged accounts and neighbours.
    nodes = fillers + flagged + neighbours
    edges = [make_edge(f"FLAG_{i:02d}", f"NB_{i:02d}", amount=5000.0) for i in range(0, 10, 2)]
    edges += [make_edge(f"NB_{i:02d}", f"FLAG_{i:02d}", amount=5000.0) for i in range(1, 10, 2)]
    edges += [make_edge(f"FILL_{i:03d}", f"FILL_{i + 1:03d}") for i in range(479)]
    return nodes, edges
