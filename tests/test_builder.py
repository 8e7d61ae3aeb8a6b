"""Tests for selfsimnet.core (builder, driver, container)."""
import networkx as nx
import pytest

from selfsimnet.core.builder import DEFAULT_WEIGHT, GraphBuilder, canonical_pair
from selfsimnet.core.container import construct, from_edge_stream
from selfsimnet.core.expand import expand


# --- canonical pairs ---

def test_canonical_pair_orders():
    assert canonical_pair(3, 1) == (1, 3)
    assert canonical_pair(1, 3) == (1, 3)


def test_canonical_pair_rejects_self_loop():
    with pytest.raises(ValueError):
        canonical_pair(2, 2)


# --- builder ---

def test_allocate_vertex_is_dense():
    b = GraphBuilder()
    assert [b.allocate_vertex() for _ in range(4)] == [1, 2, 3, 4]
    assert b.vertex_count == 4
    assert list(b.vertices()) == [1, 2, 3, 4]


def test_allocate_block_returns_first_id():
    b = GraphBuilder(3)
    assert b.allocate_block(5) == 4
    assert b.vertex_count == 8
    assert b.allocate_block(0) == 9
    assert b.vertex_count == 8


def test_add_edge_canonicalizes_and_collapses():
    b = GraphBuilder(3)
    b.add_edge(3, 1)
    b.add_edge(1, 3)
    assert b.edges == {(1, 3): DEFAULT_WEIGHT}
    assert b.number_of_edges() == 1


def test_add_edge_rejects_conflicting_weight():
    b = GraphBuilder(2)
    b.add_edge(1, 2)
    with pytest.raises(ValueError):
        b.add_edge(2, 1, weight=5)


def test_add_edge_rejects_unallocated_vertex():
    b = GraphBuilder(2)
    with pytest.raises(ValueError):
        b.add_edge(1, 3)


def test_add_clique_k4():
    b = GraphBuilder(4)
    b.add_clique([1, 2, 3, 4])
    assert b.number_of_edges() == 6
    assert all(u < v for u, v in b.edges)


# --- driver ---

def test_expand_passes_round_index_and_frontier():
    seen = []

    def rule(builder, frontier, i):
        seen.append((i, list(frontier)))
        v = builder.allocate_vertex()
        builder.add_edge(frontier[-1], v)
        return [*frontier, v]

    b = GraphBuilder(1)
    out = expand(b, [1], rule, 3)
    assert out == [1, 2, 3, 4]
    assert [i for i, _ in seen] == [1, 2, 3]
    assert b.number_of_edges() == 3


def test_expand_zero_rounds_is_identity():
    b = GraphBuilder(3)
    out = expand(b, ["x"], lambda *_: pytest.fail("rule must not run"), 0)
    assert out == ["x"]


# --- container ---

def test_construct_sets_name_nodes_and_weights():
    G = construct("Tri", {3, 1, 2}, {(1, 2): 1, (1, 3): 1, (2, 3): 1})
    assert G.graph["name"] == "Tri"
    assert list(G.nodes()) == [1, 2, 3]
    assert nx.get_edge_attributes(G, "weight") == {(1, 2): 1, (1, 3): 1, (2, 3): 1}


def test_construct_keeps_isolated_vertices():
    G = construct("K1", {1}, {})
    assert G.number_of_nodes() == 1
    assert G.number_of_edges() == 0


def test_from_edge_stream_drops_self_loops_and_duplicates():
    G = from_edge_stream("s", iter([(1, 2), (2, 1), (3, 3), (2, 4)]))
    assert G.number_of_edges() == 2
    assert nx.number_of_selfloops(G) == 0
    assert all(w == DEFAULT_WEIGHT for _, _, w in G.edges(data="weight"))
