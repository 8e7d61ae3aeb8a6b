"""Conversion of finished constructions into networkx graphs."""
from __future__ import annotations

from typing import Iterable, Mapping, Tuple

import networkx as nx

from selfsimnet.core.builder import DEFAULT_WEIGHT, Edge, GraphBuilder


def construct(name: str, vertices: Iterable[int], edges: Mapping[Edge, int]) -> nx.Graph:
    """
    Build a weighted undirected networkx Graph from a vertex set and an
    edge -> weight mapping. Nodes are inserted in ascending order.
    """
    G = nx.Graph(name=name)
    G.add_nodes_from(sorted(vertices))
    G.add_edges_from((u, v, {"weight": w}) for (u, v), w in edges.items())
    return G


def from_builder(name: str, builder: GraphBuilder) -> nx.Graph:
    return construct(name, builder.vertices(), builder.edges)


def from_edge_stream(
    name: str,
    pairs: Iterable[Tuple[int, int]],
    default_weight: int = DEFAULT_WEIGHT,
) -> nx.Graph:
    """
    Build a graph from a stream of (u, v) pairs, each edge weighted
    *default_weight*. Self-loops are dropped; repeated pairs collapse.
    """
    G = nx.Graph(name=name)
    for u, v in pairs:
        if u == v:
            continue
        G.add_edge(u, v, weight=default_weight)
    return G
