from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from selfsimnet.core.builder import DEFAULT_WEIGHT


@dataclass(frozen=True)
class StructureReport:
    """
    Structural sanity checks for a generated graph.

    contiguous:  node set is exactly {1..|V|}
    canonical:   no self-loops (networkx already collapses duplicate pairs)
    unit_weight: every edge carries weight DEFAULT_WEIGHT
    connected:   single component (a one-vertex graph counts as connected)
    """

    vertices: int
    edges: int
    contiguous: bool
    canonical: bool
    unit_weight: bool
    connected: bool

    @property
    def ok(self) -> bool:
        return self.contiguous and self.canonical and self.unit_weight and self.connected


def structure_report(G: nx.Graph) -> StructureReport:
    n = G.number_of_nodes()
    return StructureReport(
        vertices=n,
        edges=G.number_of_edges(),
        contiguous=set(G.nodes()) == set(range(1, n + 1)),
        canonical=nx.number_of_selfloops(G) == 0,
        unit_weight=all(w == DEFAULT_WEIGHT for _, _, w in G.edges(data="weight")),
        connected=n <= 1 or nx.is_connected(G),
    )


def is_prefix_subgraph(G: nx.Graph, H: nx.Graph) -> bool:
    """
    True iff the subgraph of G induced by vertices 1..|V(H)| equals H,
    with the identity vertex mapping.
    """
    n = H.number_of_nodes()
    if set(H.nodes()) != set(range(1, n + 1)):
        return False
    sub = G.subgraph(range(1, n + 1))
    if sub.number_of_nodes() != n:
        return False
    ours = {(min(u, v), max(u, v)) for u, v in sub.edges()}
    theirs = {(min(u, v), max(u, v)) for u, v in H.edges()}
    return ours == theirs
