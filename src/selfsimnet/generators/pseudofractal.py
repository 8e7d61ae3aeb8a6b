"""Pseudofractal scale-free networks and edge coronas of cliques.

Both families expand every edge present at the start of a round, old and
new alike, so the frontier is always the full cumulative edge list.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

import networkx as nx

from selfsimnet.core.builder import Edge, GraphBuilder
from selfsimnet.core.expand import expand
from selfsimnet.core.params import require_generation, require_int
from selfsimnet.invariants.closed_forms import corona_size, pseudo_ext_size
from selfsimnet.utils.naming import graph_name

from .base import admit, finish


def _attach_vertices(m: int):
    """Round rule: every edge (u, v) gains m new common neighbours."""

    def rule(builder: GraphBuilder, frontier: Sequence[Edge], _round: int) -> List[Edge]:
        for u, v in frontier:
            for _ in range(m):
                w = builder.allocate_vertex()
                builder.add_edge(u, w)
                builder.add_edge(v, w)
        return list(builder.edges)

    return rule


def _attach_cliques(q: int):
    """Round rule: every edge (u, v) is completed to a fresh (q+2)-clique."""

    def rule(builder: GraphBuilder, frontier: Sequence[Edge], _round: int) -> List[Edge]:
        for u, v in frontier:
            first = builder.allocate_block(q)
            fresh = list(range(first, first + q))
            for w in fresh:
                builder.add_edge(u, w)
                builder.add_edge(v, w)
            builder.add_clique(fresh)
        return list(builder.edges)

    return rule


def _pseudo_ext(
    m: int,
    g: int,
    name: str,
    max_vertices: Optional[int],
    max_edges: Optional[int],
) -> nx.Graph:
    size = pseudo_ext_size(m, g)
    admit(name, size, max_vertices, max_edges)

    builder = GraphBuilder(3)
    builder.add_triangle((1, 2, 3))
    expand(builder, list(builder.edges), _attach_vertices(m), g)
    return finish(name, builder, size)


def load_pseudofractal(
    g: int,
    *,
    max_vertices: Optional[int] = None,
    max_edges: Optional[int] = None,
) -> nx.Graph:
    """Pseudofractal network F_g.

    |V| = (3^(g+1) + 3) / 2 and |E| = 3^(g+1).
    Kemeny constant: 5/2 * 3^g - 5/3 * 2^g + 1/2.
    """
    require_generation(g)
    return _pseudo_ext(1, g, graph_name("Pseudofractal", g), max_vertices, max_edges)


def load_pseudo_ext(
    m: int,
    g: int,
    *,
    max_vertices: Optional[int] = None,
    max_edges: Optional[int] = None,
) -> nx.Graph:
    """Extended pseudofractal network F_{m,g}.

    Starting from a triangle, each round gives every existing edge m new
    vertices adjacent to both of its endpoints.

    |V| = 3((2m+1)^g + 1) / 2 and |E| = 3(2m+1)^g.
    """
    require_int("m", m, 1)
    require_generation(g)
    return _pseudo_ext(m, g, graph_name("PseudoExt", m, g), max_vertices, max_edges)


def load_corona(
    q: int,
    g: int,
    *,
    max_vertices: Optional[int] = None,
    max_edges: Optional[int] = None,
) -> nx.Graph:
    """Edge corona of (q+2)-cliques G_q(g).

    G_q(0) is the complete graph K_{q+2}. Each round, for every existing edge,
    q new vertices are added and joined to each other and to both endpoints,
    so the edge sits in a fresh (q+2)-clique.

    With a = (q+1)(q+2)/2: |E| = a^(g+1) and |V| = 2 a^(g+1)/(q+3) + (2q+4)/(q+3).
    """
    require_int("q", q, 0)
    require_generation(g)
    name = graph_name("Corona", q, g)
    size = corona_size(q, g)
    admit(name, size, max_vertices, max_edges)

    builder = GraphBuilder(q + 2)
    builder.add_clique(list(builder.vertices()))
    expand(builder, list(builder.edges), _attach_cliques(q), g)
    return finish(name, builder, size)
