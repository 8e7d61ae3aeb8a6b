"""Triangle-based constructions: the Koch network and the Apollonian network."""
from __future__ import annotations

from typing import List, Optional, Sequence

import networkx as nx

from selfsimnet.core.builder import GraphBuilder, Triangle
from selfsimnet.core.expand import expand
from selfsimnet.core.params import require_generation
from selfsimnet.invariants.closed_forms import apollo_size, koch_size
from selfsimnet.utils.naming import graph_name

from .base import admit, finish


def _koch_round(builder: GraphBuilder, frontier: Sequence[Triangle], _round: int) -> List[Triangle]:
    # every triangle generated so far sprouts one triangle per corner
    spawned: List[Triangle] = []
    for triangle in frontier:
        for u in triangle:
            t = (u, builder.allocate_vertex(), builder.allocate_vertex())
            builder.add_triangle(t)
            spawned.append(t)
    return [*frontier, *spawned]


def _apollo_round(builder: GraphBuilder, frontier: Sequence[Triangle], _round: int) -> List[Triangle]:
    # each face is split into three by a new interior vertex
    faces: List[Triangle] = []
    for x, y, z in frontier:
        w = builder.allocate_vertex()
        builder.add_edge(x, w)
        builder.add_edge(y, w)
        builder.add_edge(z, w)
        faces.extend([(x, y, w), (x, z, w), (y, z, w)])
    return faces


def load_koch(
    g: int,
    *,
    max_vertices: Optional[int] = None,
    max_edges: Optional[int] = None,
) -> nx.Graph:
    """Koch network M_g.

    M_0 is a triangle. In each round, for every triangle present and for
    each of its three vertices, a new triangle is attached at that vertex
    using two new vertices.

    |V| = 2 * 4^g + 1 and |E| = 3 * 4^g.
    Kemeny constant: (1 + 2g) * 4^g + 1/3.
    """
    require_generation(g)
    name = graph_name("Koch", g)
    size = koch_size(g)
    admit(name, size, max_vertices, max_edges)

    builder = GraphBuilder(3)
    base: Triangle = (1, 2, 3)
    builder.add_triangle(base)
    expand(builder, [base], _koch_round, g)
    return finish(name, builder, size)


def load_apollo(
    g: int,
    *,
    max_vertices: Optional[int] = None,
    max_edges: Optional[int] = None,
) -> nx.Graph:
    """Apollonian network A_g.

    A_0 is K_4, viewed as four triangular faces. In each round, every face
    created in the previous round receives a new vertex joined to its three
    corners.

    |V| = 2 * 3^g + 2 and |E| = 6 * 3^g.
    """
    require_generation(g)
    name = graph_name("Apollo", g)
    size = apollo_size(g)
    admit(name, size, max_vertices, max_edges)

    builder = GraphBuilder(4)
    builder.add_clique([1, 2, 3, 4])
    faces: List[Triangle] = [(1, 2, 3), (1, 2, 4), (1, 3, 4), (2, 3, 4)]
    expand(builder, faces, _apollo_round, g)
    return finish(name, builder, size)
