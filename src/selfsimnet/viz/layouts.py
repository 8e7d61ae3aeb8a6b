from __future__ import annotations

from typing import Callable, List, Tuple

import networkx as nx
import numpy as np


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Choose a reasonable base layout:
      - planar_layout if planar
      - otherwise spring_layout
    """
    if G.number_of_nodes() > 2:
        is_planar, _ = nx.check_planarity(G)
        if is_planar:
            return nx.planar_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)


def layout_from_previous_generation(
    G_prev: nx.Graph,
    pos_prev: dict,
    G_next: nx.Graph,
    seed: int = 7,
    iterations: int = 150,
):
    """
    Keep the positions of vertices already present in G_prev, start each new
    vertex at the mean position of its already placed neighbours, then let a
    spring layout refine only the new vertices.

    New vertices are visited in ID order, so a vertex attached to another new
    vertex sees it placed first whenever the generator allocated it earlier.
    """
    rng = np.random.default_rng(seed)
    init = {v: np.asarray(p, dtype=float) for v, p in pos_prev.items() if v in G_next}
    for v in sorted(G_next.nodes()):
        if v in init:
            continue
        placed = [init[u] for u in G_next.neighbors(v) if u in init]
        center = np.mean(placed, axis=0) if placed else np.zeros(2)
        # siblings share a center; jitter so the spring forces can separate them
        init[v] = center + rng.normal(scale=0.02, size=2)

    fixed = [v for v in G_prev.nodes() if v in G_next]
    if len(fixed) == G_next.number_of_nodes():
        return init
    return nx.spring_layout(G_next, seed=seed, pos=init, fixed=fixed or None, iterations=iterations)


def generations_with_layout(
    loader: Callable[[int], nx.Graph],
    k: int,
    seed: int = 7,
) -> Tuple[List[nx.Graph], List[dict]]:
    """
    Returns:
      graphs[g] = loader(g)
      pos[g]    = layout for graphs[g], inherited from generation g - 1
    """
    graphs = [loader(0)]
    pos = [base_layout(graphs[0], seed=seed)]

    for g in range(1, k + 1):
        G_next = loader(g)
        pos.append(layout_from_previous_generation(graphs[-1], pos[-1], G_next, seed=seed))
        graphs.append(G_next)

    return graphs, pos
