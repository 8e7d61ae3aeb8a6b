"""Numerical Kemeny constant, for checking generated graphs against closed forms."""
from __future__ import annotations

import networkx as nx
import numpy as np


def transition_spectrum(G: nx.Graph, weight: str = "weight") -> np.ndarray:
    """
    Eigenvalues of the random-walk transition matrix D^-1 A, in descending order.

    Computed through the symmetric matrix D^-1/2 A D^-1/2, which has the same
    spectrum. G must be connected with at least one edge.
    """
    if G.number_of_nodes() < 2 or not nx.is_connected(G):
        raise ValueError("transition spectrum requires a connected graph with at least two vertices")
    nodes = sorted(G.nodes())
    A = nx.to_numpy_array(G, nodelist=nodes, weight=weight, dtype=float)
    d = A.sum(axis=1)
    inv_sqrt = 1.0 / np.sqrt(d)
    S = A * inv_sqrt[:, None] * inv_sqrt[None, :]
    return np.sort(np.linalg.eigvalsh(S))[::-1]


def kemeny_constant(G: nx.Graph, weight: str = "weight") -> float:
    """K(G) = sum over non-unit transition eigenvalues of 1 / (1 - lambda)."""
    lam = transition_spectrum(G, weight=weight)
    return float(np.sum(1.0 / (1.0 - lam[1:])))
