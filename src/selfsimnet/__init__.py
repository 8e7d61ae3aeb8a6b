"""
selfsimnet: deterministic self-similar network generators (pseudofractal,
edge corona, Koch, Cayley tree, extended Hanoi, Apollonian) with their
closed-form sizes and Kemeny constants, plus KONECT/SNAP dataset loaders.
"""

from .errors import SelfSimNetError, InvalidParameterError, GraphTooLargeError, FetchError
from .core.builder import DEFAULT_WEIGHT, GraphBuilder, canonical_pair
from .core.container import construct, from_edge_stream

# Generators
from .generators import (
    load_pseudofractal,
    load_pseudo_ext,
    load_corona,
    load_koch,
    load_apollo,
    load_cayley_tree,
    load_3_cayley_tree,
    load_hanoi_ext,
)

# Closed forms and spectral checks
from .invariants import GraphSize, kemeny_constant

# Real-world datasets
from .datasets import load_undi_konect, load_undi_snap

from .viz.draw import draw_generations

__all__ = [
    # Errors
    "SelfSimNetError",
    "InvalidParameterError",
    "GraphTooLargeError",
    "FetchError",
    # Core
    "DEFAULT_WEIGHT",
    "GraphBuilder",
    "canonical_pair",
    "construct",
    "from_edge_stream",
    # Generators
    "load_pseudofractal",
    "load_pseudo_ext",
    "load_corona",
    "load_koch",
    "load_apollo",
    "load_cayley_tree",
    "load_3_cayley_tree",
    "load_hanoi_ext",
    # Invariants
    "GraphSize",
    "kemeny_constant",
    # Datasets
    "load_undi_konect",
    "load_undi_snap",
    # Viz
    "draw_generations",
]
