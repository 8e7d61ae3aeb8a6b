from .closed_forms import (
    GraphSize,
    pseudo_ext_size,
    pseudofractal_size,
    corona_size,
    koch_size,
    cayley_tree_size,
    hanoi_ext_size,
    apollo_size,
    kemeny_pseudofractal,
    kemeny_corona,
    kemeny_koch,
    kemeny_3_cayley_tree,
    kemeny_apollo,
)
from .kemeny import transition_spectrum, kemeny_constant

__all__ = [
    "GraphSize",
    "pseudo_ext_size",
    "pseudofractal_size",
    "corona_size",
    "koch_size",
    "cayley_tree_size",
    "hanoi_ext_size",
    "apollo_size",
    "kemeny_pseudofractal",
    "kemeny_corona",
    "kemeny_koch",
    "kemeny_3_cayley_tree",
    "kemeny_apollo",
    "transition_spectrum",
    "kemeny_constant",
]
