from .pseudofractal import load_pseudofractal, load_pseudo_ext, load_corona
from .triangles import load_koch, load_apollo
from .cayley import load_cayley_tree, load_3_cayley_tree
from .hanoi import load_hanoi_ext

__all__ = [
    "load_pseudofractal",
    "load_pseudo_ext",
    "load_corona",
    "load_koch",
    "load_apollo",
    "load_cayley_tree",
    "load_3_cayley_tree",
    "load_hanoi_ext",
]
