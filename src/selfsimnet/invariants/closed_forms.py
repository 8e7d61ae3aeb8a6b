"""Closed-form sizes and Kemeny constants of the self-similar families.

Sizes are exact integers. Kemeny constants are exact Fractions in the
convention K = sum_{i>=2} 1 / (1 - lambda_i), lambda_i ranging over the
non-unit eigenvalues of the random-walk transition matrix.
"""
from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from selfsimnet.core.params import require_generation, require_int


@dataclass(frozen=True)
class GraphSize:
    vertices: int
    edges: int


# ---------------------------------------------------------------------------
# Vertex / edge counts
# ---------------------------------------------------------------------------

def pseudo_ext_size(m: int, g: int) -> GraphSize:
    """|V| = 3((2m+1)^g + 1)/2, |E| = 3(2m+1)^g."""
    require_int("m", m, 1)
    require_generation(g)
    p = (2 * m + 1) ** g
    return GraphSize(vertices=3 * (p + 1) // 2, edges=3 * p)


def pseudofractal_size(g: int) -> GraphSize:
    return pseudo_ext_size(1, g)


def corona_size(q: int, g: int) -> GraphSize:
    """|E| = a^(g+1), |V| = (2 a^(g+1) + 2q + 4) / (q + 3), a = (q+1)(q+2)/2."""
    require_int("q", q, 0)
    require_generation(g)
    e = ((q + 1) * (q + 2) // 2) ** (g + 1)
    return GraphSize(vertices=(2 * e + 2 * q + 4) // (q + 3), edges=e)


def koch_size(g: int) -> GraphSize:
    require_generation(g)
    return GraphSize(vertices=2 * 4**g + 1, edges=3 * 4**g)


def cayley_tree_size(b: int, g: int) -> GraphSize:
    """Lone root at g = 0; |V| = 1 + b((b-1)^g - 1)/(b-2), or 1 + 2g for b = 2."""
    require_int("b", b, 2)
    require_generation(g)
    if b == 2:
        n = 1 + 2 * g
    else:
        n = 1 + b * ((b - 1) ** g - 1) // (b - 2)
    return GraphSize(vertices=n, edges=n - 1)


def hanoi_ext_size(g: int) -> GraphSize:
    """|V| = 4*3^(g-1), |E| = 2*3^g for g >= 1; g = 0 is the base triangle."""
    require_generation(g)
    if g == 0:
        return GraphSize(vertices=3, edges=3)
    return GraphSize(vertices=4 * 3 ** (g - 1), edges=2 * 3**g)


def apollo_size(g: int) -> GraphSize:
    require_generation(g)
    return GraphSize(vertices=2 * 3**g + 2, edges=6 * 3**g)


# ---------------------------------------------------------------------------
# Kemeny constants
# ---------------------------------------------------------------------------

def kemeny_pseudofractal(g: int) -> Fraction:
    """K(F_g) = 5/2 * 3^g - 5/3 * 2^g + 1/2."""
    require_generation(g)
    return Fraction(5, 2) * 3**g - Fraction(5, 3) * 2**g + Fraction(1, 2)


def kemeny_corona(q: int, g: int) -> Fraction:
    require_int("q", q, 0)
    require_generation(g)
    a = Fraction((q + 1) * (q + 2), 2)
    return (
        (Fraction((q + 1) ** 2, q + 2) - Fraction(3 * q + 3, 2)) * (q + 1) ** g
        + Fraction((q + 1) * (3 * q + 7), 2 * q + 6) * a**g
        + Fraction(q + 1, q + 3)
    )


def kemeny_koch(g: int) -> Fraction:
    """K(M_g) = (1 + 2g) 4^g + 1/3."""
    require_generation(g)
    return (1 + 2 * g) * Fraction(4) ** g + Fraction(1, 3)


def kemeny_3_cayley_tree(g: int) -> Fraction:
    """Defined for g >= 1; C_{3,0} is a single vertex."""
    require_int("g", g, 1)
    num = 3 * g * 4 ** (g + 1) - 13 * 2 ** (2 * g + 1) + 35 * 2**g - 9
    return Fraction(num, 2 * (2**g - 1))


def kemeny_apollo(g: int) -> Fraction:
    """K(A_g) = (32 * 3^g - 16 (9/5)^g + 11) / 12."""
    require_generation(g)
    return (32 * Fraction(3) ** g - 16 * Fraction(9, 5) ** g + 11) / 12
