"""
Build small generations of every family and compare them with the closed forms.

For each family and g = 0..g_max print:
  - |V| and |E| of the generated graph against the closed form
  - the numerically computed Kemeny constant against its closed form,
    where one is known
"""
from __future__ import annotations

import argparse
import logging

from selfsimnet.generators import (
    load_3_cayley_tree,
    load_apollo,
    load_corona,
    load_hanoi_ext,
    load_koch,
    load_pseudo_ext,
    load_pseudofractal,
)
from selfsimnet.invariants import closed_forms as cf
from selfsimnet.invariants.kemeny import kemeny_constant

FAMILIES = [
    ("Pseudofractal", load_pseudofractal, cf.pseudofractal_size, cf.kemeny_pseudofractal),
    ("PseudoExt m=2", lambda g: load_pseudo_ext(2, g), lambda g: cf.pseudo_ext_size(2, g), None),
    ("Corona q=2", lambda g: load_corona(2, g), lambda g: cf.corona_size(2, g), lambda g: cf.kemeny_corona(2, g)),
    ("Koch", load_koch, cf.koch_size, cf.kemeny_koch),
    ("3-Cayley", load_3_cayley_tree, lambda g: cf.cayley_tree_size(3, g),
     lambda g: cf.kemeny_3_cayley_tree(g) if g >= 1 else None),
    ("HanoiExt", load_hanoi_ext, cf.hanoi_ext_size, None),
    ("Apollo", load_apollo, cf.apollo_size, cf.kemeny_apollo),
]


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--g-max", type=int, default=3)
    parser.add_argument("--kemeny-max-nodes", type=int, default=2000,
                        help="skip the dense eigendecomposition above this size")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    for label, loader, size_fn, kemeny_fn in FAMILIES:
        print(f"{'=' * 70}")
        print(label)
        print(f"{'=' * 70}")
        for g in range(args.g_max + 1):
            G = loader(g)
            size = size_fn(g)
            ok = (G.number_of_nodes(), G.number_of_edges()) == (size.vertices, size.edges)
            line = (f"  g={g}: |V|={G.number_of_nodes():>7} |E|={G.number_of_edges():>7}"
                    f"  closed form {'OK' if ok else 'MISMATCH'}")
            expected = kemeny_fn(g) if kemeny_fn is not None else None
            if expected is not None and 1 < G.number_of_nodes() <= args.kemeny_max_nodes:
                got = kemeny_constant(G)
                line += f"  K={got:.6f} (closed form {float(expected):.6f})"
            print(line)


if __name__ == "__main__":
    main()
