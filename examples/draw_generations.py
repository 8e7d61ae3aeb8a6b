"""
Draw the first generations of a self-similar family with inherited layouts.

Vertices already present in generation g - 1 keep their positions; the
vertices added in generation g are drawn in red.

Usage:
    python draw_generations.py koch --k 3 --save-prefix koch
"""
from __future__ import annotations

import argparse

from selfsimnet.generators import (
    load_3_cayley_tree,
    load_apollo,
    load_hanoi_ext,
    load_koch,
    load_pseudofractal,
)
from selfsimnet.viz.draw import draw_generations

LOADERS = {
    "pseudofractal": load_pseudofractal,
    "koch": load_koch,
    "cayley": load_3_cayley_tree,
    "hanoi": load_hanoi_ext,
    "apollo": load_apollo,
}


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("family", choices=sorted(LOADERS))
    parser.add_argument("--k", type=int, default=3)
    parser.add_argument("--save-prefix", default=None)
    args = parser.parse_args()

    counts = draw_generations(LOADERS[args.family], k=args.k, save_prefix=args.save_prefix)
    for g, (n, m) in enumerate(counts):
        print(f"g={g}: |V|={n} |E|={m}")


if __name__ == "__main__":
    main()
