from __future__ import annotations

from typing import Callable

import matplotlib.pyplot as plt
import networkx as nx

from .layouts import generations_with_layout


def draw_generations(
    loader: Callable[[int], nx.Graph],
    *,
    k: int,
    seed: int = 7,
    node_size: int = 60,
    edge_width: float = 0.8,
    max_nodes_to_draw: int = 600,
    save_prefix: str | None = None,
):
    """
    Draw generations 0..k of a self-similar family, one figure per
    generation, with vertices of earlier generations kept in place.

    If save_prefix is set, saves PNG files:
      {save_prefix}_g0.png, ..., {save_prefix}_gk.png

    Returns the (|V|, |E|) pair of every generation.
    """
    graphs, pos = generations_with_layout(loader, k, seed=seed)
    counts = [(G.number_of_nodes(), G.number_of_edges()) for G in graphs]

    for g, G in enumerate(graphs):
        fig, ax = plt.subplots(figsize=(7, 7))
        ax.set_title(f"{G.graph.get('name', f'g={g}')}   |V|={counts[g][0]}  |E|={counts[g][1]}")
        ax.set_axis_off()

        if G.number_of_nodes() <= max_nodes_to_draw:
            n_prev = graphs[g - 1].number_of_nodes() if g > 0 else 0
            colors = ["tab:gray" if v <= n_prev else "tab:red" for v in G.nodes()]
            nx.draw_networkx(
                G,
                pos=pos[g],
                ax=ax,
                with_labels=False,
                node_size=node_size,
                node_color=colors,
                width=edge_width,
            )
        else:
            ax.text(
                0.5,
                0.5,
                f"Too large to draw\n(|V|={G.number_of_nodes()})",
                ha="center",
                va="center",
                transform=ax.transAxes,
            )

        plt.tight_layout()

        if save_prefix:
            plt.savefig(f"{save_prefix}_g{g}.png", dpi=200)
            plt.close(fig)
        else:
            plt.show()

    return counts
