from .layouts import base_layout, layout_from_previous_generation, generations_with_layout
from .draw import draw_generations

__all__ = [
    "base_layout",
    "layout_from_previous_generation",
    "generations_with_layout",
    "draw_generations",
]
