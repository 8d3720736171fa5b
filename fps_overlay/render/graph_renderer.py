"""
Graph renderer.

Draws the overlay history as a polyline with the latest value as a label.
"""

import math
from typing import Tuple

from fps_overlay.core.ring_buffer import RingBuffer
from fps_overlay.render.surface import DrawingSurface

# Value drawn at 80% of the surface height; no clamping above or below
REFERENCE_CEILING = 60
GRAPH_HEIGHT_RATIO = 0.8
LABEL_BOTTOM_MARGIN = 10

BACKGROUND = "white"
FOREGROUND = "black"


class GraphRenderer:
    """Renders a :class:`RingBuffer` onto a drawing surface.

    Args:
        surface: Target surface; its size is fixed for the renderer's life.
        graph_capacity: Number of points the x axis is divided into.
    """

    def __init__(self, surface: DrawingSurface, graph_capacity: int) -> None:
        self._surface = surface
        self._width = surface.width
        self._height = surface.height
        self._kx = surface.width / graph_capacity

        surface.set_stroke_style(FOREGROUND)
        surface.set_fill_style(FOREGROUND)
        surface.set_line_width(1)
        surface.set_font(math.floor(self._height / 3.5), bold=True)

    @property
    def surface(self) -> DrawingSurface:
        return self._surface

    def point_for(self, index: int, value: float) -> Tuple[float, float]:
        """Return the surface coordinates of sample *index* with *value*."""
        x = index * self._kx
        y = self._height - (value / REFERENCE_CEILING) * self._height * GRAPH_HEIGHT_RATIO
        return x, y

    def draw(self, buffer: RingBuffer) -> None:
        surface = self._surface
        surface.set_fill_style(BACKGROUND)
        surface.fill_rect(0, 0, self._width, self._height)

        surface.set_stroke_style(FOREGROUND)
        surface.set_fill_style(FOREGROUND)
        surface.begin_path()

        length = buffer.length
        if length == 0:
            return

        for i in range(length):
            x, y = self.point_for(i, buffer.get(i))
            if i == 0:
                surface.move_to(x, y)
            else:
                surface.line_to(x, y)
        surface.stroke()

        current = buffer.get(length - 1)
        surface.fill_text(
            f"{current} fps",
            self._width / 2,
            self._height - LABEL_BOTTOM_MARGIN,
        )
