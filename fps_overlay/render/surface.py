"""
Drawing surface capability used by the graph renderer.

Mirrors the small subset of a 2D canvas API the overlay needs. Any object
with these members can be rendered onto; :class:`CanvasSurface` is the
OpenCV-backed implementation.
"""

from typing import Protocol


class DrawingSurface(Protocol):
    width: int
    height: int

    def set_fill_style(self, colour: str) -> None: ...

    def set_stroke_style(self, colour: str) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_font(self, size_px: int, bold: bool = False) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def stroke(self) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None:
        """Draw *text* horizontally centred on *x* with its baseline at *y*."""
        ...
