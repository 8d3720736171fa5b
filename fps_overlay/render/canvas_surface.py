"""
Canvas surface backed by a NumPy image.

Implements the :class:`~fps_overlay.render.surface.DrawingSurface` calls
with OpenCV primitives so the overlay can be encoded and streamed.
"""

from typing import List, Tuple

import cv2
import numpy as np

from fps_overlay.core.errors import ConfigurationError
from fps_overlay.utils.visualization import parse_colour

Point = Tuple[float, float]


class CanvasSurface:
    """A fixed-size BGR drawing surface.

    Args:
        width: Surface width in pixels.
        height: Surface height in pixels.

    Raises:
        ConfigurationError: If either dimension is not positive.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ConfigurationError(
                f"Surface size must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self._image = np.zeros((height, width, 3), dtype=np.uint8)
        self._fill = parse_colour("black")
        self._stroke = parse_colour("black")
        self._line_width = 1
        self._font = cv2.FONT_HERSHEY_TRIPLEX
        self._font_px = 10
        self._font_thickness = 1
        self._subpaths: List[List[Point]] = []

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def set_fill_style(self, colour: str) -> None:
        self._fill = parse_colour(colour)

    def set_stroke_style(self, colour: str) -> None:
        self._stroke = parse_colour(colour)

    def set_line_width(self, width: float) -> None:
        self._line_width = max(1, int(round(width)))

    def set_font(self, size_px: int, bold: bool = False) -> None:
        self._font_px = max(1, int(size_px))
        self._font_thickness = 2 if bold else 1

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        x1, y1 = int(round(x)), int(round(y))
        x2, y2 = int(round(x + w)) - 1, int(round(y + h)) - 1
        cv2.rectangle(self._image, (x1, y1), (x2, y2), self._fill, -1)

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([(x, y)])

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            # Canvas semantics: a line_to with no current point acts as move_to
            self.move_to(x, y)
            return
        self._subpaths[-1].append((x, y))

    def stroke(self) -> None:
        for points in self._subpaths:
            if len(points) < 2:
                continue
            pts = np.round(np.asarray(points, dtype=np.float64)).astype(np.int32)
            cv2.polylines(
                self._image,
                [pts.reshape(-1, 1, 2)],
                False,
                self._stroke,
                self._line_width,
                cv2.LINE_AA,
            )

    def fill_text(self, text: str, x: float, y: float) -> None:
        scale = cv2.getFontScaleFromHeight(
            self._font, self._font_px, self._font_thickness
        )
        (text_w, _), _ = cv2.getTextSize(
            text, self._font, scale, self._font_thickness
        )
        org = (int(round(x - text_w / 2)), int(round(y)))
        cv2.putText(
            self._image,
            text,
            org,
            self._font,
            scale,
            self._fill,
            self._font_thickness,
            cv2.LINE_AA,
        )

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_image(self) -> np.ndarray:
        """Return a copy of the current surface as a BGR uint8 array."""
        return self._image.copy()
