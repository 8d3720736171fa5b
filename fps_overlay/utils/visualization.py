"""
Visualization utilities.

Colour parsing and frame encoding helpers shared by the canvas surface and
the streaming routes.
"""

from typing import Tuple

import cv2
import numpy as np

from fps_overlay.core.errors import ConfigurationError

# BGR, as OpenCV expects
NAMED_COLOURS = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (0, 0, 255),
    "green": (0, 128, 0),
    "blue": (255, 0, 0),
}


def parse_colour(colour: str) -> Tuple[int, int, int]:
    """Convert a CSS-style colour string to a BGR tuple.

    Args:
        colour: A name from :data:`NAMED_COLOURS` or ``#rrggbb``.

    Raises:
        ConfigurationError: If the colour is not recognised.
    """
    value = colour.strip().lower()
    if value in NAMED_COLOURS:
        return NAMED_COLOURS[value]
    if len(value) == 7 and value.startswith("#"):
        try:
            r, g, b = (int(value[i : i + 2], 16) for i in (1, 3, 5))
        except ValueError:
            pass
        else:
            return (b, g, r)
    raise ConfigurationError(f"Unknown colour {colour!r}")


def encode_jpeg(frame: np.ndarray, quality: int = 85) -> bytes:
    """Encode a BGR NumPy frame to JPEG bytes.

    Args:
        frame: BGR uint8 array (H×W×3).
        quality: JPEG quality (1–100).

    Returns:
        JPEG-encoded bytes.
    """
    _, buf = cv2.imencode(
        ".jpg", frame, [int(cv2.IMWRITE_JPEG_QUALITY), quality]
    )
    return buf.tobytes()


def build_mjpeg_frame(jpeg_bytes: bytes) -> bytes:
    """Wrap JPEG bytes in an MJPEG multipart boundary.

    Args:
        jpeg_bytes: Raw JPEG-encoded image bytes.

    Returns:
        Byte string suitable for an MJPEG ``multipart/x-mixed-replace``
        streaming response.
    """
    return (
        b"--frame\r\n"
        b"Content-Type: image/jpeg\r\n\r\n"
        + jpeg_bytes
        + b"\r\n"
    )
