"""
Overlay API routes.

Endpoints:
    POST /overlay/toggle  – Enable or disable the overlay.
    POST /overlay/message – Relay an extension-style command message.
    GET  /overlay/status  – Return overlay state and the current value.
    GET  /overlay/history – Return the retained samples, oldest first.
    GET  /overlay/frame   – Current overlay surface as a JPEG image.
    GET  /overlay/stream  – MJPEG stream of the overlay surface.
"""

import asyncio
import logging
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse, Response, StreamingResponse
from pydantic import BaseModel, Field

from fps_overlay.config import config
from fps_overlay.core.overlay import Overlay
from fps_overlay.utils.visualization import build_mjpeg_frame, encode_jpeg

logger = logging.getLogger(__name__)
router = APIRouter()

# Message sent by the toolbar button relay
TOGGLE_MESSAGE = "clicked_browser_action"


class OverlayMessage(BaseModel):
    message: str = Field(..., description="Command name sent by the relay")


def _get_overlay(request: Request) -> Overlay:
    """Retrieve the shared overlay from app state."""
    overlay = getattr(request.app.state, "overlay", None)
    if overlay is None:
        raise HTTPException(status_code=503, detail="Overlay not initialised")
    return overlay


def _render_jpeg(overlay: Overlay) -> bytes:
    surface = overlay.surface
    if not hasattr(surface, "to_image"):
        raise HTTPException(
            status_code=501, detail="Overlay surface cannot be exported"
        )
    return encode_jpeg(surface.to_image(), config.jpeg_quality)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.post("/overlay/toggle", summary="Toggle the FPS overlay")
async def toggle_overlay(request: Request) -> JSONResponse:
    """Flip the overlay between enabled and disabled."""
    overlay = _get_overlay(request)
    return JSONResponse({"enabled": overlay.toggle()})


@router.post("/overlay/message", summary="Relay a command message")
async def relay_message(body: OverlayMessage, request: Request) -> JSONResponse:
    """Toggle the overlay when the toolbar-click message arrives.

    Any other message is ignored.
    """
    overlay = _get_overlay(request)
    if body.message != TOGGLE_MESSAGE:
        logger.debug("Ignoring relay message %r", body.message)
        return JSONResponse({"handled": False, "enabled": overlay.enabled})
    return JSONResponse({"handled": True, "enabled": overlay.toggle()})


@router.get("/overlay/status", summary="Overlay state")
async def overlay_status(request: Request) -> JSONResponse:
    """Return whether the overlay is enabled and its latest value."""
    return JSONResponse(_get_overlay(request).get_status())


@router.get("/overlay/history", summary="Retained samples")
async def overlay_history(request: Request) -> JSONResponse:
    """Return the smoothed samples currently in the graph, oldest first."""
    overlay = _get_overlay(request)
    return JSONResponse({"samples": overlay.buffer.snapshot()})


@router.get("/overlay/frame", summary="Overlay snapshot")
async def overlay_frame(request: Request) -> Response:
    """Return the current overlay surface as a JPEG image."""
    overlay = _get_overlay(request)
    return Response(content=_render_jpeg(overlay), media_type="image/jpeg")


@router.get("/overlay/stream", summary="MJPEG overlay stream")
async def overlay_stream(
    request: Request,
    frames: Optional[int] = None,
) -> StreamingResponse:
    """Stream the overlay surface as ``multipart/x-mixed-replace`` (MJPEG).

    The stream continues until the client disconnects, or until *frames*
    images have been sent when given.
    """
    overlay = _get_overlay(request)

    async def _generate() -> AsyncGenerator[bytes, None]:
        sent = 0
        while frames is None or sent < frames:
            if await request.is_disconnected():
                break
            yield build_mjpeg_frame(_render_jpeg(overlay))
            sent += 1
            await asyncio.sleep(1.0 / config.stream_fps_target)

    return StreamingResponse(
        _generate(),
        media_type="multipart/x-mixed-replace; boundary=frame",
    )
