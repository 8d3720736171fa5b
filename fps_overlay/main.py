"""
FastAPI application entry point.

Wires together the overlay, its frame scheduler, routes and CORS, and
manages startup / shutdown.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fps_overlay.config import config
from fps_overlay.core.overlay import Overlay, OverlayConfig
from fps_overlay.core.scheduler import AsyncioFrameScheduler
from fps_overlay.routes.overlay_routes import router as overlay_router

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=getattr(logging, config.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application lifecycle
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage startup and shutdown events."""
    # ---- startup ----
    logger.info("Starting FPS overlay service…")

    scheduler = AsyncioFrameScheduler(frame_rate=config.frame_rate)
    overlay = Overlay(
        scheduler,
        OverlayConfig(
            width=config.overlay_width,
            height=config.overlay_height,
            graph_capacity=config.overlay_graph_capacity,
        ),
    )
    app.state.scheduler = scheduler
    app.state.overlay = overlay

    if config.overlay_start_enabled:
        overlay.toggle()
    scheduler.start()

    logger.info("Overlay ready.")
    yield

    # ---- shutdown ----
    logger.info("Shutting down – stopping frame scheduler…")
    await scheduler.stop()


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="FPS Overlay",
        description=(
            "Real-time frame-rate overlay: smoothed FPS sampling, bounded "
            "history and a rendered line graph."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(overlay_router, prefix="/api", tags=["overlay"])

    @app.get("/api/health", tags=["health"])
    async def health_check():
        """Return application health status."""
        scheduler = getattr(app.state, "scheduler", None)
        overlay = getattr(app.state, "overlay", None)
        return {
            "status": "ok",
            "scheduler_running": bool(scheduler and scheduler.is_running),
            "overlay_enabled": bool(overlay and overlay.enabled),
        }

    return app


app = create_app()

# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    uvicorn.run(
        "fps_overlay.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=config.log_level.lower(),
    )
