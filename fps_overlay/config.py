"""
Configuration module for the FPS overlay service.

Reads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass, field
from typing import List


@dataclass
class AppConfig:
    """Application-wide configuration."""

    # Server settings
    host: str = os.environ.get("APP_HOST", "0.0.0.0")
    port: int = int(os.environ.get("APP_PORT", "8000"))
    debug: bool = os.environ.get("APP_DEBUG", "false").lower() == "true"

    # Overlay surface and history
    overlay_width: int = int(os.environ.get("OVERLAY_WIDTH", "120"))
    overlay_height: int = int(os.environ.get("OVERLAY_HEIGHT", "80"))
    overlay_graph_capacity: int = int(os.environ.get("OVERLAY_GRAPH_CAPACITY", "30"))
    overlay_start_enabled: bool = (
        os.environ.get("OVERLAY_START_ENABLED", "false").lower() == "true"
    )

    # Frame scheduler refresh rate (Hz)
    frame_rate: float = float(os.environ.get("FRAME_RATE", "60"))

    # Streaming
    stream_fps_target: int = int(os.environ.get("STREAM_FPS_TARGET", "10"))
    jpeg_quality: int = int(os.environ.get("JPEG_QUALITY", "85"))

    # CORS origins (comma-separated)
    cors_origins: List[str] = field(
        default_factory=lambda: os.environ.get("CORS_ORIGINS", "*").split(",")
    )

    # Logging
    log_level: str = os.environ.get("LOG_LEVEL", "INFO")


# Singleton config instance used throughout the application
config = AppConfig()
