"""
config.py — Snap engine settings.

Uses pydantic-settings so hosts can tune snapping through SMARTSNAP_*
environment variables or a .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from smartsnap.dsl.schema import SNAP_THRESHOLD


class SnapSettings(BaseSettings):
    """Snap engine settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SMARTSNAP_",
        extra="ignore",
    )

    # Tolerances, as fractions of the canvas
    snap_threshold: float = Field(default=SNAP_THRESHOLD, gt=0, le=0.5)
    spacing_threshold: float = Field(default=SNAP_THRESHOLD, gt=0, le=0.5)

    # Feature toggles
    smart_guides_enabled: bool = True
    equal_spacing_enabled: bool = True
    snap_to_canvas_edges: bool = False

    # Grid cell size; None disables grid snapping
    grid_size: Optional[float] = Field(default=None, gt=0, le=1)


@lru_cache()
def get_settings() -> SnapSettings:
    """Get cached settings instance."""
    return SnapSettings()
