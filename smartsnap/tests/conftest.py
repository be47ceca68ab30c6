"""Pytest configuration and fixtures."""

from typing import Callable

import pytest

from smartsnap.config import SnapSettings
from smartsnap.dsl.schema import Block


@pytest.fixture
def make_block() -> Callable[..., Block]:
    """Create a factory for blocks in fractional coordinates."""

    def _make(id: str, x: float, y: float, width: float, height: float, **kwargs) -> Block:
        return Block(id=id, x=x, y=y, width=width, height=height, **kwargs)

    return _make


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> SnapSettings:
    """Create default settings unaffected by the outer environment."""
    for name in (
        "SMARTSNAP_SNAP_THRESHOLD",
        "SMARTSNAP_SPACING_THRESHOLD",
        "SMARTSNAP_SMART_GUIDES_ENABLED",
        "SMARTSNAP_EQUAL_SPACING_ENABLED",
        "SMARTSNAP_SNAP_TO_CANVAS_EDGES",
        "SMARTSNAP_GRID_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    return SnapSettings(_env_file=None)
