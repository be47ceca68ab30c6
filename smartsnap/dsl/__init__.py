"""Design block schema."""

from smartsnap.dsl.schema import CANVAS_CENTER, SNAP_THRESHOLD, Block

__all__ = [
    "Block",
    "CANVAS_CENTER",
    "SNAP_THRESHOLD",
]
