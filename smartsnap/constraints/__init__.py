"""Smart guide module - snapping, alignment guides and equal spacing."""

from smartsnap.constraints.alignment import (
    Guide,
    GuideAxis,
    GuideType,
    dedupe_guides,
    find_alignment_guides,
)
from smartsnap.constraints.edges import Edges, get_block_edges, reference_blocks
from smartsnap.constraints.engine import DragFeedback, SnapEngine
from smartsnap.constraints.snapping import (
    SnapResult,
    SnapTarget,
    calculate_snap_position,
    snap_to_canvas_edges,
    snap_to_grid,
)
from smartsnap.constraints.spacing import SpacingGuide, find_equal_spacing

__all__ = [
    # Engine
    "DragFeedback",
    "SnapEngine",
    # Edges
    "Edges",
    "get_block_edges",
    "reference_blocks",
    # Alignment
    "Guide",
    "GuideAxis",
    "GuideType",
    "dedupe_guides",
    "find_alignment_guides",
    # Snapping
    "SnapResult",
    "SnapTarget",
    "calculate_snap_position",
    "snap_to_canvas_edges",
    "snap_to_grid",
    # Spacing
    "SpacingGuide",
    "find_equal_spacing",
]
