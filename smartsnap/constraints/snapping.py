"""Snap position calculation for a block being dragged."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from smartsnap.constraints.edges import get_block_edges, reference_blocks
from smartsnap.dsl.schema import CANVAS_CENTER, SNAP_THRESHOLD, Block


class SnapTarget(str, Enum):
    """What an axis snapped to."""

    CANVAS_CENTER = "canvas_center"
    SHAPE = "shape"
    CANVAS_EDGE = "canvas_edge"
    GRID = "grid"


@dataclass(frozen=True)
class SnapResult:
    """Corrected position with independent per-axis snap flags."""

    x: float
    y: float
    snapped_x: bool = False
    snapped_y: bool = False
    snap_type_x: SnapTarget | None = None
    snap_type_y: SnapTarget | None = None

    @property
    def snapped(self) -> bool:
        """Whether either axis snapped."""
        return self.snapped_x or self.snapped_y


# (moving edge, other edge), in priority order
_X_MATCHES = (
    ("left", "left"),
    ("right", "right"),
    ("left", "right"),
    ("right", "left"),
    ("center_x", "center_x"),
)

_Y_MATCHES = (
    ("top", "top"),
    ("bottom", "bottom"),
    ("top", "bottom"),
    ("bottom", "top"),
    ("center_y", "center_y"),
)


def calculate_snap_position(
    block: Block,
    other_blocks: Iterable[Block | None],
    threshold: float = SNAP_THRESHOLD,
) -> SnapResult:
    """Calculate the snapped position of a block.

    Each axis is resolved on its own. Canvas center wins outright; otherwise
    the first other block (in input order) with a qualifying edge or center
    match decides, trying left-left, right-right, left-to-right,
    right-to-left and center-center in that order.

    Args:
        block: The block being moved.
        other_blocks: Blocks to snap to. ``None`` entries and the moving
            block itself are ignored.
        threshold: Maximum distance, as a fraction of the canvas.

    Returns:
        SnapResult with the corrected position.
    """
    moving = get_block_edges(block)
    x, y = block.x, block.y
    type_x = type_y = None

    if abs(moving.center_x - CANVAS_CENTER) <= threshold:
        x = CANVAS_CENTER - block.width / 2
        type_x = SnapTarget.CANVAS_CENTER
    if abs(moving.center_y - CANVAS_CENTER) <= threshold:
        y = CANVAS_CENTER - block.height / 2
        type_y = SnapTarget.CANVAS_CENTER

    # Offsets from the top-left corner to each reference line
    x_offsets = {"left": 0.0, "right": block.width, "center_x": block.width / 2}
    y_offsets = {"top": 0.0, "bottom": block.height, "center_y": block.height / 2}

    for other in reference_blocks(block, other_blocks):
        if type_x is not None and type_y is not None:
            break

        target = get_block_edges(other)

        if type_x is None:
            for moving_edge, target_edge in _X_MATCHES:
                position = getattr(target, target_edge)
                if abs(getattr(moving, moving_edge) - position) <= threshold:
                    x = position - x_offsets[moving_edge]
                    type_x = SnapTarget.SHAPE
                    break

        if type_y is None:
            for moving_edge, target_edge in _Y_MATCHES:
                position = getattr(target, target_edge)
                if abs(getattr(moving, moving_edge) - position) <= threshold:
                    y = position - y_offsets[moving_edge]
                    type_y = SnapTarget.SHAPE
                    break

    return SnapResult(
        x=x,
        y=y,
        snapped_x=type_x is not None,
        snapped_y=type_y is not None,
        snap_type_x=type_x,
        snap_type_y=type_y,
    )


def snap_to_canvas_edges(block: Block, threshold: float = SNAP_THRESHOLD) -> SnapResult:
    """Snap block edges flush with the canvas edges.

    Left and top edges take precedence over right and bottom.

    Args:
        block: Block to snap.
        threshold: Maximum distance, as a fraction of the canvas.

    Returns:
        SnapResult with the corrected position.
    """
    edges = get_block_edges(block)
    x, y = block.x, block.y
    type_x = type_y = None

    if abs(edges.left) <= threshold:
        x = 0.0
        type_x = SnapTarget.CANVAS_EDGE
    elif abs(edges.right - 1.0) <= threshold:
        x = 1.0 - block.width
        type_x = SnapTarget.CANVAS_EDGE

    if abs(edges.top) <= threshold:
        y = 0.0
        type_y = SnapTarget.CANVAS_EDGE
    elif abs(edges.bottom - 1.0) <= threshold:
        y = 1.0 - block.height
        type_y = SnapTarget.CANVAS_EDGE

    return SnapResult(
        x=x,
        y=y,
        snapped_x=type_x is not None,
        snapped_y=type_y is not None,
        snap_type_x=type_x,
        snap_type_y=type_y,
    )


def snap_to_grid(
    block: Block,
    grid_size: float,
    threshold: float = SNAP_THRESHOLD,
) -> SnapResult:
    """Snap the block's top-left corner to the nearest grid lines.

    Args:
        block: Block to snap.
        grid_size: Grid cell size as a fraction of the canvas. Values of
            zero or less disable grid snapping.
        threshold: Maximum distance, as a fraction of the canvas.

    Returns:
        SnapResult with the corrected position.
    """
    if grid_size <= 0:
        return SnapResult(x=block.x, y=block.y)

    # Find nearest grid lines
    grid_x = round(block.x / grid_size) * grid_size
    grid_y = round(block.y / grid_size) * grid_size

    snapped_x = abs(block.x - grid_x) <= threshold
    snapped_y = abs(block.y - grid_y) <= threshold

    return SnapResult(
        x=grid_x if snapped_x else block.x,
        y=grid_y if snapped_y else block.y,
        snapped_x=snapped_x,
        snapped_y=snapped_y,
        snap_type_x=SnapTarget.GRID if snapped_x else None,
        snap_type_y=SnapTarget.GRID if snapped_y else None,
    )
