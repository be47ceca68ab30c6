"""Alignment guide detection for a block being dragged."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from smartsnap.constraints.edges import Edges, get_block_edges, reference_blocks
from smartsnap.dsl.schema import CANVAS_CENTER, SNAP_THRESHOLD, Block


# Guide positions are compared at this precision when deduplicating
POSITION_PRECISION = 4


class GuideType(str, Enum):
    """Guide types for alignment.

    Values are matched by rendering code to pick a line style.
    """

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    CENTER_H = "center-h"
    CENTER_V = "center-v"
    CANVAS_CENTER_H = "canvas-center-h"
    CANVAS_CENTER_V = "canvas-center-v"


class GuideAxis(str, Enum):
    """Direction a guide line runs in."""

    HORIZONTAL = "horizontal"  # Runs left-right, from y comparisons
    VERTICAL = "vertical"  # Runs top-bottom, from x comparisons


@dataclass(frozen=True)
class Guide:
    """A detected alignment line, for rendering only."""

    type: GuideType
    axis: GuideAxis
    position: float
    source_block_id: str | None = None  # None for canvas guides
    span_start: float = 0.0
    span_end: float = 1.0

    @property
    def is_canvas(self) -> bool:
        """Whether the guide comes from the canvas rather than a block."""
        return self.source_block_id is None


# (guide type, moving edge, other edge), in detection order
_VERTICAL_MATCHES = (
    (GuideType.LEFT, "left", "left"),
    (GuideType.RIGHT, "right", "right"),
    (GuideType.LEFT, "left", "right"),
    (GuideType.RIGHT, "right", "left"),
    (GuideType.CENTER_V, "center_x", "center_x"),
)

_HORIZONTAL_MATCHES = (
    (GuideType.TOP, "top", "top"),
    (GuideType.BOTTOM, "bottom", "bottom"),
    (GuideType.TOP, "top", "bottom"),
    (GuideType.BOTTOM, "bottom", "top"),
    (GuideType.CENTER_H, "center_y", "center_y"),
)


def find_alignment_guides(
    block: Block,
    other_blocks: Iterable[Block | None],
    threshold: float = SNAP_THRESHOLD,
) -> list[Guide]:
    """Find alignment guides for a moving block against other blocks and canvas.

    A guide is reported whenever one of the moving block's edges or centers
    lies within ``threshold`` of the canvas center or of a matching line on
    another block. Block guides sit at the other block's coordinate.

    Args:
        block: The block being moved.
        other_blocks: Blocks to align against. ``None`` entries and the
            moving block itself are ignored.
        threshold: Maximum distance, as a fraction of the canvas.

    Returns:
        Guides, at most one per (axis, position).
    """
    moving = get_block_edges(block)
    guides = _canvas_center_guides(moving, threshold)

    for other in reference_blocks(block, other_blocks):
        target = get_block_edges(other)

        for guide_type, moving_edge, target_edge in _VERTICAL_MATCHES:
            position = getattr(target, target_edge)
            if abs(getattr(moving, moving_edge) - position) <= threshold:
                guides.append(
                    Guide(
                        type=guide_type,
                        axis=GuideAxis.VERTICAL,
                        position=position,
                        source_block_id=other.id,
                        span_start=min(moving.top, target.top),
                        span_end=max(moving.bottom, target.bottom),
                    )
                )

        for guide_type, moving_edge, target_edge in _HORIZONTAL_MATCHES:
            position = getattr(target, target_edge)
            if abs(getattr(moving, moving_edge) - position) <= threshold:
                guides.append(
                    Guide(
                        type=guide_type,
                        axis=GuideAxis.HORIZONTAL,
                        position=position,
                        source_block_id=other.id,
                        span_start=min(moving.left, target.left),
                        span_end=max(moving.right, target.right),
                    )
                )

    return dedupe_guides(guides)


def dedupe_guides(guides: Iterable[Guide]) -> list[Guide]:
    """Keep the first guide found for each (axis, position).

    Args:
        guides: Guides in detection order.

    Returns:
        Deduplicated guides, order preserved.
    """
    seen: set[tuple[GuideAxis, float]] = set()
    unique = []
    for guide in guides:
        key = (guide.axis, round(guide.position, POSITION_PRECISION))
        if key in seen:
            continue
        seen.add(key)
        unique.append(guide)
    return unique


def _canvas_center_guides(moving: Edges, threshold: float) -> list[Guide]:
    """Guides for a block centered on the canvas, per axis."""
    guides = []
    if abs(moving.center_x - CANVAS_CENTER) <= threshold:
        guides.append(
            Guide(
                type=GuideType.CANVAS_CENTER_V,
                axis=GuideAxis.VERTICAL,
                position=CANVAS_CENTER,
            )
        )
    if abs(moving.center_y - CANVAS_CENTER) <= threshold:
        guides.append(
            Guide(
                type=GuideType.CANVAS_CENTER_H,
                axis=GuideAxis.HORIZONTAL,
                position=CANVAS_CENTER,
            )
        )
    return guides
