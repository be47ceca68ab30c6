"""Snap engine combining snapping, guides and spacing for one drag step."""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from smartsnap.config import SnapSettings, get_settings
from smartsnap.constraints.alignment import Guide, find_alignment_guides
from smartsnap.constraints.snapping import (
    SnapResult,
    calculate_snap_position,
    snap_to_canvas_edges,
    snap_to_grid,
)
from smartsnap.constraints.spacing import SpacingGuide, find_equal_spacing
from smartsnap.dsl.schema import Block

logger = logging.getLogger(__name__)


@dataclass
class DragFeedback:
    """Everything the editor needs to render one drag step."""

    block: Block  # Block at its corrected position
    snap: SnapResult
    guides: list[Guide] = field(default_factory=list)
    spacing: list[SpacingGuide] = field(default_factory=list)


class SnapEngine:
    """Computes snapped positions and guides while a block is dragged.

    The engine holds configuration only; each call to :meth:`drag` is
    independent of the previous one.
    """

    def __init__(self, settings: SnapSettings | None = None, **overrides: Any) -> None:
        """Initialize the snap engine.

        Args:
            settings: Settings to use. Defaults to the cached environment
                settings.
            **overrides: Individual settings to replace, e.g.
                ``grid_size=0.05``. Validated like environment values.
        """
        settings = settings or get_settings()
        if overrides:
            settings = SnapSettings(**{**settings.model_dump(), **overrides})
        self.settings = settings

    def drag(self, block: Block, other_blocks: Iterable[Block | None]) -> DragFeedback:
        """Process one candidate position of a dragged block.

        Args:
            block: The block at the pointer-driven candidate position.
            other_blocks: The other blocks in the design.

        Returns:
            DragFeedback with the corrected block and guides to render.
        """
        if not self.settings.smart_guides_enabled:
            return DragFeedback(block=block, snap=SnapResult(x=block.x, y=block.y))

        others = list(other_blocks)
        snap = self.snap(block, others)
        snapped_block = block.moved_to(snap.x, snap.y)

        guides = find_alignment_guides(snapped_block, others, self.settings.snap_threshold)
        spacing = []
        if self.settings.equal_spacing_enabled:
            spacing = find_equal_spacing(snapped_block, others, self.settings.spacing_threshold)

        logger.debug(
            f"Block {block.id}: {len(guides)} guides, {len(spacing)} spacing indicators"
        )
        return DragFeedback(block=snapped_block, snap=snap, guides=guides, spacing=spacing)

    def snap(self, block: Block, other_blocks: Iterable[Block | None]) -> SnapResult:
        """Snap a block, falling back to canvas edges and grid when enabled.

        Canvas center and block alignment always take priority; fallbacks
        only apply to axes that are still unsnapped.

        Args:
            block: The block being moved.
            other_blocks: The other blocks in the design.

        Returns:
            SnapResult with the corrected position.
        """
        threshold = self.settings.snap_threshold
        result = calculate_snap_position(block, other_blocks, threshold)

        if self.settings.snap_to_canvas_edges and not (result.snapped_x and result.snapped_y):
            result = _merge(result, snap_to_canvas_edges(block, threshold))

        if self.settings.grid_size and not (result.snapped_x and result.snapped_y):
            result = _merge(result, snap_to_grid(block, self.settings.grid_size, threshold))

        if result.snapped:
            logger.debug(
                f"Block {block.id} snapped: x={result.snap_type_x} y={result.snap_type_y}"
            )
        return result


def _merge(primary: SnapResult, fallback: SnapResult) -> SnapResult:
    """Fill axes the primary result left unsnapped from the fallback."""
    use_x = not primary.snapped_x and fallback.snapped_x
    use_y = not primary.snapped_y and fallback.snapped_y
    return SnapResult(
        x=fallback.x if use_x else primary.x,
        y=fallback.y if use_y else primary.y,
        snapped_x=primary.snapped_x or use_x,
        snapped_y=primary.snapped_y or use_y,
        snap_type_x=fallback.snap_type_x if use_x else primary.snap_type_x,
        snap_type_y=fallback.snap_type_y if use_y else primary.snap_type_y,
    )
