"""Equal spacing detection along a shared row or column."""

from dataclasses import dataclass
from typing import Iterable

from smartsnap.constraints.alignment import GuideAxis
from smartsnap.constraints.edges import Edges, get_block_edges, reference_blocks
from smartsnap.dsl.schema import SNAP_THRESHOLD, Block


@dataclass(frozen=True)
class SpacingGuide:
    """Two equal gaps between three blocks on one row or column.

    A HORIZONTAL guide describes a row (gaps measured along x); a VERTICAL
    guide describes a column (gaps measured along y).
    """

    axis: GuideAxis
    position: float  # Moving block center on the cross axis
    gap: float
    gaps: tuple[float, float]
    start: float
    end: float
    block_ids: tuple[str, str, str]


def find_equal_spacing(
    block: Block,
    other_blocks: Iterable[Block | None],
    threshold: float = SNAP_THRESHOLD,
) -> list[SpacingGuide]:
    """Find equal spacing indicators between blocks.

    Blocks sharing a row (top or vertical center within ``threshold`` of the
    moving block's) or a column (left or horizontal center within
    ``threshold``) are ordered along that axis together with the moving
    block. Every pair of neighbouring gaps that match within ``threshold``
    yields a SpacingGuide.

    Args:
        block: The moving block.
        other_blocks: Other blocks. ``None`` entries and the moving block
            itself are ignored.
        threshold: Alignment and gap match tolerance.

    Returns:
        Equal spacing indicators, possibly empty.
    """
    others = list(reference_blocks(block, other_blocks))
    if len(others) < 2:
        return []

    moving = get_block_edges(block)
    row: list[tuple[Block, Edges]] = []
    column: list[tuple[Block, Edges]] = []

    for other in others:
        target = get_block_edges(other)
        if (
            abs(moving.top - target.top) <= threshold
            or abs(moving.center_y - target.center_y) <= threshold
        ):
            row.append((other, target))
        if (
            abs(moving.left - target.left) <= threshold
            or abs(moving.center_x - target.center_x) <= threshold
        ):
            column.append((other, target))

    spacings = []
    if len(row) >= 2:
        spacings.extend(
            _equal_gaps(
                [(block, moving), *row],
                axis=GuideAxis.HORIZONTAL,
                position=moving.center_y,
                threshold=threshold,
            )
        )
    if len(column) >= 2:
        spacings.extend(
            _equal_gaps(
                [(block, moving), *column],
                axis=GuideAxis.VERTICAL,
                position=moving.center_x,
                threshold=threshold,
            )
        )
    return spacings


def _equal_gaps(
    aligned: list[tuple[Block, Edges]],
    axis: GuideAxis,
    position: float,
    threshold: float,
) -> list[SpacingGuide]:
    """Compare neighbouring gaps of blocks aligned along one axis."""
    if axis == GuideAxis.HORIZONTAL:
        near, far = "left", "right"
    else:
        near, far = "top", "bottom"

    ordered = sorted(aligned, key=lambda item: getattr(item[1], near))
    gaps = [
        getattr(ordered[i + 1][1], near) - getattr(ordered[i][1], far)
        for i in range(len(ordered) - 1)
    ]

    spacings = []
    for i in range(len(gaps) - 1):
        first, second = gaps[i], gaps[i + 1]
        # Overlapping neighbours have no gap to compare
        if not (first >= 0 and second >= 0 and abs(first - second) <= threshold):
            continue

        spacings.append(
            SpacingGuide(
                axis=axis,
                position=position,
                gap=(first + second) / 2,
                gaps=(first, second),
                start=getattr(ordered[i][1], near),
                end=getattr(ordered[i + 2][1], far),
                block_ids=(ordered[i][0].id, ordered[i + 1][0].id, ordered[i + 2][0].id),
            )
        )
    return spacings
