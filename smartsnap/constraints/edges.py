"""Reference lines of a block."""

from dataclasses import dataclass
from typing import Iterable, Iterator

from smartsnap.dsl.schema import Block


@dataclass(frozen=True)
class Edges:
    """Edges and centers of a block."""

    left: float
    right: float
    top: float
    bottom: float
    center_x: float
    center_y: float


def get_block_edges(block: Block) -> Edges:
    """Get the six reference lines of a block.

    Args:
        block: Block with x, y, width and height.

    Returns:
        Edges of the block.
    """
    return Edges(
        left=block.x,
        right=block.x + block.width,
        top=block.y,
        bottom=block.y + block.height,
        center_x=block.x + block.width / 2,
        center_y=block.y + block.height / 2,
    )


def reference_blocks(moving: Block, other_blocks: Iterable[Block | None]) -> Iterator[Block]:
    """Yield the blocks a moving block can align against.

    Missing entries and entries sharing the moving block's id are skipped.
    """
    for other in other_blocks:
        if other is None or other.id == moving.id:
            continue
        yield other
