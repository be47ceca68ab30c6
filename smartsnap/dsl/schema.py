"""Pydantic v2 models for design blocks.

Blocks are positioned rectangles on a unit-square canvas. All coordinates
and sizes are fractions of the canvas width/height, so the same design
renders at any resolution.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# Constants
SNAP_THRESHOLD = 0.01  # 1% of the canvas
CANVAS_CENTER = 0.5


class Block(BaseModel):
    """A positioned content block in fractional coordinates.

    Records arrive already normalized by the design loader, so ranges are
    not re-validated here.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable identifier within a design")
    type: str = Field(default="shape", description="Block content type")
    x: float = Field(description="Left position as a fraction of canvas width")
    y: float = Field(description="Top position as a fraction of canvas height")
    width: float = Field(description="Width as a fraction of canvas width")
    height: float = Field(description="Height as a fraction of canvas height")
    props: dict[str, Any] = Field(default_factory=dict, description="Type-specific properties")

    def moved_to(self, x: float, y: float) -> "Block":
        """Return a copy of this block at a new top-left position."""
        if x == self.x and y == self.y:
            return self
        return self.model_copy(update={"x": x, "y": y})
