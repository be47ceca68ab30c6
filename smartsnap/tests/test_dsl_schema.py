"""Tests for the design block schema."""

import pytest
from pydantic import ValidationError

from smartsnap.dsl.schema import CANVAS_CENTER, SNAP_THRESHOLD, Block


class TestBlock:
    """Tests for Block model."""

    def test_create_block(self) -> None:
        """Test creating a block with defaults."""
        block = Block(id="b1", x=0.1, y=0.2, width=0.3, height=0.4)
        assert block.id == "b1"
        assert block.type == "shape"
        assert block.x == 0.1
        assert block.y == 0.2
        assert block.width == 0.3
        assert block.height == 0.4
        assert block.props == {}

    def test_from_normalized_record(self) -> None:
        """Test validating a normalized design record."""
        record = {
            "id": "text-1",
            "type": "text",
            "x": 0.05,
            "y": 0.1,
            "width": 0.5,
            "height": 0.2,
            "props": {"text": "Welcome", "fontSize": 48},
        }
        block = Block.model_validate(record)
        assert block.type == "text"
        assert block.props["fontSize"] == 48

    def test_missing_geometry_rejected(self) -> None:
        """Test that records without geometry fail validation."""
        with pytest.raises(ValidationError):
            Block.model_validate({"id": "b1", "x": 0.1, "y": 0.1})

    def test_block_is_frozen(self) -> None:
        """Test blocks cannot be mutated in place."""
        block = Block(id="b1", x=0.1, y=0.2, width=0.3, height=0.4)
        with pytest.raises(ValidationError):
            block.x = 0.5

    def test_moved_to_returns_copy(self) -> None:
        """Test moving a block leaves the original untouched."""
        block = Block(id="b1", x=0.1, y=0.2, width=0.3, height=0.4, props={"color": "#fff"})
        moved = block.moved_to(0.25, 0.35)

        assert moved is not block
        assert (moved.x, moved.y) == (0.25, 0.35)
        assert (moved.width, moved.height) == (0.3, 0.4)
        assert moved.props == {"color": "#fff"}
        assert (block.x, block.y) == (0.1, 0.2)

    def test_moved_to_same_position(self) -> None:
        """Test moving to the current position returns the same block."""
        block = Block(id="b1", x=0.1, y=0.2, width=0.3, height=0.4)
        assert block.moved_to(0.1, 0.2) is block


class TestConstants:
    """Tests for schema constants."""

    def test_snap_threshold(self) -> None:
        """Test default snap threshold is 1% of the canvas."""
        assert SNAP_THRESHOLD == 0.01

    def test_canvas_center(self) -> None:
        """Test canvas center in fractional coordinates."""
        assert CANVAS_CENTER == 0.5
