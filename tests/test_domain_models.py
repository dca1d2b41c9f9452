"""
Tests for domain models.
"""

import dataclasses
from datetime import time

import pytest

from sudpen.domain.models import Block, ScheduledSlot, Slot, TrafficLevel, format_clock


class TestBlock:
    """Tests for Block model."""

    def test_create_valid_block(self):
        block = Block(start=time(16, 30), end=time(20, 0))

        assert block.start == time(16, 30)
        assert str(block) == "16:30 - 20:00"

    def test_invalid_block_raises_error(self):
        """A block must start before it ends."""
        with pytest.raises(ValueError, match="Block start .* must be before end"):
            Block(start=time(13, 0), end=time(8, 0))

    def test_empty_block_raises_error(self):
        with pytest.raises(ValueError):
            Block(start=time(8, 0), end=time(8, 0))


class TestSlot:
    """Tests for slot value types."""

    def test_format_clock_zero_pads(self):
        assert format_clock(time(8, 0)) == "08:00"
        assert format_clock(time(19, 30)) == "19:30"

    def test_scheduled_slot_label(self):
        assert ScheduledSlot(time=time(9, 30), traffic_level=TrafficLevel.HIGH).label == "09:30"

    def test_slot_to_dict(self):
        """The dict shape matches what the booking page renders."""
        slot = Slot(time=time(12, 30), traffic_level=TrafficLevel.MEDIUM, available=False)

        assert slot.to_dict() == {"time": "12:30", "traffic": "medium", "available": False}

    def test_slot_is_immutable(self):
        slot = Slot(time=time(8, 0), traffic_level=TrafficLevel.HIGH, available=True)

        with pytest.raises(dataclasses.FrozenInstanceError):
            slot.available = False

    def test_traffic_level_values(self):
        assert [level.value for level in TrafficLevel] == ["low", "medium", "high"]

