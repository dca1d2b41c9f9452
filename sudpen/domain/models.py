"""
Domain models for daily opening blocks, slots and bookings.
"""

from dataclasses import dataclass
from datetime import datetime, time
from enum import Enum
from typing import Dict, Optional


class TrafficLevel(str, Enum):
    """Historical congestion label attached to a slot."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def format_clock(value: time) -> str:
    """Render a clock time as zero-padded 24-hour HH:MM."""
    return f"{value.hour:02d}:{value.minute:02d}"


@dataclass(frozen=True)
class Block:
    """
    A contiguous opening interval within a day.

    Invariant: start must be before end. The end is exclusive.
    """
    start: time
    end: time

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Block start {self.start} must be before end {self.end}")

    def __str__(self) -> str:
        return f"{format_clock(self.start)} - {format_clock(self.end)}"


@dataclass(frozen=True)
class ScheduledSlot:
    """A bookable time point of a day schedule, before bookings are applied."""
    time: time
    traffic_level: TrafficLevel

    @property
    def label(self) -> str:
        return format_clock(self.time)


@dataclass(frozen=True)
class Slot:
    """
    A slot with its availability resolved against existing bookings.
    """
    time: time
    traffic_level: TrafficLevel
    available: bool

    @property
    def label(self) -> str:
        return format_clock(self.time)

    def to_dict(self) -> Dict[str, object]:
        """Return the JSON shape served to the booking page."""
        return {
            "time": self.label,
            "traffic": self.traffic_level.value,
            "available": self.available,
        }


@dataclass(frozen=True)
class BookingRequest:
    """A customer's intent to reserve a slot."""
    date: str  # YYYY-MM-DD
    time_slot: str  # HH:MM
    customer_name: str
    customer_email: str
    customer_phone: Optional[str] = None


@dataclass(frozen=True)
class BookingRecord:
    """A booking as persisted by the appointment store."""
    id: int
    date: str
    time_slot: str
    customer_name: str
    customer_email: str
    customer_phone: Optional[str] = None
    created_at: Optional[datetime] = None
