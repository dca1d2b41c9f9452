"""
Domain layer - Pure business logic without external dependencies.
"""

from .exceptions import BookingError, InvalidInput, SlotAlreadyBooked, StoreUnavailable
from .models import BookingRecord, BookingRequest, Block, ScheduledSlot, Slot, TrafficLevel
from .slot_calculator import compute_availability, compute_day_schedule, parse_date

__all__ = [
    "BookingError",
    "InvalidInput",
    "SlotAlreadyBooked",
    "StoreUnavailable",
    "BookingRecord",
    "BookingRequest",
    "Block",
    "ScheduledSlot",
    "Slot",
    "TrafficLevel",
    "compute_availability",
    "compute_day_schedule",
    "parse_date",
]
