"""
Core business logic for computing the bookable slots of a day.

This is the heart of the application - pure domain logic without any
external dependencies (no store access, no HTTP, no I/O).
"""

import re
from datetime import date, datetime, time
from typing import Iterable, List, Optional, Tuple, Union

import pendulum

from .exceptions import InvalidInput
from .models import Block, ScheduledSlot, Slot, TrafficLevel

SLOT_STEP_MINUTES = 30

MORNING = Block(start=time(8, 0), end=time(13, 0))
AFTERNOON = Block(start=time(16, 30), end=time(20, 0))

# Python weekday(): 0=Monday ... 5=Saturday, 6=Sunday
SATURDAY = 5
SUNDAY = 6

DateInput = Union[date, str]

_ISO_DATE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def parse_date(value: Optional[DateInput]) -> date:
    """
    Normalise a calendar date given as a date object or a YYYY-MM-DD string.

    Raises:
        InvalidInput: If the value is missing or cannot be parsed
    """
    if value is None:
        raise InvalidInput("Date is required")

    # datetime (and pendulum DateTime) is a date subclass, keep only the day
    if isinstance(value, datetime):
        return date(value.year, value.month, value.day)

    if isinstance(value, date):
        return date(value.year, value.month, value.day)

    if not isinstance(value, str) or not value.strip():
        raise InvalidInput(f"Invalid date: {value!r}")

    text = value.strip()
    if not _ISO_DATE.match(text):
        raise InvalidInput(f"Invalid date: {value!r}. Expected YYYY-MM-DD.")

    try:
        parsed = pendulum.from_format(text, "YYYY-MM-DD")
    except ValueError as exc:
        raise InvalidInput(f"Invalid date: {value!r}. Expected YYYY-MM-DD.") from exc

    return date(parsed.year, parsed.month, parsed.day)


def blocks_for_day(day: date) -> Tuple[Block, ...]:
    """
    Select the opening blocks for a weekday.

    Sunday is closed, Saturday opens in the morning only, Monday to Friday
    open in the morning and again in the afternoon.
    """
    weekday = day.weekday()

    if weekday == SUNDAY:
        return ()

    if weekday == SATURDAY:
        return (MORNING,)

    return (MORNING, AFTERNOON)


def classify_traffic(hour: int) -> TrafficLevel:
    """
    Classify historical congestion purely from the hour of day.

    Based on observed visitor counts:
    08-12 high, 12-13 medium, 16-18 high, 18-19 medium, anything else low.
    """
    if 8 <= hour < 12:
        return TrafficLevel.HIGH
    if 12 <= hour < 13:
        return TrafficLevel.MEDIUM
    if 16 <= hour < 18:
        return TrafficLevel.HIGH
    if 18 <= hour < 19:
        return TrafficLevel.MEDIUM
    return TrafficLevel.LOW


def _enumerate_block(block: Block) -> List[time]:
    """Walk a block in fixed steps; the block end is never included."""
    # Anchor on a fixed day so that clock arithmetic never wraps
    current = pendulum.naive(2000, 1, 1, block.start.hour, block.start.minute)
    end = pendulum.naive(2000, 1, 1, block.end.hour, block.end.minute)

    points: List[time] = []
    while current < end:
        points.append(time(current.hour, current.minute))
        current = current.add(minutes=SLOT_STEP_MINUTES)

    return points


def compute_day_schedule(value: DateInput) -> List[ScheduledSlot]:
    """
    Turn a calendar date into its ordered list of slots with traffic labels.

    Args:
        value: A date or a YYYY-MM-DD string, interpreted in local time

    Returns:
        Slots in generation order (morning before afternoon); empty on Sunday

    Raises:
        InvalidInput: If the date cannot be parsed
    """
    day = parse_date(value)

    schedule: List[ScheduledSlot] = []
    for block in blocks_for_day(day):
        for point in _enumerate_block(block):
            schedule.append(
                ScheduledSlot(time=point, traffic_level=classify_traffic(point.hour))
            )

    return schedule


def compute_availability(
    value: DateInput,
    booked_times: Optional[Iterable[str]] = None
) -> List[Slot]:
    """
    Resolve the day schedule against the times already booked on that date.

    Booked slots are kept with available=False rather than dropped, so the
    caller can render them as disabled. Booked times outside the grid are
    ignored.
    """
    schedule = compute_day_schedule(value)
    booked = frozenset(booked_times or ())

    return [
        Slot(
            time=scheduled.time,
            traffic_level=scheduled.traffic_level,
            available=scheduled.label not in booked
        )
        for scheduled in schedule
    ]


def ensure_scheduled_time(value: DateInput, time_label: str) -> str:
    """
    Check that a HH:MM label is one of the slots produced for the date.

    Returns:
        The stripped label

    Raises:
        InvalidInput: If the date is invalid or the time is not a slot of that day
    """
    day = parse_date(value)
    label = (time_label or "").strip()

    if label not in {scheduled.label for scheduled in compute_day_schedule(day)}:
        raise InvalidInput(f"{label!r} is not a bookable slot on {day.isoformat()}")

    return label
