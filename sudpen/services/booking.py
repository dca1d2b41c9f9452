"""
Application services for listing slots and recording bookings.

The service coordinates reading booked times via a store adapter and
delegates the actual availability calculation to the domain-level
slot calculator. The store dependency is passed in explicitly and only
needs to satisfy a small protocol, so tests can use the in-memory store.
"""

from __future__ import annotations

import logging
from typing import List, Protocol, Set

from ..domain.exceptions import InvalidInput, SlotAlreadyBooked, StoreUnavailable
from ..domain.models import BookingRequest, Slot
from ..domain.slot_calculator import DateInput, compute_availability, ensure_scheduled_time, parse_date

logger = logging.getLogger(__name__)


class BookingStoreProtocol(Protocol):
    """Protocol describing the store behaviour needed by the service."""

    def list_booked_times(self, day: str) -> Set[str]:
        """Return the HH:MM time slots already booked on a YYYY-MM-DD date."""

    def insert_booking(self, request: BookingRequest) -> int:
        """Persist a booking and return its record id."""


class BookingService:
    """
    Orchestrates booked-time retrieval, availability and booking.
    """

    def __init__(self, store: BookingStoreProtocol) -> None:
        self._store = store

    def get_slots(
        self,
        day: DateInput,
        *,
        assume_available_on_store_error: bool = False,
    ) -> List[Slot]:
        """
        Return every slot of the day with availability resolved.

        Args:
            day: A date or a YYYY-MM-DD string
            assume_available_on_store_error: Treat all slots as available
                when the store cannot be read, instead of raising

        Raises:
            InvalidInput: If the date cannot be parsed
            StoreUnavailable: If the store fails and no fallback was requested
        """
        iso_day = parse_date(day).isoformat()

        try:
            booked_times = self._store.list_booked_times(iso_day)
        except StoreUnavailable as exc:
            if not assume_available_on_store_error:
                raise
            logger.warning("Store unavailable for %s, showing all slots as free: %s", iso_day, exc)
            booked_times = set()

        return compute_availability(iso_day, booked_times)

    def book(self, request: BookingRequest) -> int:
        """
        Validate and store a booking.

        Returns:
            Id of the stored booking record

        Raises:
            InvalidInput: If a required field is missing, or the time is not
                a slot of that day
            SlotAlreadyBooked: If the slot is already taken
            StoreUnavailable: If the store cannot be read or written
        """
        missing = [
            name for name, value in (
                ("name", request.customer_name),
                ("email", request.customer_email),
                ("date", request.date),
                ("time", request.time_slot),
            )
            if not value or not str(value).strip()
        ]
        if missing:
            raise InvalidInput(f"Missing required fields: {', '.join(missing)}")

        iso_day = parse_date(request.date).isoformat()
        time_slot = ensure_scheduled_time(iso_day, request.time_slot)

        # Best effort only: the store serializes writes but nothing locks the
        # slot between this read and the insert.
        if time_slot in self._store.list_booked_times(iso_day):
            raise SlotAlreadyBooked(f"Slot {time_slot} on {iso_day} is already booked")

        normalized = BookingRequest(
            date=iso_day,
            time_slot=time_slot,
            customer_name=request.customer_name.strip(),
            customer_email=request.customer_email.strip(),
            customer_phone=(request.customer_phone or "").strip() or None,
        )
        booking_id = self._store.insert_booking(normalized)

        logger.info(
            "New booking for %s at %s on %s",
            normalized.customer_name,
            normalized.time_slot,
            normalized.date,
        )
        return booking_id
