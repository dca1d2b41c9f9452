"""
In-memory appointment store for tests and mock mode.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional, Set

from ..domain.models import BookingRecord, BookingRequest


class InMemoryBookingStore:
    """
    Store that keeps bookings in a dict keyed by record id.

    Useful for running the application without a database file.
    """

    def __init__(self, seed: Optional[Iterable[BookingRequest]] = None):
        """
        Initialize the store.

        Args:
            seed: Optional bookings to preload
        """
        self._records: Dict[int, BookingRecord] = {}
        self._next_id = 1

        for request in seed or ():
            self.insert_booking(request)

    def list_booked_times(self, day: str) -> Set[str]:
        return {record.time_slot for record in self._records.values() if record.date == day}

    def list_bookings(self, day: str) -> List[BookingRecord]:
        records = [record for record in self._records.values() if record.date == day]
        return sorted(records, key=lambda r: (r.time_slot, r.id))

    def insert_booking(self, request: BookingRequest) -> int:
        record = BookingRecord(
            id=self._next_id,
            date=request.date,
            time_slot=request.time_slot,
            customer_name=request.customer_name,
            customer_email=request.customer_email,
            customer_phone=request.customer_phone,
            created_at=datetime.now(),
        )
        self._records[record.id] = record
        self._next_id += 1
        return record.id
