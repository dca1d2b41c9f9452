"""
Domain-specific exception hierarchy for the booking application.
"""


class BookingError(Exception):
    """Base class for all application-level errors."""


class InvalidInput(BookingError, ValueError):
    """Raised when a date, time or booking field cannot be accepted."""


class StoreUnavailable(BookingError):
    """Raised when the appointment store cannot be read or written."""


class SlotAlreadyBooked(BookingError):
    """Raised when the requested slot already has a reservation."""
