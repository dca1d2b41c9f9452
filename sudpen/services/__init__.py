"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .booking import BookingService, BookingStoreProtocol

__all__ = ["BookingService", "BookingStoreProtocol"]
