"""
Adapters layer - External integrations (appointment store, WhatsApp).
"""

from .memory_store import InMemoryBookingStore
from .sql_store import SqlBookingStore
from .whatsapp import build_whatsapp_link

__all__ = ["InMemoryBookingStore", "SqlBookingStore", "build_whatsapp_link"]
