"""
Appointment store backed by SQLAlchemy (SQLite by default).
"""

from __future__ import annotations

import logging
from typing import List, Set

from sqlalchemy import Column, DateTime, Integer, String, create_engine, event, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from ..domain.exceptions import StoreUnavailable
from ..domain.models import BookingRecord, BookingRequest

logger = logging.getLogger(__name__)

Base = declarative_base()


class Appointment(Base):
    """A confirmed booking."""

    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_name = Column("customerName", String, nullable=False)
    customer_email = Column("customerEmail", String, nullable=False)
    customer_phone = Column("customerPhone", String, nullable=True)
    date = Column(String, nullable=False, index=True)  # YYYY-MM-DD
    time_slot = Column("timeSlot", String, nullable=False)  # HH:MM
    created_at = Column("createdAt", DateTime, server_default=func.now())

    def __repr__(self):
        return f"<Appointment {self.date} {self.time_slot} ({self.customer_name})>"

    def to_record(self) -> BookingRecord:
        return BookingRecord(
            id=self.id,
            date=self.date,
            time_slot=self.time_slot,
            customer_name=self.customer_name,
            customer_email=self.customer_email,
            customer_phone=self.customer_phone,
            created_at=self.created_at,
        )


def _enable_wal(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


class SqlBookingStore:
    """
    Store for appointments in a relational database.

    Writes are serialized by the database itself; the store makes no attempt
    to lock slots between reading availability and inserting a booking.
    """

    def __init__(self, database_url: str = "sqlite:///sudpen.db", echo: bool = False):
        """
        Initialize the store and create the schema if needed.

        Args:
            database_url: SQLAlchemy database URL
            echo: Log every SQL statement

        Raises:
            StoreUnavailable: If the database cannot be opened
        """
        self.database_url = database_url

        try:
            if database_url.startswith("sqlite"):
                self.engine = create_engine(
                    database_url,
                    connect_args={"check_same_thread": False},
                    echo=echo
                )
                event.listen(self.engine, "connect", _enable_wal)
            else:
                self.engine = create_engine(database_url, pool_pre_ping=True, echo=echo)
        except (SQLAlchemyError, ImportError) as exc:
            # unknown dialect, malformed URL or missing database driver
            raise StoreUnavailable(f"Could not open appointment store {database_url}: {exc}") from exc

        self._session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False
        )

        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as exc:
            raise StoreUnavailable(f"Could not initialise appointment store: {exc}") from exc

    def list_booked_times(self, day: str) -> Set[str]:
        """Return the time slots already booked on a YYYY-MM-DD date."""
        query = select(Appointment.time_slot).where(Appointment.date == day)

        try:
            with self._session_factory() as session:
                return set(session.execute(query).scalars().all())
        except SQLAlchemyError as exc:
            logger.error("Failed to read bookings for %s: %s", day, exc)
            raise StoreUnavailable(f"Could not read bookings for {day}") from exc

    def list_bookings(self, day: str) -> List[BookingRecord]:
        """Return the bookings of a date ordered by time slot."""
        query = (
            select(Appointment)
            .where(Appointment.date == day)
            .order_by(Appointment.time_slot, Appointment.id)
        )

        try:
            with self._session_factory() as session:
                return [row.to_record() for row in session.execute(query).scalars().all()]
        except SQLAlchemyError as exc:
            logger.error("Failed to read bookings for %s: %s", day, exc)
            raise StoreUnavailable(f"Could not read bookings for {day}") from exc

    def insert_booking(self, request: BookingRequest) -> int:
        """
        Persist a booking.

        Returns:
            Id of the new appointment row

        Raises:
            StoreUnavailable: If the insert fails
        """
        appointment = Appointment(
            customer_name=request.customer_name,
            customer_email=request.customer_email,
            customer_phone=request.customer_phone,
            date=request.date,
            time_slot=request.time_slot,
        )

        try:
            with self._session_factory() as session:
                session.add(appointment)
                session.commit()
                return appointment.id
        except SQLAlchemyError as exc:
            logger.error("Booking insert failed for %s %s: %s", request.date, request.time_slot, exc)
            raise StoreUnavailable("Failed to book appointment") from exc

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()
