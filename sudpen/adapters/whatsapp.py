"""
WhatsApp deep links used to hand a chosen slot over to the front desk.
"""

import re
from datetime import date
from urllib.parse import quote

import pendulum

WHATSAPP_BASE_URL = "https://wa.me"

# Characters left unescaped by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"

_CONTACT_SEPARATORS = re.compile(r"[\s\-+]")


def normalize_contact_number(contact_number: str) -> str:
    """
    Strip separators from a phone number and ensure only digits remain.

    Raises:
        ValueError: If the number contains anything but digits and separators
    """
    digits = _CONTACT_SEPARATORS.sub("", contact_number or "")
    if not digits.isdigit():
        raise ValueError(f"Invalid WhatsApp contact number: {contact_number!r}")
    return digits


def format_booking_date(day: date, locale: str = "it") -> str:
    """Format a date as day and month name, e.g. '19 ottobre'."""
    return pendulum.date(day.year, day.month, day.day).format("D MMMM", locale=locale)


def build_booking_message(time_label: str, day: date, locale: str = "it") -> str:
    """Build the text the customer sends to request a slot."""
    return (
        f"prenotazione ritiro a partire dalle ore : {time_label} "
        f"del {format_booking_date(day, locale)}"
    )


def build_whatsapp_link(
    contact_number: str,
    time_label: str,
    day: date,
    locale: str = "it"
) -> str:
    """
    Build a wa.me link that opens a chat prefilled with the booking request.

    Args:
        contact_number: Front desk number, international format without '+'
        time_label: Chosen slot as HH:MM
        day: Chosen date
        locale: Locale for the month name

    Returns:
        The deep link URL
    """
    number = normalize_contact_number(contact_number)
    message = build_booking_message(time_label, day, locale)
    return f"{WHATSAPP_BASE_URL}/{number}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"
