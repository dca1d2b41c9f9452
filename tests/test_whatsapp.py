"""
Tests for the WhatsApp hand-off.
"""

from datetime import date
from urllib.parse import parse_qs, urlparse

import pytest

from sudpen.adapters.whatsapp import (
    build_booking_message,
    build_whatsapp_link,
    format_booking_date,
    normalize_contact_number,
)


def test_format_booking_date_italian():
    assert format_booking_date(date(2026, 10, 19)) == "19 ottobre"
    assert format_booking_date(date(2024, 3, 5)) == "5 marzo"


def test_booking_message():
    message = build_booking_message("09:00", date(2026, 10, 19))
    assert message == "prenotazione ritiro a partire dalle ore : 09:00 del 19 ottobre"


def test_link_is_uri_component_encoded():
    """Spaces and colons are percent-encoded like encodeURIComponent does."""
    url = build_whatsapp_link("3917972545", "09:00", date(2026, 10, 19))

    assert url == (
        "https://wa.me/3917972545?text="
        "prenotazione%20ritiro%20a%20partire%20dalle%20ore%20%3A%2009%3A00%20del%2019%20ottobre"
    )


def test_link_round_trips_chosen_time_and_date():
    url = build_whatsapp_link("+39 391-797-2545", "19:30", date(2024, 11, 27))
    parsed = urlparse(url)

    assert parsed.path == "/393917972545"
    assert parse_qs(parsed.query)["text"] == [
        "prenotazione ritiro a partire dalle ore : 19:30 del 27 novembre"
    ]


@pytest.mark.parametrize("number", ["", "39abc", "39/123"])
def test_invalid_contact_number(number):
    with pytest.raises(ValueError, match="Invalid WhatsApp contact number"):
        normalize_contact_number(number)
