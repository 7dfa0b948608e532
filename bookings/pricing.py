from __future__ import annotations

from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
SECONDS_PER_HOUR = Decimal(3600)


def booked_hours(start_time: time, end_time: time) -> Decimal:
    """Length of a same-day slot in hours; zero or negative when the slot is empty."""
    start = datetime.combine(date.min, start_time)
    end = datetime.combine(date.min, end_time)
    return Decimal((end - start).total_seconds()) / SECONDS_PER_HOUR


def calculate_total_amount(price_per_hour: Decimal, start_time: time, end_time: time) -> Decimal:
    hours = booked_hours(start_time, end_time)
    if hours <= 0:
        raise ValueError("Booking must end after it starts.")
    return (Decimal(price_per_hour) * hours).quantize(CENT, rounding=ROUND_HALF_UP)
