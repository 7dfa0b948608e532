from __future__ import annotations

import logging
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from bookings.models import Booking
from payments.exceptions import AmountMismatch, BookingNotFound, BookingNotPayable
from payments.models import Payment

logger = logging.getLogger(__name__)


def resolve_payment_date(value: Optional[str]) -> datetime:
    """
    Parse a client-supplied ISO-8601 timestamp.

    Malformed or out-of-range values never abort a payment: they are logged
    and replaced with the current server time. Accepted values are returned
    in UTC so they are known to be storable.
    """

    now = timezone.now()
    if not value or not value.strip():
        return now

    try:
        parsed = parse_datetime(value.strip())
        if parsed is not None:
            if timezone.is_naive(parsed):
                parsed = timezone.make_aware(parsed)
            parsed = parsed.astimezone(dt_timezone.utc)
    except (ValueError, OverflowError):
        parsed = None

    if parsed is None:
        logger.warning("Ignoring malformed payment date %r, using server time.", value)
        return now
    return parsed


def process_payment(
    *,
    booking_id: int,
    amount: Decimal,
    method: str,
    payment_method: str,
    status: Optional[str] = None,
    payment_date: Optional[str] = None,
    transaction_id: Optional[str] = None,
) -> Payment:
    """
    Record a payment against a booking and confirm the booking.

    The booking row is locked for the whole unit of work, and the payment
    insert and booking update commit or roll back together.
    """

    amount = Decimal(amount)
    paid_at = resolve_payment_date(payment_date)

    with transaction.atomic():
        try:
            booking = Booking.objects.select_for_update().get(pk=booking_id)
        except Booking.DoesNotExist:
            logger.warning("Payment rejected: booking %s does not exist.", booking_id)
            raise BookingNotFound()

        if not booking.is_payable:
            logger.warning("Payment rejected: booking %s is %s.", booking.pk, booking.status)
            raise BookingNotPayable()

        if amount != booking.total_amount:
            logger.warning(
                "Payment rejected: amount %s does not match booking %s total %s.",
                amount,
                booking.pk,
                booking.total_amount,
            )
            raise AmountMismatch()

        payment = Payment.objects.create(
            booking=booking,
            amount=amount,
            method=method,
            status=(status or "").strip() or Payment.COMPLETED,
            payment_date=paid_at,
            payment_method=payment_method,
            transaction_id=transaction_id or None,
        )

        booking.status = Booking.CONFIRMED
        booking.save(update_fields=["status", "updated_at"])

    logger.info(
        "Payment %s of %s recorded for booking %s (transaction %s).",
        payment.pk,
        payment.amount,
        booking.pk,
        payment.transaction_id or "-",
    )
    return payment


def get_payment_by_booking(booking_id: int) -> Payment | None:
    """Return the most recently recorded payment for a booking, if any."""
    return (
        Payment.objects.select_related("booking")
        .filter(booking_id=booking_id)
        .order_by("-id")
        .first()
    )
