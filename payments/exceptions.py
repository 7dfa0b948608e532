from rest_framework import status


class PaymentError(Exception):
    """Business-rule rejection raised by the payment processor."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Payment could not be processed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BookingNotFound(PaymentError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Booking not found"


class BookingNotPayable(PaymentError):
    default_message = "Booking cannot be paid in its current state"


class AmountMismatch(PaymentError):
    default_message = "Payment amount does not match booking amount"
