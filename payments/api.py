import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.models import Booking

from .exceptions import BookingNotFound, PaymentError
from .serializers import PaymentRequestSerializer, PaymentSerializer
from .services.processor import get_payment_by_booking, process_payment

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Payment could not be processed."


def can_access_booking(user, booking_id: int) -> bool:
    """Players reach their own bookings only; venue staff reach every booking."""
    if user.is_venue_staff:
        return True
    return Booking.objects.filter(pk=booking_id, user=user).exists()


class PaymentView(APIView):
    """Record a payment for a booking and confirm it."""

    def post(self, request, *args, **kwargs):
        serializer = PaymentRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"error": "Invalid payment request.", "fields": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        booking_id = serializer.validated_data["booking_id"]
        try:
            # Someone else's booking is reported exactly like a missing one.
            if not can_access_booking(request.user, booking_id):
                raise BookingNotFound()
            payment = process_payment(**serializer.validated_data)
        except PaymentError as exc:
            return Response({"error": exc.message}, status=exc.status_code)
        except Exception:
            logger.exception("Failed to process payment for booking %s", booking_id)
            return Response(
                {"error": GENERIC_FAILURE},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(PaymentSerializer(payment).data, status=status.HTTP_201_CREATED)


class PaymentByBookingView(APIView):
    def get(self, request, booking_id, *args, **kwargs):
        try:
            payment = None
            if can_access_booking(request.user, booking_id):
                payment = get_payment_by_booking(booking_id)
        except Exception:
            logger.exception("Failed to load payment for booking %s", booking_id)
            return Response(
                {"error": GENERIC_FAILURE},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if payment is None:
            return Response({"error": "Payment not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(PaymentSerializer(payment).data)
