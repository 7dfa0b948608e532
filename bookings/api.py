import logging

from django.utils import timezone
from rest_framework import mixins, permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .models import Booking
from .pricing import calculate_total_amount
from .serializers import BookingCreateSerializer, BookingSerializer

logger = logging.getLogger(__name__)


class BookingViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_fields = ["status", "venue", "booking_date"]
    ordering_fields = ["booking_date", "created_at"]

    def get_queryset(self):
        user = self.request.user
        queryset = Booking.objects.select_related("venue").order_by("booking_date", "start_time", "id")
        if user.is_venue_staff:
            return queryset
        return queryset.filter(user=user)

    def create(self, request, *args, **kwargs):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        venue = data["venue"]

        booking = Booking.objects.create(
            user=request.user,
            venue=venue,
            booking_date=data["booking_date"],
            start_time=data["start_time"],
            end_time=data["end_time"],
            court_number=data["court_number"],
            total_amount=calculate_total_amount(venue.price_per_hour, data["start_time"], data["end_time"]),
            status=Booking.PENDING,
        )
        logger.info(
            "Booking %s created for venue %s (total %s)", booking.pk, venue.pk, booking.total_amount
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):
        booking = self.get_object()
        # Only a booking still PENDING at write time is cancelled; a payment
        # committed after the read above wins.
        cancelled = Booking.objects.filter(pk=booking.pk, status=Booking.PENDING).update(
            status=Booking.CANCELLED, updated_at=timezone.now()
        )
        if not cancelled:
            return Response(
                {"detail": "Only pending bookings can be cancelled."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        booking.refresh_from_db()
        logger.info("Booking %s cancelled by user %s", booking.pk, request.user.pk)
        return Response(BookingSerializer(booking).data)
