import logging

from django.db.models import ProtectedError
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from accounts.permissions import IsVenueStaffOrReadOnly

from .models import Venue
from .serializers import VenueSearchSerializer, VenueSerializer

logger = logging.getLogger(__name__)


class VenueViewSet(viewsets.ModelViewSet):
    serializer_class = VenueSerializer
    permission_classes = [IsVenueStaffOrReadOnly]
    filterset_fields = ["sport_type", "location"]
    search_fields = ["name", "location", "sport_type", "description"]
    ordering_fields = ["name", "price_per_hour"]

    def get_queryset(self):
        return Venue.objects.all().order_by("name", "id")

    def perform_create(self, serializer):
        venue = serializer.save(manager=self.request.user)
        logger.info("Venue %s created by user %s", venue.pk, self.request.user.pk)

    def destroy(self, request, *args, **kwargs):
        venue = self.get_object()
        try:
            venue.delete()
        except ProtectedError:
            return Response(
                {"detail": "Venue has bookings and cannot be deleted."},
                status=status.HTTP_409_CONFLICT,
            )
        logger.info("Venue %s deleted by user %s", kwargs.get("pk"), request.user.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"], url_path="search")
    def search(self, request):
        """Case-insensitive substring match on name, location and sport type."""
        params = VenueSearchSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        queryset = self.get_queryset()
        for field, value in params.validated_data.items():
            value = value.strip()
            if value:
                queryset = queryset.filter(**{f"{field}__icontains": value})

        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)
