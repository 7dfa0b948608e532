from rest_framework import serializers

from venues.models import Venue

from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    venue_name = serializers.CharField(source="venue.name", read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "venue",
            "venue_name",
            "booking_date",
            "start_time",
            "end_time",
            "court_number",
            "total_amount",
            "status",
            "created_at",
        ]
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    venue = serializers.PrimaryKeyRelatedField(queryset=Venue.objects.all())
    booking_date = serializers.DateField()
    start_time = serializers.TimeField()
    end_time = serializers.TimeField()
    court_number = serializers.IntegerField(min_value=1, required=False, default=1)

    def validate(self, attrs):
        venue: Venue = attrs["venue"]
        start, end = attrs["start_time"], attrs["end_time"]
        if end <= start:
            raise serializers.ValidationError({"end_time": "Booking must end after it starts."})

        if attrs["court_number"] > venue.total_courts:
            raise serializers.ValidationError(
                {"court_number": f"{venue.name} only has {venue.total_courts} court(s)."}
            )

        if venue.opening_time and start < venue.opening_time:
            raise serializers.ValidationError({"start_time": "Venue is not open yet at this time."})
        if venue.closing_time and end > venue.closing_time:
            raise serializers.ValidationError({"end_time": "Venue closes before this time."})

        overlapping = (
            Booking.objects.filter(
                venue=venue,
                court_number=attrs["court_number"],
                booking_date=attrs["booking_date"],
                start_time__lt=end,
                end_time__gt=start,
            )
            .exclude(status=Booking.CANCELLED)
            .exists()
        )
        if overlapping:
            raise serializers.ValidationError("This court is already booked for the requested time.")
        return attrs
