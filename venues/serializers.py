from rest_framework import serializers

from .models import Venue


class VenueSerializer(serializers.ModelSerializer):
    class Meta:
        model = Venue
        fields = [
            "id",
            "name",
            "location",
            "sport_type",
            "total_courts",
            "facilities",
            "description",
            "image_url",
            "price_per_hour",
            "opening_time",
            "closing_time",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate(self, attrs):
        opening = attrs.get("opening_time", getattr(self.instance, "opening_time", None))
        closing = attrs.get("closing_time", getattr(self.instance, "closing_time", None))
        if opening and closing and closing <= opening:
            raise serializers.ValidationError(
                {"closing_time": "Closing time must be after opening time."}
            )
        return attrs


class VenueSearchSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(required=False, allow_blank=True)
    sportType = serializers.CharField(required=False, allow_blank=True, source="sport_type")
