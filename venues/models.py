from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Venue(models.Model):
    """A bookable sports facility with one or more courts."""

    name = models.CharField(max_length=200)
    location = models.CharField(max_length=255)
    sport_type = models.CharField(max_length=60)
    total_courts = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    facilities = models.TextField(blank=True)
    description = models.TextField(blank=True)
    image_url = models.URLField(blank=True)
    price_per_hour = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
    )
    opening_time = models.TimeField(null=True, blank=True)
    closing_time = models.TimeField(null=True, blank=True)
    manager = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="managed_venues",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name", "id"]

    def __str__(self):
        return f"{self.name} ({self.location})"
