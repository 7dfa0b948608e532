from django.contrib import admin

from .models import Venue


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    list_display = ("name", "location", "sport_type", "total_courts", "price_per_hour", "manager")
    list_filter = ("sport_type",)
    search_fields = ("name", "location", "sport_type")
