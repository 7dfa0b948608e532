from datetime import date, time
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from accounts.models import User
from bookings.models import Booking
from venues.models import Venue


@pytest.fixture
def player(db):
    return User.objects.create_user(
        username="player@example.com",
        email="player@example.com",
        password="examplepass",
        first_name="Pat",
        last_name="Player",
    )


@pytest.fixture
def venue_manager(db):
    return User.objects.create_user(
        username="manager@example.com",
        email="manager@example.com",
        password="examplepass",
        role=User.MANAGER,
    )


@pytest.fixture
def venue(db, venue_manager):
    return Venue.objects.create(
        name="Riverside Courts",
        location="Portland",
        sport_type="Tennis",
        total_courts=4,
        price_per_hour=Decimal("25.00"),
        opening_time=time(7, 0),
        closing_time=time(22, 0),
        manager=venue_manager,
    )


@pytest.fixture
def make_booking(player, venue):
    def _make_booking(*, total_amount="50.00", status=Booking.PENDING, pk=None, **overrides):
        fields = {
            "user": player,
            "venue": venue,
            "booking_date": date(2030, 5, 17),
            "start_time": time(18, 0),
            "end_time": time(20, 0),
            "court_number": 1,
            "total_amount": Decimal(total_amount),
            "status": status,
        }
        fields.update(overrides)
        if pk is not None:
            fields["pk"] = pk
        return Booking.objects.create(**fields)

    return _make_booking


@pytest.fixture
def player_client(player):
    client = APIClient()
    client.force_authenticate(player)
    return client
