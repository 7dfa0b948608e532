from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import User
from venues.models import Venue


@pytest.fixture
def staff_client(venue_manager):
    client = APIClient()
    client.force_authenticate(venue_manager)
    return client


@pytest.fixture
def more_venues(venue):
    Venue.objects.create(
        name="Eastside Arena",
        location="Seattle",
        sport_type="Basketball",
        total_courts=2,
        price_per_hour=Decimal("40.00"),
    )
    Venue.objects.create(
        name="Lakeside Tennis Center",
        location="Seattle",
        sport_type="Tennis",
        total_courts=6,
        price_per_hour=Decimal("35.00"),
    )


def _venue_payload(**overrides):
    payload = {
        "name": "Northgate Futsal",
        "location": "Tacoma",
        "sport_type": "Futsal",
        "total_courts": 1,
        "price_per_hour": "60.00",
        "opening_time": "09:00",
        "closing_time": "23:00",
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
def test_staff_can_create_venue(staff_client, venue_manager):
    response = staff_client.post(reverse("venue-list"), _venue_payload(), format="json")

    assert response.status_code == 201
    venue = Venue.objects.get(pk=response.json()["id"])
    assert venue.manager == venue_manager
    assert "manager" not in response.json()


@pytest.mark.django_db
def test_players_cannot_modify_venues(player_client, venue):
    create_response = player_client.post(reverse("venue-list"), _venue_payload(), format="json")
    update_response = player_client.patch(
        reverse("venue-detail", args=[venue.id]), {"price_per_hour": "1.00"}, format="json"
    )
    delete_response = player_client.delete(reverse("venue-detail", args=[venue.id]))

    assert create_response.status_code == 403
    assert update_response.status_code == 403
    assert delete_response.status_code == 403
    venue.refresh_from_db()
    assert venue.price_per_hour == Decimal("25.00")


@pytest.mark.django_db
def test_players_can_browse_venues(player_client, venue):
    list_response = player_client.get(reverse("venue-list"))
    detail_response = player_client.get(reverse("venue-detail", args=[venue.id]))

    assert list_response.status_code == 200
    assert [item["name"] for item in list_response.json()] == ["Riverside Courts"]
    assert detail_response.json()["price_per_hour"] == "25.00"


@pytest.mark.django_db
def test_admin_role_can_update_venue(venue):
    admin = User.objects.create_user(
        username="admin@example.com", email="admin@example.com", password="x", role=User.ADMIN
    )
    client = APIClient()
    client.force_authenticate(admin)

    response = client.patch(
        reverse("venue-detail", args=[venue.id]), {"total_courts": 6}, format="json"
    )

    assert response.status_code == 200
    venue.refresh_from_db()
    assert venue.total_courts == 6


@pytest.mark.django_db
def test_closing_time_must_follow_opening_time(staff_client):
    response = staff_client.post(
        reverse("venue-list"),
        _venue_payload(opening_time="20:00", closing_time="08:00"),
        format="json",
    )

    assert response.status_code == 400
    assert "closing_time" in response.json()


@pytest.mark.django_db
@pytest.mark.parametrize(
    "params, expected",
    [
        ({"name": "side"}, ["Eastside Arena", "Lakeside Tennis Center", "Riverside Courts"]),
        ({"location": "seattle"}, ["Eastside Arena", "Lakeside Tennis Center"]),
        ({"sportType": "TENNIS"}, ["Lakeside Tennis Center", "Riverside Courts"]),
        ({"location": "seattle", "sportType": "tennis"}, ["Lakeside Tennis Center"]),
        ({"name": "  "}, ["Eastside Arena", "Lakeside Tennis Center", "Riverside Courts"]),
        ({"name": "stadium"}, []),
    ],
)
def test_search_venues(player_client, more_venues, params, expected):
    response = player_client.get(reverse("venue-search"), params)

    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == expected


@pytest.mark.django_db
def test_venue_with_bookings_cannot_be_deleted(staff_client, venue, make_booking):
    make_booking()

    response = staff_client.delete(reverse("venue-detail", args=[venue.id]))

    assert response.status_code == 409
    assert Venue.objects.filter(pk=venue.pk).exists()


@pytest.mark.django_db
def test_delete_venue(staff_client, venue):
    response = staff_client.delete(reverse("venue-detail", args=[venue.id]))

    assert response.status_code == 204
    assert not Venue.objects.exists()
