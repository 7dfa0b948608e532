import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from accounts.models import User


def _member(role=User.PLAYER, **extra):
    email = f"{role.lower()}@courts.test"
    return User.objects.create_user(username=email, email=email, password="courtpass1", role=role, **extra)


@pytest.mark.django_db
@pytest.mark.parametrize(
    "role, superuser, expected",
    [
        (User.ADMIN, False, True),
        (User.MANAGER, False, True),
        (User.PLAYER, False, False),
        (User.PLAYER, True, True),
    ],
)
def test_is_venue_staff_follows_role(role, superuser, expected):
    user = _member(role, is_superuser=superuser)

    assert user.is_venue_staff is expected


@pytest.mark.django_db
def test_new_users_are_players():
    user = User.objects.create_user(username="new@courts.test", password="courtpass1")

    assert user.role == User.PLAYER


@pytest.mark.django_db
@pytest.mark.parametrize(
    "role, expected_status",
    [(User.ADMIN, 201), (User.MANAGER, 201), (User.PLAYER, 403)],
)
def test_venue_writes_depend_on_role(role, expected_status):
    client = APIClient()
    client.force_authenticate(_member(role))

    response = client.post(
        reverse("venue-list"),
        {"name": "Court 9", "location": "Boise", "sport_type": "Squash", "price_per_hour": "12.00"},
        format="json",
    )

    assert response.status_code == expected_status


@pytest.mark.django_db
def test_login_with_email_returns_tokens_and_role():
    _member(User.MANAGER)

    response = APIClient().post(
        reverse("auth-login"),
        {"email": "MANAGER@courts.test", "password": "courtpass1"},
        format="json",
    )

    assert response.status_code == 200
    body = response.json()
    assert body["access"] and body["refresh"]
    assert body["user"]["role"] == User.MANAGER
    assert body["user"]["is_venue_staff"] is True


@pytest.mark.django_db
@pytest.mark.parametrize("email", ["user@courts.test", "nobody@courts.test"])
def test_login_rejects_bad_credentials(email):
    _member()

    response = APIClient().post(
        reverse("auth-login"), {"email": email, "password": "wrong-pass"}, format="json"
    )

    assert response.status_code == 401


@pytest.mark.django_db
def test_access_token_authenticates_me_endpoint():
    _member()
    client = APIClient()
    login = client.post(
        reverse("auth-login"), {"email": "user@courts.test", "password": "courtpass1"}, format="json"
    ).json()

    anonymous = client.get(reverse("auth-me"))
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {login['access']}")
    me = client.get(reverse("auth-me"))

    assert anonymous.status_code == 401
    assert me.status_code == 200
    assert me.json()["role"] == User.PLAYER


@pytest.mark.django_db
def test_role_and_email_cannot_be_changed_through_me():
    user = _member()
    client = APIClient()
    client.force_authenticate(user)

    response = client.patch(
        reverse("auth-me"),
        {"role": User.ADMIN, "email": "boss@courts.test", "display_name": "Court Regular"},
        format="json",
    )

    assert response.status_code == 200
    assert response.json()["display_name"] == "Court Regular"
    user.refresh_from_db()
    assert user.role == User.PLAYER
    assert user.email == "user@courts.test"
    assert user.is_venue_staff is False
