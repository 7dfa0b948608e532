from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    PLAYER = "USER"
    ROLES = [
        (ADMIN, "Admin"),
        (MANAGER, "Venue Manager"),
        (PLAYER, "User"),
    ]

    display_name = models.CharField(max_length=120, blank=True)
    role = models.CharField(max_length=20, choices=ROLES, default=PLAYER)

    @property
    def is_venue_staff(self) -> bool:
        return self.is_superuser or self.role in {self.ADMIN, self.MANAGER}
