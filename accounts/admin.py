from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import User


@admin.register(User)
class CourtsideUserAdmin(UserAdmin):
    list_display = ("username", "email", "display_name", "role", "is_active")
    list_filter = ("role", "is_active", "is_staff")
    fieldsets = UserAdmin.fieldsets + (("Courtside", {"fields": ("display_name", "role")}),)
