from rest_framework.permissions import SAFE_METHODS, BasePermission


class IsVenueStaff(BasePermission):
    """
    Allow access only to admins and venue managers.
    Superusers automatically pass.
    """

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return user.is_venue_staff


class IsVenueStaffOrReadOnly(IsVenueStaff):
    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return super().has_permission(request, view)
