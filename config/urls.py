from django.contrib import admin
from django.urls import include, path
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenRefreshView

from accounts.api import LoginView, MeView
from bookings.api import BookingViewSet
from payments.api import PaymentByBookingView, PaymentView
from venues.api import VenueViewSet

router = DefaultRouter()
router.register(r"venues", VenueViewSet, basename="venue")
router.register(r"bookings", BookingViewSet, basename="booking")

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/login/", LoginView.as_view(), name="auth-login"),
    path("api/auth/refresh/", TokenRefreshView.as_view(), name="auth-refresh"),
    path("api/auth/me/", MeView.as_view(), name="auth-me"),
    path("api/payments/", PaymentView.as_view(), name="payment-process"),
    path(
        "api/payments/booking/<int:booking_id>/",
        PaymentByBookingView.as_view(),
        name="payment-by-booking",
    ),
    path("api/", include(router.urls)),
]
