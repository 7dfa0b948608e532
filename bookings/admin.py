from django.contrib import admin

from payments.models import Payment

from .models import Booking


class PaymentInline(admin.TabularInline):
    model = Payment
    extra = 0
    can_delete = False
    readonly_fields = ("amount", "method", "status", "payment_method", "transaction_id", "payment_date")

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ("venue", "user", "booking_date", "start_time", "court_number", "total_amount", "status")
    list_filter = ("status", "venue")
    search_fields = ("venue__name", "user__email")
    readonly_fields = ("total_amount", "created_at", "updated_at")
    inlines = [PaymentInline]
