from django.contrib import admin

from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ("id", "booking", "amount", "method", "payment_method", "status", "payment_date")
    list_filter = ("status", "method")
    search_fields = ("transaction_id", "booking__venue__name", "booking__user__email")
    readonly_fields = (
        "booking",
        "amount",
        "method",
        "status",
        "payment_date",
        "payment_method",
        "transaction_id",
        "created_at",
    )

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
