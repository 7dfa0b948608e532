from django.db import models
from django.utils import timezone


class Payment(models.Model):
    """A recorded charge against a booking. Rows are written once and never updated."""

    COMPLETED = "COMPLETED"

    booking = models.ForeignKey("bookings.Booking", on_delete=models.PROTECT, related_name="payments")
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    method = models.CharField(max_length=50)
    status = models.CharField(max_length=30, default=COMPLETED)
    payment_date = models.DateTimeField(default=timezone.now)
    payment_method = models.CharField(max_length=100)
    transaction_id = models.CharField(max_length=200, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-payment_date", "-id"]

    def __str__(self):
        return f"Payment {self.pk} for booking {self.booking_id} ({self.amount})"
