from rest_framework import serializers

from .models import Payment

RAW_CARD_FIELDS = {"cardNumber", "cvv", "expiryDate"}
# Booking primary keys are BigAutoField (signed 64-bit).
MAX_BOOKING_ID = 2**63 - 1


class PaymentRequestSerializer(serializers.Serializer):
    """Incoming payment request. Keys are camelCase to match the public contract."""

    bookingId = serializers.IntegerField(source="booking_id", min_value=1, max_value=MAX_BOOKING_ID)
    amount = serializers.DecimalField(max_digits=None, decimal_places=None)
    method = serializers.CharField(max_length=50)
    status = serializers.CharField(max_length=30, required=False, allow_blank=True)
    paymentDate = serializers.CharField(
        source="payment_date", required=False, allow_blank=True, allow_null=True
    )
    paymentMethod = serializers.CharField(source="payment_method", max_length=100)
    transactionId = serializers.CharField(
        source="transaction_id", max_length=200, required=False, allow_blank=True, allow_null=True
    )

    def validate(self, attrs):
        submitted_card_fields = RAW_CARD_FIELDS.intersection(self.initial_data)
        if submitted_card_fields:
            raise serializers.ValidationError(
                "Raw card details are not accepted; submit a tokenized payment method instead."
            )
        return attrs


class PaymentSerializer(serializers.ModelSerializer):
    """Flattened projection of a payment; never includes the booking graph."""

    paymentMethod = serializers.CharField(source="payment_method", read_only=True)
    transactionId = serializers.CharField(source="transaction_id", read_only=True)
    bookingId = serializers.IntegerField(source="booking_id", read_only=True)

    class Meta:
        model = Payment
        fields = [
            "id",
            "amount",
            "method",
            "status",
            "paymentMethod",
            "transactionId",
            "bookingId",
        ]
        read_only_fields = fields
