from decimal import Decimal

from rest_framework import serializers

from apps.common.constants import CustomerType, PaymentMethod
from apps.payments.models import Payment
from apps.payments.services import record_payment


class PaymentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Payment
        fields = [
            "id",
            "order",
            "amount_due",
            "amount_received",
            "change",
            "payment_method",
            "processed_by",
            "created_at",
        ]
        read_only_fields = fields


class PaymentCreateSerializer(serializers.ModelSerializer):
    order_id = serializers.UUIDField(write_only=True, required=False, allow_null=True)
    amount_received = serializers.DecimalField(max_digits=10, decimal_places=2)
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices, default=PaymentMethod.CASH)
    customer_name = serializers.CharField(max_length=150, write_only=True, required=False, allow_blank=True)
    customer_type = serializers.ChoiceField(choices=CustomerType.choices, write_only=True, required=False)

    class Meta:
        model = Payment
        fields = [
            "id",
            "order_id",
            "order",
            "amount_due",
            "amount_received",
            "change",
            "payment_method",
            "customer_name",
            "customer_type",
            "processed_by",
            "created_at",
        ]
        read_only_fields = ["id", "order", "amount_due", "change", "processed_by", "created_at"]

    def validate_amount_received(self, value: Decimal):
        if value == 0:
            raise serializers.ValidationError("Amount received is required.")
        return value

    def create(self, validated_data):
        return record_payment(processed_by_id=self.context["request"].user.id, **validated_data)
