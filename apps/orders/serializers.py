from rest_framework import serializers

from apps.common.constants import OrderStatus, PickupType
from apps.orders.models import Order, OrderItem


class OrderLineSerializer(serializers.Serializer):
    menu_item_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1)


class OrderCreateSerializer(serializers.Serializer):
    items = OrderLineSerializer(many=True, allow_empty=False)
    pickup_type = serializers.ChoiceField(choices=PickupType.choices)
    pickup_time = serializers.DateTimeField(required=False, allow_null=True)


class WalkInOrderCreateSerializer(OrderCreateSerializer):
    customer_name = serializers.CharField(max_length=150, required=False, allow_blank=True, default="")


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices)


class OrderItemSerializer(serializers.ModelSerializer):
    menu_item_name = serializers.CharField(source="menu_item.name", read_only=True)

    class Meta:
        model = OrderItem
        fields = ["id", "menu_item", "menu_item_name", "quantity", "price_at_order"]


class OrderSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "user",
            "status",
            "pickup_type",
            "pickup_time",
            "total_price",
            "payment_status",
            "payment_confirmed",
            "customer_name",
            "customer_type",
            "processed_by",
            "items",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
