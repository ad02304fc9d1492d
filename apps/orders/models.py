from django.conf import settings
from django.db import models

from apps.common.constants import CustomerType, OrderStatus, PaymentStatus, PickupType
from apps.common.models import BaseModel
from apps.menus.models import MenuItem


class Order(BaseModel):
    # null for walk-in orders recorded at the counter
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
        db_column="user_id",
    )
    status = models.CharField(max_length=20, choices=OrderStatus.choices, default=OrderStatus.PENDING)
    pickup_type = models.CharField(max_length=20, choices=PickupType.choices)
    pickup_time = models.DateTimeField(null=True, blank=True)
    total_price = models.DecimalField(max_digits=10, decimal_places=2)
    payment_status = models.CharField(max_length=20, choices=PaymentStatus.choices, default=PaymentStatus.PENDING)
    payment_confirmed = models.BooleanField(default=False)
    customer_name = models.CharField(max_length=150, blank=True)
    customer_type = models.CharField(max_length=20, choices=CustomerType.choices, default=CustomerType.STUDENT)
    processed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="processed_orders",
        db_column="processed_by_id",
    )

    class Meta:
        db_table = "order"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user"]),
            models.Index(fields=["status"]),
        ]

    @property
    def is_walk_in(self) -> bool:
        return self.user_id is None

    def __str__(self):
        return f"Order #{self.pk}"


class OrderItem(BaseModel):
    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="items",
        db_column="order_id",
    )
    menu_item = models.ForeignKey(
        MenuItem,
        on_delete=models.PROTECT,
        related_name="order_items",
        db_column="menu_item_id",
    )
    quantity = models.PositiveIntegerField()
    price_at_order = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = "order_item"
        ordering = ["created_at"]

    @property
    def line_total(self):
        return self.price_at_order * self.quantity

    def __str__(self):
        return f"{self.order} · {self.menu_item.name} × {self.quantity}"
