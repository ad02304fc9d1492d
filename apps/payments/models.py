from django.conf import settings
from django.db import models

from apps.common.constants import PaymentMethod
from apps.common.models import BaseModel
from apps.orders.models import Order


class Payment(BaseModel):
    order = models.ForeignKey(
        Order,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="payments",
        db_column="order_id",
    )
    processed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="processed_payments",
        db_column="processed_by_id",
    )
    amount_due = models.DecimalField(max_digits=10, decimal_places=2)
    amount_received = models.DecimalField(max_digits=10, decimal_places=2)
    # received - due; negative when the customer underpaid
    change = models.DecimalField(max_digits=10, decimal_places=2)
    payment_method = models.CharField(max_length=10, choices=PaymentMethod.choices, default=PaymentMethod.CASH)

    class Meta:
        db_table = "payment"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["order"]),
            models.Index(fields=["created_at"]),
        ]

    def __str__(self):
        return f"{self.amount_received} ({self.payment_method}) • change {self.change}"
