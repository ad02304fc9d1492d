from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from apps.common.constants import InventoryChangeType
from apps.common.models import BaseModel


class Category(BaseModel):
    name = models.CharField(max_length=120, unique=True)
    description = models.TextField(blank=True)

    class Meta:
        db_table = "menu_category"
        ordering = ("name",)
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name


class MenuItem(BaseModel):
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="items",
        db_column="category_id",
    )
    name = models.CharField(max_length=150)
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    photo_url = models.URLField(max_length=500, blank=True)
    availability = models.BooleanField(default=True)
    # null means unlimited
    stock_limit = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        db_table = "menu_item"
        ordering = ("name",)
        indexes = [
            models.Index(fields=["category"]),
            models.Index(fields=["name"]),
        ]

    @property
    def has_stock_limit(self) -> bool:
        return self.stock_limit is not None

    def __str__(self):
        return self.name


class InventoryLog(BaseModel):
    item = models.ForeignKey(
        MenuItem,
        on_delete=models.PROTECT,
        related_name="inventory_logs",
        db_column="item_id",
    )
    staff = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="inventory_logs",
        db_column="staff_id",
    )
    change_type = models.CharField(max_length=20, choices=InventoryChangeType.choices)
    quantity = models.PositiveIntegerField()
    note = models.CharField(max_length=255, blank=True)

    class Meta:
        db_table = "inventory_log"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["item", "created_at"]),
            models.Index(fields=["change_type"]),
        ]

    def __str__(self):
        return f"{self.change_type} {self.item} × {self.quantity}"
