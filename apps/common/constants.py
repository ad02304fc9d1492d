from django.db import models


class UserRole(models.TextChoices):
    STUDENT = "student", "Student"
    STAFF = "staff", "Staff"
    ADMIN = "admin", "Administrator"


class OrderStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    CONFIRMED = "confirmed", "Confirmed"
    PREPARING = "preparing", "Preparing"
    READY = "ready", "Ready"
    PICKED_UP = "picked_up", "Picked up"
    REJECTED = "rejected", "Rejected"


class PickupType(models.TextChoices):
    DINE_IN = "dine_in", "Dine in"
    TAKE_OUT = "take_out", "Take out"


class PaymentStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    CASH_ON_PICKUP = "cash_on_pickup", "Cash on pickup"
    PAID = "paid", "Paid"


class PaymentMethod(models.TextChoices):
    CASH = "cash", "Cash"
    GCASH = "gcash", "GCash"
    CARD = "card", "Card"


class CustomerType(models.TextChoices):
    STUDENT = "student", "Student"
    WALK_IN = "walk_in", "Walk-in"


class NotificationStatus(models.TextChoices):
    UNREAD = "unread", "Unread"
    READ = "read", "Read"


class InventoryChangeType(models.TextChoices):
    RESTOCK = "restock", "Restock"
    DEDUCT = "deduct", "Deduct"


STAFF_ROLES = (UserRole.STAFF, UserRole.ADMIN)
ALL_ROLES = tuple(UserRole)
