from django.contrib.auth import get_user_model
from django.utils import timezone

from apps.common.constants import UserRole
from apps.menus.models import MenuItem
from apps.orders.models import Order

User = get_user_model()


def overview() -> dict:
    """Dashboard counts. Daily orders are those created since local midnight."""
    midnight = timezone.localtime().replace(hour=0, minute=0, second=0, microsecond=0)
    return {
        "active_staff": User.objects.filter(role=UserRole.STAFF, approved=True, is_active=True).count(),
        "daily_orders": Order.objects.filter(created_at__gte=midnight).count(),
        "menu_items": MenuItem.objects.count(),
        "student_users": User.objects.filter(role=UserRole.STUDENT).count(),
    }
