import logging

from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.common.constants import NotificationStatus
from apps.notifications.models import Notification

logger = logging.getLogger(__name__)


def notify(user_id, message: str, order=None) -> Notification | None:
    """
    Write a feed entry for ``user_id``.

    Best-effort: a failed insert is logged and swallowed so the caller's own
    work is never undone by the feed.
    """
    try:
        with transaction.atomic():
            return Notification.objects.create(user_id=user_id, order=order, message=message)
    except DatabaseError:
        logger.warning("Could not create notification for user %s", user_id, exc_info=True)
        return None


def mark_read(notification: Notification) -> Notification:
    if notification.status != NotificationStatus.READ:
        notification.status = NotificationStatus.READ
        notification.save(update_fields=["status", "updated_at"])
    return notification


def mark_all_read(user_id) -> int:
    return Notification.objects.filter(user_id=user_id, status=NotificationStatus.UNREAD).update(
        status=NotificationStatus.READ, updated_at=timezone.now()
    )


def unread_count(user_id) -> int:
    return Notification.objects.filter(user_id=user_id, status=NotificationStatus.UNREAD).count()
