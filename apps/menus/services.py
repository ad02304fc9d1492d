import logging

from django.db import transaction
from django.db.models import F, ProtectedError

from apps.common.constants import InventoryChangeType
from apps.common.exceptions import DomainError, InvalidState
from apps.menus.models import InventoryLog, MenuItem

logger = logging.getLogger(__name__)


@transaction.atomic
def restock(item_id, quantity: int, staff_id, note: str = "") -> MenuItem:
    """Add units to a finite stock limit and record who did it."""
    item = MenuItem.objects.select_for_update().get(pk=item_id)
    if not item.has_stock_limit:
        raise InvalidState(f"{item.name} has unlimited stock.")

    MenuItem.objects.filter(pk=item.pk).update(stock_limit=F("stock_limit") + quantity)
    item.refresh_from_db(fields=["stock_limit", "updated_at"])

    InventoryLog.objects.create(
        item=item,
        staff_id=staff_id,
        change_type=InventoryChangeType.RESTOCK,
        quantity=quantity,
        note=note,
    )
    logger.info("Restocked %s by %s (now %s)", item.pk, quantity, item.stock_limit)
    return item


def delete_item(item: MenuItem):
    try:
        item.delete()
    except ProtectedError as err:
        raise DomainError(f"{item.name} is referenced by existing orders or inventory logs.") from err
