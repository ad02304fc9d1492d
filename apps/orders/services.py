"""
Order engine.

Placing an order is a two-phase affair: a cheap read-only validation pass that
rejects bad carts before anything is locked, then one atomic block that locks the
referenced menu rows, snapshots prices, writes the order and decrements stock with
a guarded ``UPDATE``. The guarded update is what keeps stock from ever going
negative when two carts race for the last units; the pre-check only exists to
fail fast with a precise error.
"""

import logging
from collections import OrderedDict
from decimal import Decimal

from django.db import transaction
from django.db.models import F

from apps.common.constants import CustomerType, InventoryChangeType, OrderStatus
from apps.common.exceptions import InsufficientStock, InvalidState, ItemNotFound, ItemUnavailable
from apps.menus.models import InventoryLog, MenuItem
from apps.notifications.services import notify
from apps.orders.models import Order, OrderItem

logger = logging.getLogger(__name__)


def _merge_lines(items) -> "OrderedDict":
    """Collapse repeated menu items into one quantity per item, keeping first-seen order."""
    lines = OrderedDict()
    for line in items:
        lines[line["menu_item_id"]] = lines.get(line["menu_item_id"], 0) + line["quantity"]
    return lines


def _check_lines(lines, menu_items: dict):
    for item_id, quantity in lines.items():
        item = menu_items.get(item_id)
        if item is None:
            raise ItemNotFound(f"Menu item {item_id} not found.")
        if not item.availability:
            raise ItemUnavailable(f"{item.name} is not available.")
        if item.has_stock_limit and item.stock_limit < quantity:
            raise InsufficientStock(f"Only {item.stock_limit} left for {item.name}.")


def _decrement_stock(item: MenuItem, quantity: int):
    updated = MenuItem.objects.filter(pk=item.pk, stock_limit__gte=quantity).update(
        stock_limit=F("stock_limit") - quantity
    )
    if not updated:
        raise InsufficientStock(f"Insufficient stock for {item.name}.")


@transaction.atomic
def _commit_order(lines, **order_fields) -> Order:
    locked = {
        item.pk: item
        for item in MenuItem.objects.select_for_update().filter(pk__in=list(lines)).order_by("pk")
    }
    _check_lines(lines, locked)

    total = sum((locked[item_id].price * quantity for item_id, quantity in lines.items()), Decimal("0.00"))
    order = Order.objects.create(total_price=total, **order_fields)

    OrderItem.objects.bulk_create(
        [
            OrderItem(order=order, menu_item=locked[item_id], quantity=quantity, price_at_order=locked[item_id].price)
            for item_id, quantity in lines.items()
        ]
    )

    for item_id, quantity in lines.items():
        item = locked[item_id]
        if item.has_stock_limit:
            _decrement_stock(item, quantity)

        InventoryLog.objects.create(
            item=item,
            staff=None,
            change_type=InventoryChangeType.DEDUCT,
            quantity=quantity,
            note=f"Order #{order.pk}",
        )

    return order


def place_order(*, items, pickup_type, pickup_time=None, user_id=None, **order_fields) -> Order:
    """
    Validate a cart and commit it as one order.

    ``items`` is a non-empty list of ``{"menu_item_id", "quantity"}`` mappings.
    Raises ``ItemNotFound``, ``ItemUnavailable`` or ``InsufficientStock`` without
    writing anything. The owner, when there is one, gets a feed entry after commit.
    """
    lines = _merge_lines(items)
    _check_lines(lines, MenuItem.objects.in_bulk(list(lines)))

    order = _commit_order(
        lines,
        user_id=user_id,
        pickup_type=pickup_type,
        pickup_time=pickup_time,
        **order_fields,
    )
    logger.info("Order %s placed (total %s, %d lines)", order.pk, order.total_price, len(lines))

    if order.user_id is not None:
        notify(order.user_id, f"Your order #{order.pk} has been placed successfully.", order=order)
    return order


def place_walk_in_order(*, staff_id, customer_name: str = "", **cart) -> Order:
    return place_order(
        customer_type=CustomerType.WALK_IN,
        customer_name=customer_name,
        processed_by_id=staff_id,
        **cart,
    )


def update_status(order: Order, new_status: OrderStatus) -> Order:
    """Staff-side status change. Any status is accepted; the owner is notified."""
    previous = order.status
    order.status = new_status
    order.save(update_fields=["status", "updated_at"])
    logger.info("Order %s status %s -> %s", order.pk, previous, new_status)

    if not order.is_walk_in:
        notify(order.user_id, f"Your order #{order.pk} status is now: {new_status}.", order=order)
    return order


def cancel_order(order: Order) -> Order:
    if order.status != OrderStatus.PENDING:
        raise InvalidState("Only pending orders can be cancelled.")

    order.status = OrderStatus.REJECTED
    order.save(update_fields=["status", "updated_at"])
    logger.info("Order %s cancelled by its owner", order.pk)
    return order


def confirm_payment(order: Order) -> Order:
    if order.status != OrderStatus.READY:
        raise InvalidState("Payment can only be confirmed once the order is ready.")

    order.payment_confirmed = True
    order.save(update_fields=["payment_confirmed", "updated_at"])
    return order


def delete_order(order: Order):
    # Stock is not restored; payments and notifications keep their rows with the link cleared.
    order_id = order.pk
    order.delete()
    logger.info("Order %s deleted", order_id)
