import logging
from decimal import ROUND_HALF_UP, Decimal

from django.db import transaction
from django.shortcuts import get_object_or_404

from apps.common.constants import OrderStatus, PaymentMethod, PaymentStatus
from apps.orders.models import Order
from apps.payments.models import Payment

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")


def _quantize(amount: Decimal) -> Decimal:
    return (amount or Decimal("0")).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


@transaction.atomic
def record_payment(
    *,
    processed_by_id,
    amount_received: Decimal,
    order_id=None,
    payment_method: str = PaymentMethod.CASH,
    customer_name: str | None = None,
    customer_type: str | None = None,
) -> Payment:
    """
    Log a counter payment.

    Linked to an order, the amount due is the order's stored total and the order is
    marked paid and picked up. Without an order the amount due equals what was
    received, so change is zero. Underpayment is recorded as negative change.
    """
    amount_received = _quantize(amount_received)
    order = None

    if order_id is not None:
        order = get_object_or_404(Order.objects.select_for_update(), pk=order_id)
        amount_due = order.total_price

        order.payment_status = PaymentStatus.PAID
        order.status = OrderStatus.PICKED_UP
        update_fields = ["payment_status", "status", "updated_at"]
        if customer_name:
            order.customer_name = customer_name
            update_fields.append("customer_name")
        if customer_type:
            order.customer_type = customer_type
            update_fields.append("customer_type")
        order.save(update_fields=update_fields)
    else:
        amount_due = amount_received

    payment = Payment.objects.create(
        order=order,
        processed_by_id=processed_by_id,
        amount_due=amount_due,
        amount_received=amount_received,
        change=amount_received - amount_due,
        payment_method=payment_method,
    )

    if payment.change < 0:
        logger.warning("Payment %s recorded short by %s", payment.pk, -payment.change)
    logger.info("Payment %s recorded for order %s", payment.pk, order_id)
    return payment
