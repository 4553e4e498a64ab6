import logging
from decimal import Decimal
from typing import List, Optional

from flask import current_app

from models import db, utcnow
from models.item import Item
from models.order import Order, OrderItem, OrderStatus, OrderStatusLog
from app.schemas.orders import CreateOrderRequest
from app.services.errors import InvalidInputError, InvalidStateError, NotFoundError
from app.utils.money import MAX_AMOUNT, to_money

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PAID, OrderStatus.CANCELLED},
    OrderStatus.PAID: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}


def can_transition(current, target, permissive: bool = False) -> bool:
    if permissive:
        return True
    return OrderStatus(target) in ALLOWED_TRANSITIONS.get(OrderStatus(current), set())


def _permissive_transitions() -> bool:
    return bool(current_app.config.get("ORDER_STATUS_PERMISSIVE", False))


def create_order(data: CreateOrderRequest) -> Order:
    """Price every line from the catalog and stage the order with its line items.

    All lines are resolved before anything is added to the session, so a
    missing item leaves nothing behind. Stock is neither checked nor
    decremented. Duplicate item ids are kept as separate lines. A total that
    does not fit the amount column is rejected as invalid input. The caller
    owns the commit and counts the order once it is committed.
    """
    lines = []
    total = Decimal("0.00")
    for line in data.items:
        item = db.session.get(Item, line.item_id)
        if item is None:
            raise NotFoundError("Item", line.item_id)
        unit_price = to_money(item.price)
        if line.quantity > item.stock_quantity:
            logger.warning(
                "order line exceeds stock for item %s: requested %s, in stock %s",
                item.id, line.quantity, item.stock_quantity,
            )
        total += unit_price * line.quantity
        lines.append((item.id, line.quantity, unit_price))

    total = to_money(total)
    if total > MAX_AMOUNT:
        raise InvalidInputError(f"Order total {total} exceeds the maximum of {MAX_AMOUNT}")

    order = Order(
        guest_name=data.guest_name,
        guest_email=data.guest_email,
        guest_address=data.guest_address,
        total_amount=total,
        status=OrderStatus.PENDING.value,
        payment_intent_id=None,
    )
    for item_id, quantity, unit_price in lines:
        order.items.append(OrderItem(item_id=item_id, quantity=quantity, price_at_time=unit_price))
    order.status_log.append(OrderStatusLog(from_status=None, to_status=order.status, note="Order placed"))
    db.session.add(order)
    db.session.flush()

    logger.info({
        "event": "order_created",
        "order_id": order.id,
        "lines": len(lines),
        "total_amount": str(order.total_amount),
        "guest_email": order.guest_email,
    })
    return order


def get_order(order_id: int) -> Order:
    order = db.session.get(Order, order_id)
    if order is None:
        raise NotFoundError("Order", order_id)
    return order


def list_orders() -> List[Order]:
    return Order.query.order_by(Order.created_at.desc(), Order.id.desc()).all()


def update_order_status(
    order_id: int,
    new_status,
    payment_intent_id: Optional[str] = None,
    permissive: Optional[bool] = None,
) -> Order:
    """Move an order to ``new_status``.

    Transitions are checked against ALLOWED_TRANSITIONS unless permissive
    mode is on (ORDER_STATUS_PERMISSIVE), which restores the old any-to-any
    overwrite. A supplied payment intent id replaces the stored one.
    """
    order = get_order(order_id)
    target = OrderStatus(new_status)
    if permissive is None:
        permissive = _permissive_transitions()
    current = order.status
    if not can_transition(current, target, permissive=permissive):
        raise InvalidStateError(f"Cannot change order status from {current} to {target.value}")

    order.status = target.value
    if payment_intent_id is not None:
        order.payment_intent_id = payment_intent_id
    order.updated_at = utcnow()
    order.status_log.append(
        OrderStatusLog(
            from_status=current,
            to_status=target.value,
            payment_intent_id=payment_intent_id,
        )
    )
    db.session.flush()

    logger.info({
        "event": "order_status_changed",
        "order_id": order.id,
        "from": current,
        "to": target.value,
    })
    return order


__all__ = [
    "ALLOWED_TRANSITIONS",
    "can_transition",
    "create_order",
    "get_order",
    "list_orders",
    "update_order_status",
]
