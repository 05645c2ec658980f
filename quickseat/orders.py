"""Kitchen order status progression for the admin dashboard."""

from __future__ import annotations

from dataclasses import replace

from quickseat.cart import cart_total
from quickseat.models import Order, OrderStatus

STATUS_SEQUENCE: tuple[OrderStatus, ...] = tuple(OrderStatus)

# Label of the admin control that moves an order out of each status.
ACTION_LABELS: dict[OrderStatus, str] = {
    OrderStatus.PENDING: "Cook Now",
    OrderStatus.COOK_NOW: "Start Preparing",
    OrderStatus.PREPARING: "Mark Ready",
    OrderStatus.READY: "Mark Served",
}

if set(ACTION_LABELS) != set(STATUS_SEQUENCE[:-1]):
    raise RuntimeError("ACTION_LABELS must cover every non-terminal order status")


def next_status(status: OrderStatus) -> OrderStatus | None:
    """Return the status after `status`, or None once served."""
    idx = STATUS_SEQUENCE.index(status)
    if idx + 1 >= len(STATUS_SEQUENCE):
        return None
    return STATUS_SEQUENCE[idx + 1]


def next_action_label(order: Order) -> str | None:
    return ACTION_LABELS.get(order.status)


def order_total(order: Order) -> int:
    return cart_total(order.lines)


def find_order(orders: list[Order], order_id: str) -> Order | None:
    return next((order for order in orders if order.order_id == order_id), None)


def advance_order(orders: list[Order], order_id: str) -> list[Order]:
    """
    Move one order a single step along the progression.

    Unknown ids and served orders leave the list untouched (the same list is
    returned).
    """
    target = find_order(orders, order_id)
    if target is None:
        return orders
    new_status = next_status(target.status)
    if new_status is None:
        return orders
    return [replace(order, status=new_status) if order.order_id == order_id else order for order in orders]
