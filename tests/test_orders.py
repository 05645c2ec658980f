"""
Unit tests for the kitchen order progression and seed orders
"""

from datetime import time

import pytest

from quickseat.data import seed_orders
from quickseat.models import OrderStatus
from quickseat.orders import (
    ACTION_LABELS,
    STATUS_SEQUENCE,
    advance_order,
    find_order,
    next_action_label,
    next_status,
    order_total,
)


@pytest.mark.unit
class TestNextStatus:
    def test_linear_progression(self):
        chain = [OrderStatus.PENDING]
        status = next_status(chain[-1])
        while status is not None:
            chain.append(status)
            status = next_status(status)

        assert chain == [
            OrderStatus.PENDING,
            OrderStatus.COOK_NOW,
            OrderStatus.PREPARING,
            OrderStatus.READY,
            OrderStatus.SERVED,
        ]

    def test_served_is_terminal(self):
        assert next_status(OrderStatus.SERVED) is None

    def test_every_non_terminal_status_has_an_action(self):
        assert set(ACTION_LABELS) == set(STATUS_SEQUENCE) - {OrderStatus.SERVED}
        assert ACTION_LABELS[OrderStatus.COOK_NOW] == "Start Preparing"


@pytest.mark.unit
class TestAdvanceOrder:
    def test_advances_only_target(self):
        orders = seed_orders()

        updated = advance_order(orders, "ORD-001")

        assert find_order(updated, "ORD-001").status == OrderStatus.PREPARING
        assert find_order(updated, "ORD-002").status == OrderStatus.PREPARING
        assert find_order(updated, "ORD-003").status == OrderStatus.PENDING
        assert find_order(orders, "ORD-001").status == OrderStatus.COOK_NOW

    def test_one_step_at_a_time_until_served(self):
        orders = seed_orders()
        seen = []
        for _ in range(6):
            orders = advance_order(orders, "ORD-003")
            seen.append(find_order(orders, "ORD-003").status)

        assert seen == [
            OrderStatus.COOK_NOW,
            OrderStatus.PREPARING,
            OrderStatus.READY,
            OrderStatus.SERVED,
            OrderStatus.SERVED,
            OrderStatus.SERVED,
        ]
        assert next_action_label(find_order(orders, "ORD-003")) is None

    def test_served_and_unknown_are_noops(self):
        orders = seed_orders()
        for _ in range(3):
            orders = advance_order(orders, "ORD-001")

        assert advance_order(orders, "ORD-001") is orders
        assert advance_order(orders, "ORD-999") is orders


@pytest.mark.unit
class TestSeedOrders:
    def test_totals_match_lines(self):
        totals = {order.order_id: order_total(order) for order in seed_orders()}

        assert totals == {"ORD-001": 440, "ORD-002": 280, "ORD-003": 360}

    def test_seed_contents(self):
        first = seed_orders()[0]

        assert first.customer_name == "Rahul Sharma"
        assert first.seat_id == "A1"
        assert first.placed_at == time(12, 30)
        assert [(line.item.name, line.quantity) for line in first.lines] == [
            ("Butter Chicken", 1),
            ("Masala Chai", 2),
        ]

    def test_each_call_builds_fresh_list(self):
        assert seed_orders() is not seed_orders()
        assert seed_orders() == seed_orders()
