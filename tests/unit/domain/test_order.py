"""Unit tests for the Order aggregate."""
from dataclasses import FrozenInstanceError
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from orders_core.domain.entities import Order
from orders_core.domain.enums import OrderStatus
from orders_core.domain.errors import CannotCancelShippedOrderError, InvalidOrderError
from orders_core.domain.pricing import BulkDiscountPricing, PromotionalPricing
from orders_core.domain.value_objects import OrderId, OrderItem


CREATED_AT = datetime(2025, 1, 13, 10, 30, tzinfo=timezone.utc)


def _widget(quantity=2, price="10.5") -> OrderItem:
    return OrderItem.create("prod-1", "Widget", quantity, price)


def _order(*items, status=OrderStatus.PENDING) -> Order:
    return Order.reconstitute(
        OrderId.create("order-123"),
        list(items) or [_widget()],
        status,
        CREATED_AT,
        customer_id="cust-1",
    )


class TestOrderCreation:
    """Test Order.create."""

    def test_create_single_item_order(self):
        order = Order.create(OrderId.create("order-123"), [_widget()])

        assert order.total_amount == Decimal("21")
        assert order.status == OrderStatus.PENDING
        assert str(order.id) == "order-123"
        assert len(order.items) == 1

    def test_create_without_items_raises(self):
        with pytest.raises(InvalidOrderError, match="at least one item"):
            Order.create(OrderId.create("order-123"), [])

    def test_create_with_empty_generator_raises(self):
        with pytest.raises(InvalidOrderError, match="at least one item"):
            Order.create(OrderId.create("order-123"), (item for item in []))

    def test_create_accepts_generator_of_items(self):
        order = Order.create(OrderId.create("order-123"), (item for item in [_widget()]))

        assert order.items == (_widget(),)

    def test_create_defaults_timestamp_to_utc_now(self):
        before = datetime.now(timezone.utc)
        order = Order.create(OrderId.create("order-123"), [_widget()])
        after = datetime.now(timezone.utc)

        assert before <= order.created_at <= after
        assert order.created_at.tzinfo is not None

    def test_create_keeps_given_timestamp_and_customer(self):
        order = Order.create(
            OrderId.create("order-123"),
            [_widget()],
            customer_id="cust-1",
            created_at=CREATED_AT,
        )

        assert order.created_at == CREATED_AT
        assert order.customer_id == "cust-1"

    def test_items_are_stored_as_tuple(self):
        items = [_widget()]
        order = Order.create(OrderId.create("order-123"), items)
        items.append(_widget(quantity=9))

        assert isinstance(order.items, tuple)
        assert len(order.items) == 1


class TestOrderCancellation:
    """Test the order lifecycle rules around cancel()."""

    def test_cancel_pending_order_returns_new_cancelled_order(self):
        order = _order()

        cancelled = order.cancel()

        assert cancelled is not order
        assert cancelled.status == OrderStatus.CANCELLED
        assert order.status == OrderStatus.PENDING

    def test_cancel_shares_item_tuple(self):
        order = _order()

        cancelled = order.cancel()

        assert cancelled.items is order.items
        assert cancelled.id == order.id
        assert cancelled.created_at == order.created_at
        assert cancelled.customer_id == order.customer_id

    def test_cancel_shipped_order_raises(self):
        order = _order(status=OrderStatus.SHIPPED)

        with pytest.raises(CannotCancelShippedOrderError) as exc_info:
            order.cancel()

        assert "order-123" in str(exc_info.value)
        assert exc_info.value.order_id == "order-123"

    def test_cancel_cancelled_order_returns_same_instance(self):
        order = _order(status=OrderStatus.CANCELLED)

        assert order.cancel() is order


class TestOrderPricing:
    """Test subtotal and strategy-based totals."""

    def test_subtotal_sums_line_totals(self):
        order = _order(
            OrderItem.create("p1", "A", 2, "10.50"),
            OrderItem.create("p2", "B", 3, Decimal("1.10")),
        )

        assert order.subtotal == Decimal("24.30")

    def test_subtotal_is_stable_across_reads(self):
        order = _order(
            OrderItem.create("p1", "A", 3, "0.10"),
            OrderItem.create("p2", "B", 7, "19.99"),
        )

        first = order.subtotal
        second = order.subtotal

        assert first == second == Decimal("140.23")
        assert order.total_amount == order.total_amount

    def test_bulk_discount_applied_above_threshold(self):
        order = _order(OrderItem.create("p1", "A", 5, 50))

        assert order.subtotal == Decimal("250")
        assert order.calculate_total(BulkDiscountPricing(200, 10)) == Decimal("225")

    def test_bulk_discount_not_applied_below_threshold(self):
        order = _order(OrderItem.create("p1", "A", 2, 50))

        assert order.calculate_total(BulkDiscountPricing(200, 10)) == Decimal("100")

    def test_promotional_pricing(self):
        order = _order(OrderItem.create("p1", "A", 1, 80))

        assert order.calculate_total(PromotionalPricing(25)) == Decimal("60")

    def test_free_items_total_zero(self):
        order = _order(OrderItem.create("p1", "Sample", 3, 0))

        assert order.total_amount == Decimal("0")


def test_order_is_immutable():
    order = _order()

    with pytest.raises(FrozenInstanceError):
        order.status = OrderStatus.CANCELLED  # type: ignore[misc]
