"""Integration tests for the SQLAlchemy repositories (SQLite via aiosqlite)."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy import update

from orders_core.data.models import OrderModel
from orders_core.data.repositories import SqlAlchemyCustomerRepository, SqlAlchemyOrderRepository
from orders_core.domain.entities import Customer, Order
from orders_core.domain.enums import OrderStatus
from orders_core.domain.errors import InvalidOrderStatusError
from orders_core.domain.value_objects import (
    CustomerEmail,
    CustomerId,
    CustomerName,
    OrderId,
    OrderItem,
)

CREATED_AT = datetime(2025, 1, 13, 10, 30, tzinfo=timezone.utc)


def _order(order_id: str = "order-123", created_at: datetime = CREATED_AT) -> Order:
    return Order.create(
        OrderId.create(order_id),
        [
            OrderItem.create("prod-1", "Widget", 2, "10.50"),
            OrderItem.create("prod-2", "Gadget", 1, "0.99"),
        ],
        customer_id="cust-1",
        created_at=created_at,
    )


@pytest.fixture
def order_repository(test_session_factory) -> SqlAlchemyOrderRepository:
    return SqlAlchemyOrderRepository(test_session_factory)


@pytest.fixture
def customer_repository(test_session_factory) -> SqlAlchemyCustomerRepository:
    return SqlAlchemyCustomerRepository(test_session_factory)


class TestSqlAlchemyOrderRepository:

    @pytest.mark.asyncio
    async def test_save_and_find_round_trip(self, order_repository):
        order = _order()

        await order_repository.save(order)
        loaded = await order_repository.find_by_id(OrderId.create("order-123"))

        assert loaded == order
        assert loaded.subtotal == Decimal("21.99")
        assert loaded.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, order_repository):
        assert await order_repository.find_by_id(OrderId.create("missing")) is None
        assert await order_repository.exists(OrderId.create("missing")) is False

    @pytest.mark.asyncio
    async def test_save_updates_status(self, order_repository):
        order = _order()
        await order_repository.save(order)

        await order_repository.save(order.cancel())
        loaded = await order_repository.find_by_id(order.id)

        assert loaded.status == OrderStatus.CANCELLED
        assert loaded.created_at == CREATED_AT

    @pytest.mark.asyncio
    async def test_find_all_orders_by_creation_time(self, order_repository):
        await order_repository.save(_order("late", CREATED_AT + timedelta(hours=1)))
        await order_repository.save(_order("early", CREATED_AT))

        orders = await order_repository.find_all()

        assert [str(order.id) for order in orders] == ["early", "late"]
        assert len(await order_repository.find_all(limit=1)) == 1

    @pytest.mark.asyncio
    async def test_items_stored_with_string_prices(self, order_repository, test_session_factory):
        await order_repository.save(_order())

        async with test_session_factory() as session:
            model = await session.get(OrderModel, "order-123")

        assert model.items[0] == {
            "productId": "prod-1",
            "productName": "Widget",
            "quantity": 2,
            "pricePerUnit": "10.50",
        }
        assert model.status == "pending"

    @pytest.mark.asyncio
    async def test_unknown_stored_status_raises(self, order_repository, test_session_factory):
        await order_repository.save(_order())
        async with test_session_factory() as session:
            await session.execute(
                update(OrderModel).where(OrderModel.id == "order-123").values(status="lost")
            )
            await session.commit()

        with pytest.raises(InvalidOrderStatusError, match="lost"):
            await order_repository.find_by_id(OrderId.create("order-123"))


class TestSqlAlchemyCustomerRepository:

    @pytest.mark.asyncio
    async def test_save_find_and_update(self, customer_repository):
        customer = Customer.create(
            CustomerId.create("cust-1"),
            CustomerName.create("Ada Lovelace"),
            CustomerEmail.create("ada@example.com"),
        )
        await customer_repository.save(customer)

        await customer_repository.save(customer.update_name(CustomerName.create("Ada King")))
        loaded = await customer_repository.find_by_id("cust-1")

        assert str(loaded.name) == "Ada King"
        assert str(loaded.email) == "ada@example.com"

    @pytest.mark.asyncio
    async def test_missing_customer(self, customer_repository):
        assert await customer_repository.find_by_id("nobody") is None
