"""Static mappers for domain entities ↔ database models."""

from datetime import datetime, timezone
from typing import Any, Dict, List

from orders_core.domain.entities.customer import Customer
from orders_core.domain.entities.order import Order
from orders_core.domain.enums import parse_order_status
from orders_core.domain.value_objects import (
    CustomerEmail,
    CustomerId,
    CustomerName,
    OrderId,
    OrderItem,
)

from .models.customer_model import CustomerModel
from .models.order_model import OrderModel


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class OrderItemMapper:
    """Static mapper for OrderItem ↔ JSON item payload."""

    @staticmethod
    def to_domain(data: Dict[str, Any]) -> OrderItem:
        """Convert a stored item payload to a domain item.

        Items are rebuilt through ``OrderItem.create`` so corrupted rows
        surface as InvalidOrderItemError instead of silently loading.

        Args:
            data: Item dict with productId, productName, quantity, pricePerUnit

        Returns:
            OrderItem value object
        """
        return OrderItem.create(
            data.get("productId", ""),
            data.get("productName", ""),
            data.get("quantity", 0),
            data.get("pricePerUnit"),
        )

    @staticmethod
    def to_persistence(entity: OrderItem) -> Dict[str, Any]:
        return entity.to_dict()


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate.

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate

        Raises:
            InvalidOrderStatusError: If the stored status is unknown
            InvalidOrderItemError: If a stored item is invalid
        """
        items = [OrderItemMapper.to_domain(item) for item in model.items or []]

        return Order.reconstitute(
            OrderId.create(model.id),
            items,
            parse_order_status(model.status),
            _as_utc(model.created_at),
            customer_id=model.customer_id,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to a new ORM model."""
        return OrderModel(
            id=str(entity.id),
            customer_id=entity.customer_id,
            items=OrderMapper.items_to_persistence(entity),
            status=entity.status.value,
            created_at=entity.created_at,
        )

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Update existing ORM model from domain entity.

        ``created_at`` is never rewritten once stored.

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance

        Returns:
            Updated OrderModel instance
        """
        model.customer_id = entity.customer_id
        model.items = OrderMapper.items_to_persistence(entity)
        model.status = entity.status.value
        return model

    @staticmethod
    def items_to_persistence(entity: Order) -> List[Dict[str, Any]]:
        return [OrderItemMapper.to_persistence(item) for item in entity.items]


class CustomerMapper:
    """Static mapper for Customer ↔ CustomerModel transformation."""

    @staticmethod
    def to_domain(model: CustomerModel) -> Customer:
        return Customer.reconstitute(
            CustomerId.create(model.id),
            CustomerName.create(model.name),
            CustomerEmail.create(model.email),
        )

    @staticmethod
    def to_persistence(entity: Customer) -> CustomerModel:
        return CustomerModel(
            id=str(entity.id),
            name=str(entity.name),
            email=str(entity.email),
        )

    @staticmethod
    def update_persistence(entity: Customer, model: CustomerModel) -> CustomerModel:
        model.name = str(entity.name)
        model.email = str(entity.email)
        return model
