"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

from orders_core.domain.entities.order import Order
from orders_core.domain.value_objects import OrderItem

_DTO_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class OrderItemDTO(BaseModel):
    """DTO for order item.

    Only types are checked here; ranges are enforced by ``OrderItem.create``.
    """

    product_id: str = Field(..., description="Product identifier")
    product_name: str = Field(..., description="Product name")
    quantity: StrictInt = Field(..., description="Quantity ordered")
    price_per_unit: Decimal = Field(..., description="Unit price")

    model_config = _DTO_CONFIG

    @classmethod
    def from_domain(cls, item: OrderItem) -> "OrderItemDTO":
        return cls(
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity,
            price_per_unit=item.price_per_unit,
        )


class PlaceOrderRequest(BaseModel):
    """Request DTO for placing an order."""

    order_id: str = Field(default="", description="Client supplied order id")
    customer_id: str = Field(default="", description="Ordering customer id")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")

    model_config = _DTO_CONFIG


class CancelOrderRequest(BaseModel):
    """Request DTO for cancelling an order."""

    order_id: str = Field(..., description="Order to cancel")

    model_config = _DTO_CONFIG


class OrderResponseDTO(BaseModel):
    """Response DTO for order details.

    ``total_amount`` is computed with the application's configured pricing
    strategy; ``subtotal`` is the raw sum of line totals.
    """

    id: str = Field(..., description="Order id")
    customer_id: Optional[str] = Field(None, description="Ordering customer id")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")
    status: str = Field(..., description="Order status")
    subtotal: Decimal = Field(..., description="Sum of line totals")
    total_amount: Decimal = Field(..., description="Final price after pricing rules")
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = _DTO_CONFIG


class OrderListDTO(BaseModel):
    """DTO for listing orders."""

    orders: List[OrderResponseDTO] = Field(default_factory=list, description="List of orders")
    total: int = Field(..., ge=0, description="Number of orders returned")

    model_config = _DTO_CONFIG


def to_order_response(order: Order, total_amount: Decimal) -> OrderResponseDTO:
    """Map an Order aggregate to its response DTO.

    Args:
        order: Order domain aggregate
        total_amount: Total already computed with the pricing strategy

    Returns:
        OrderResponseDTO instance
    """
    return OrderResponseDTO(
        id=str(order.id),
        customer_id=order.customer_id,
        items=[OrderItemDTO.from_domain(item) for item in order.items],
        status=order.status.value,
        subtotal=order.subtotal,
        total_amount=total_amount,
        created_at=order.created_at,
    )
