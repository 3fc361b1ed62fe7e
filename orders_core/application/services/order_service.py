"""Application service for Order operations."""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Optional

from orders_core.application.dtos.order_dto import (
    CancelOrderRequest,
    OrderListDTO,
    OrderResponseDTO,
    PlaceOrderRequest,
    to_order_response,
)
from orders_core.application.errors import (
    CustomerNotFoundError,
    OrderNotFoundError,
    OrderValidationError,
)
from orders_core.application.interfaces import CustomerValidator
from orders_core.domain.entities.order import Order
from orders_core.domain.pricing import PricingStrategy
from orders_core.domain.repositories.order_repository import OrderRepository
from orders_core.domain.value_objects import OrderId, OrderItem

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _require_id(value: Optional[str], label: str) -> str:
    if not value or not value.strip():
        raise OrderValidationError(f"{label} is required")
    return value


class OrderApplicationService:
    """
    Application service for orchestrating order use cases.

    Responsibilities:
    - Validate incoming request DTOs
    - Check the referenced customer exists (cross-context port)
    - Transform DTOs into domain objects and back
    - Apply the configured pricing strategy to computed totals
    - Delegate persistence to the OrderRepository port

    Domain errors raised by the aggregate propagate unchanged.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        customer_validator: CustomerValidator,
        pricing_strategy: PricingStrategy,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """Initialize order application service.

        Args:
            order_repository: Persistence port for orders
            customer_validator: Port used to confirm the customer exists
            pricing_strategy: Policy used to compute order totals
            clock: Timestamp source for new orders (defaults to UTC now)
        """
        self._orders = order_repository
        self._customer_validator = customer_validator
        self._pricing_strategy = pricing_strategy
        self._clock = clock or utc_now

    async def place_order(self, request: PlaceOrderRequest) -> OrderResponseDTO:
        """Place a new order.

        Placing an order whose id already exists returns the stored order
        unchanged.

        Args:
            request: PlaceOrderRequest DTO

        Returns:
            OrderResponseDTO with the calculated total

        Raises:
            OrderValidationError: If the order id or customer id is missing
            CustomerNotFoundError: If the customer does not exist
            DomainValidationError: If the items violate domain rules
        """
        _require_id(request.order_id, "Order ID")
        _require_id(request.customer_id, "Customer ID")

        # 1. Cross-context check
        if not await self._customer_validator.customer_exists(request.customer_id):
            raise CustomerNotFoundError(request.customer_id)

        # 2. Duplicate placement returns the existing order
        order_id = OrderId.create(request.order_id)
        if await self._orders.exists(order_id):
            existing = await self._orders.find_by_id(order_id)
            if existing:
                logger.info(f"Order {order_id} already placed, returning existing order")
                return self._to_dto(existing)

        # 3. Domain objects (invariants enforced here)
        items = [
            OrderItem.create(
                item.product_id,
                item.product_name,
                item.quantity,
                item.price_per_unit,
            )
            for item in request.items
        ]
        order = Order.create(
            order_id,
            items,
            customer_id=request.customer_id,
            created_at=self._clock(),
        )

        # 4. Persist via port
        saved = await self._orders.save(order)
        logger.info(
            f"Order placed: {saved.id} (customer: {saved.customer_id}, items: {len(saved.items)})"
        )
        return self._to_dto(saved)

    async def cancel_order(self, request: CancelOrderRequest) -> OrderResponseDTO:
        """Cancel an existing order.

        Args:
            request: CancelOrderRequest DTO

        Returns:
            OrderResponseDTO with the updated state

        Raises:
            OrderValidationError: If the order id is missing
            OrderNotFoundError: If no order has that id
            CannotCancelShippedOrderError: If the order was already shipped
        """
        _require_id(request.order_id, "Order ID")
        order_id = OrderId.create(request.order_id)

        order = await self._orders.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(request.order_id)

        cancelled = order.cancel()

        if cancelled is order:
            logger.info(f"Order {order_id} already cancelled, nothing to persist")
            return self._to_dto(order)

        saved = await self._orders.save(cancelled)
        logger.info(f"Order cancelled: {saved.id}")
        return self._to_dto(saved)

    async def get_order(self, order_id: str) -> Optional[OrderResponseDTO]:
        """Get order by ID.

        Args:
            order_id: Order ID string

        Returns:
            OrderResponseDTO if found, None otherwise

        Raises:
            OrderValidationError: If the order id is blank
        """
        _require_id(order_id, "Order ID")
        order = await self._orders.find_by_id(OrderId.create(order_id))

        if order is None:
            return None

        return self._to_dto(order)

    async def list_orders(self, limit: int = 100) -> OrderListDTO:
        """List orders.

        Args:
            limit: Maximum number of orders to return

        Returns:
            OrderListDTO
        """
        orders = await self._orders.find_all(limit=limit)
        dtos = [self._to_dto(order) for order in orders]
        return OrderListDTO(orders=dtos, total=len(dtos))

    def calculate_order_total(self, order: Order) -> Decimal:
        """Apply the configured pricing strategy to an order."""
        return order.calculate_total(self._pricing_strategy)

    def _to_dto(self, order: Order) -> OrderResponseDTO:
        return to_order_response(order, self.calculate_order_total(order))
