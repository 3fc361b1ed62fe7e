"""
Orders endpoints.

Place, fetch, list and cancel orders. Errors raised by the service layer
are translated to HTTP responses by the handlers registered in ``main``.
"""
from fastapi import APIRouter, Depends, Query, status

from orders_api.dependencies import get_order_service
from orders_core.application.dtos import (
    CancelOrderRequest,
    OrderListDTO,
    OrderResponseDTO,
    PlaceOrderRequest,
)
from orders_core.application.errors import OrderNotFoundError
from orders_core.application.services import OrderApplicationService
from orders_core.infrastructure.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


# =============================================================================
# PLACE ORDER
# =============================================================================

@router.post(
    "",
    response_model=OrderResponseDTO,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
)
async def place_order(
    request: PlaceOrderRequest,
    service: OrderApplicationService = Depends(get_order_service),
):
    """
    Place a new order for an existing customer.

    **Body:** `orderId`, `customerId` and a non-empty `items` list.

    **Returns:** the stored order with its priced `totalAmount`.
    """
    logger.info(f"Placing order {request.order_id} for customer {request.customer_id}")
    return await service.place_order(request)


# =============================================================================
# LIST ORDERS
# =============================================================================

@router.get(
    "",
    response_model=OrderListDTO,
    response_model_by_alias=True,
    summary="List orders",
)
async def list_orders(
    limit: int = Query(default=100, ge=1, le=1000, description="Maximum number of orders to return"),
    service: OrderApplicationService = Depends(get_order_service),
):
    return await service.list_orders(limit=limit)


# =============================================================================
# GET ORDER BY ID
# =============================================================================

@router.get(
    "/{order_id}",
    response_model=OrderResponseDTO,
    response_model_by_alias=True,
    summary="Get order by ID",
)
async def get_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
):
    order = await service.get_order(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


# =============================================================================
# CANCEL ORDER
# =============================================================================

@router.post(
    "/{order_id}/cancel",
    response_model=OrderResponseDTO,
    response_model_by_alias=True,
    summary="Cancel an order",
)
async def cancel_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
):
    """
    Cancel an order.

    Cancelling an already-cancelled order succeeds without changes;
    a shipped order answers 409.
    """
    return await service.cancel_order(CancelOrderRequest(order_id=order_id))
