"""Customer endpoints."""
from fastapi import APIRouter, Depends, status

from orders_api.dependencies import get_customer_service
from orders_core.application.dtos import (
    CustomerDTO,
    RegisterCustomerRequest,
    UpdateCustomerRequest,
)
from orders_core.application.errors import CustomerNotFoundError
from orders_core.application.services import CustomerApplicationService

router = APIRouter()


@router.post(
    "",
    response_model=CustomerDTO,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
    summary="Register a customer",
)
async def register_customer(
    request: RegisterCustomerRequest,
    service: CustomerApplicationService = Depends(get_customer_service),
):
    return await service.register_customer(request)


@router.get(
    "/{customer_id}",
    response_model=CustomerDTO,
    response_model_by_alias=True,
    summary="Get customer by ID",
)
async def get_customer(
    customer_id: str,
    service: CustomerApplicationService = Depends(get_customer_service),
):
    customer = await service.get_customer(customer_id)
    if customer is None:
        raise CustomerNotFoundError(customer_id)
    return customer


@router.patch(
    "/{customer_id}",
    response_model=CustomerDTO,
    response_model_by_alias=True,
    summary="Update customer name and/or email",
)
async def update_customer(
    customer_id: str,
    request: UpdateCustomerRequest,
    service: CustomerApplicationService = Depends(get_customer_service),
):
    return await service.update_customer(customer_id, request)
