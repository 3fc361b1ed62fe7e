"""Application DTOs for Customer operations."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from orders_core.domain.entities.customer import Customer

_DTO_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class RegisterCustomerRequest(BaseModel):
    """Request DTO for registering a customer."""

    name: str = Field(default="", description="Customer name")
    email: str = Field(default="", description="Customer email address")

    model_config = _DTO_CONFIG


class UpdateCustomerRequest(BaseModel):
    """Request DTO for updating a customer. Omitted fields are left unchanged."""

    name: Optional[str] = Field(None, description="New customer name")
    email: Optional[str] = Field(None, description="New customer email address")

    model_config = _DTO_CONFIG


class CustomerDTO(BaseModel):
    """Response DTO for customer details."""

    id: str = Field(..., description="Customer id")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Normalized email address")

    model_config = _DTO_CONFIG

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerDTO":
        return cls(
            id=str(customer.id),
            name=str(customer.name),
            email=str(customer.email),
        )
