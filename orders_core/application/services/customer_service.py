"""Application service for Customer operations."""

import logging
from typing import Callable, Optional

from orders_core.application.dtos.customer_dto import (
    CustomerDTO,
    RegisterCustomerRequest,
    UpdateCustomerRequest,
)
from orders_core.application.errors import CustomerNotFoundError
from orders_core.domain.entities.customer import Customer
from orders_core.domain.repositories.customer_repository import CustomerRepository
from orders_core.domain.value_objects import CustomerEmail, CustomerId, CustomerName

logger = logging.getLogger(__name__)


class CustomerApplicationService:
    """
    Application service for customer registration and lookup.

    Wraps primitives into validated value objects and delegates persistence
    to the CustomerRepository port.
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        id_factory: Optional[Callable[[], CustomerId]] = None,
    ) -> None:
        self._customers = customer_repository
        self._id_factory = id_factory or CustomerId.generate

    async def register_customer(self, request: RegisterCustomerRequest) -> CustomerDTO:
        """Register a new customer.

        Args:
            request: RegisterCustomerRequest DTO

        Returns:
            CustomerDTO of the stored customer

        Raises:
            InvalidCustomerNameError: If the name is invalid
            InvalidCustomerEmailError: If the email is invalid
        """
        customer = Customer.create(
            self._id_factory(),
            CustomerName.create(request.name),
            CustomerEmail.create(request.email),
        )
        await self._customers.save(customer)
        logger.info(f"Customer registered: {customer.id}")
        return CustomerDTO.from_domain(customer)

    async def get_customer(self, customer_id: str) -> Optional[CustomerDTO]:
        customer = await self._customers.find_by_id(customer_id)
        if customer is None:
            return None
        return CustomerDTO.from_domain(customer)

    async def update_customer(
        self, customer_id: str, request: UpdateCustomerRequest
    ) -> CustomerDTO:
        """Change a customer's name and/or email.

        Raises:
            CustomerNotFoundError: If no customer has that id
        """
        customer = await self._customers.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)

        updated = customer
        if request.name is not None:
            updated = updated.update_name(CustomerName.create(request.name))
        if request.email is not None:
            updated = updated.update_email(CustomerEmail.create(request.email))

        if updated is not customer:
            await self._customers.save(updated)
            logger.info(f"Customer updated: {updated.id}")

        return CustomerDTO.from_domain(updated)
