"""
Customer validation adapter.

Implements the Order context's CustomerValidator port on top of the
Customer context's application service. It belongs to the Order context
because that context owns the port.
"""
from orders_core.application.interfaces import CustomerValidator
from orders_core.application.services.customer_service import CustomerApplicationService


class CustomerServiceAdapter(CustomerValidator):
    """CustomerValidator backed by CustomerApplicationService."""

    def __init__(self, customer_service: CustomerApplicationService):
        self._customer_service = customer_service

    async def customer_exists(self, customer_id: str) -> bool:
        customer = await self._customer_service.get_customer(customer_id)
        return customer is not None
