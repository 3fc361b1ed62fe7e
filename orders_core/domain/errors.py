"""
Domain errors.

Every invariant violation raised by the domain layer has its own type so the
outer layers can translate it into the right response without parsing
messages.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class DomainValidationError(DomainError, ValueError):
    """Base class for invariant and value object violations."""


# =============================================================================
# ORDER CONTEXT
# =============================================================================

class InvalidOrderError(DomainValidationError):
    """Order construction invariant violated (e.g. no items)."""


class InvalidOrderItemError(DomainValidationError):
    """Order item validation failed."""


class InvalidOrderStatusError(DomainValidationError):
    """Unknown order status encountered."""


class InvalidOrderIdError(DomainValidationError):
    """Order identifier is empty."""


class InvalidPricingStrategyError(DomainValidationError):
    """Pricing strategy configured with an out-of-range discount."""


class CannotCancelShippedOrderError(DomainError):
    """Raised when cancelling an order that has already been shipped."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(
            f"Cannot cancel order {order_id}: order has already been shipped"
        )


# =============================================================================
# CUSTOMER CONTEXT
# =============================================================================

class InvalidCustomerIdError(DomainValidationError):
    """Customer identifier is empty."""


class InvalidCustomerNameError(DomainValidationError):
    """Customer name is empty or too long."""


class InvalidCustomerEmailError(DomainValidationError):
    """Customer email is empty, malformed or too long."""


__all__ = [
    "DomainError",
    "DomainValidationError",
    "InvalidOrderError",
    "InvalidOrderItemError",
    "InvalidOrderStatusError",
    "InvalidOrderIdError",
    "InvalidPricingStrategyError",
    "CannotCancelShippedOrderError",
    "InvalidCustomerIdError",
    "InvalidCustomerNameError",
    "InvalidCustomerEmailError",
]
