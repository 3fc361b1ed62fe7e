"""
Pricing strategies.

A pricing strategy turns an order subtotal into the final charged amount.
Strategies are handed to ``Order.calculate_total`` by the caller; the order
never stores one.

Percentages are expressed 0-100 and applied multiplicatively. No rounding
happens here - presentation decides how to display the Decimal result.

Subtotals, thresholds and percentages are coerced to Decimal; floats go
through ``Decimal(str(x))``, so ``StandardPricing`` returns
``Decimal("0.1")`` for ``0.1``. Results are always Decimal: they equal Decimal
and int inputs, but a float input such as ``0.1`` is not exactly
representable and will not compare equal to the result.
"""
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Any

from .errors import InvalidPricingStrategyError

_HUNDRED = Decimal("100")


def _as_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _validated_percentage(value: Any) -> Decimal:
    try:
        percentage = _as_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidPricingStrategyError(
            f"Discount percentage must be a number, got: {value!r}"
        )
    if not percentage.is_finite() or percentage < 0 or percentage > _HUNDRED:
        raise InvalidPricingStrategyError(
            "Discount percentage must be between 0 and 100"
        )
    return percentage


def _validated_threshold(value: Any) -> Decimal:
    try:
        threshold = _as_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidPricingStrategyError(
            f"Bulk discount threshold must be a number, got: {value!r}"
        )
    if not threshold.is_finite() or threshold < 0:
        raise InvalidPricingStrategyError(
            "Bulk discount threshold must be a finite amount of zero or more"
        )
    return threshold


def _apply_discount(subtotal: Decimal, percentage: Decimal) -> Decimal:
    return subtotal * (1 - percentage / _HUNDRED)


class PricingStrategy(ABC):
    """Pricing policy applied to an order subtotal."""

    @abstractmethod
    def calculate_final_price(self, subtotal: Decimal) -> Decimal:
        """
        Calculate the final price for a subtotal.

        Args:
            subtotal: Sum of line totals before pricing rules

        Returns:
            Final price after the strategy's rules
        """


class StandardPricing(PricingStrategy):
    """No discounts: the (Decimal-coerced) subtotal is the final price."""

    def calculate_final_price(self, subtotal: Decimal) -> Decimal:
        return _as_decimal(subtotal)

    def __repr__(self) -> str:
        return "StandardPricing()"


class BulkDiscountPricing(PricingStrategy):
    """Percentage discount once the subtotal reaches a threshold."""

    def __init__(self, threshold_amount: Any, discount_percentage: Any):
        self.discount_percentage = _validated_percentage(discount_percentage)
        self.threshold_amount = _validated_threshold(threshold_amount)

    def calculate_final_price(self, subtotal: Decimal) -> Decimal:
        subtotal = _as_decimal(subtotal)
        if subtotal >= self.threshold_amount:
            return _apply_discount(subtotal, self.discount_percentage)
        return subtotal

    def __repr__(self) -> str:
        return (
            f"BulkDiscountPricing(threshold_amount={self.threshold_amount}, "
            f"discount_percentage={self.discount_percentage})"
        )


class PromotionalPricing(PricingStrategy):
    """Flat percentage discount on every order."""

    def __init__(self, discount_percentage: Any):
        self.discount_percentage = _validated_percentage(discount_percentage)

    def calculate_final_price(self, subtotal: Decimal) -> Decimal:
        return _apply_discount(_as_decimal(subtotal), self.discount_percentage)

    def __repr__(self) -> str:
        return f"PromotionalPricing(discount_percentage={self.discount_percentage})"


__all__ = [
    "PricingStrategy",
    "StandardPricing",
    "BulkDiscountPricing",
    "PromotionalPricing",
]
