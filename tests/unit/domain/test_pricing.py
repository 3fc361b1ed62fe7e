"""Unit tests for pricing strategies."""
from decimal import Decimal

import pytest

from orders_core.domain.errors import InvalidPricingStrategyError
from orders_core.domain.pricing import (
    BulkDiscountPricing,
    PricingStrategy,
    PromotionalPricing,
    StandardPricing,
)


def test_standard_pricing_returns_subtotal():
    assert StandardPricing().calculate_final_price(Decimal("99.99")) == Decimal("99.99")


def test_standard_pricing_coerces_floats_to_decimal():
    result = StandardPricing().calculate_final_price(0.1)

    assert result == Decimal("0.1")
    assert isinstance(result, Decimal)
    assert StandardPricing().calculate_final_price(7) == 7


class TestBulkDiscountPricing:

    def test_discount_applied_above_threshold(self):
        assert BulkDiscountPricing(200, 10).calculate_final_price(Decimal("250")) == Decimal("225")

    def test_no_discount_below_threshold(self):
        assert BulkDiscountPricing(200, 10).calculate_final_price(Decimal("100")) == Decimal("100")

    def test_discount_applied_at_exact_threshold(self):
        assert BulkDiscountPricing(200, 10).calculate_final_price(Decimal("200")) == Decimal("180")

    @pytest.mark.parametrize("percentage", [-1, 101, "NaN", "ten"])
    def test_invalid_percentage(self, percentage):
        with pytest.raises(InvalidPricingStrategyError):
            BulkDiscountPricing(200, percentage)

    @pytest.mark.parametrize("threshold", ["abc", None, "Infinity", -1])
    def test_invalid_threshold(self, threshold):
        with pytest.raises(InvalidPricingStrategyError, match="threshold"):
            BulkDiscountPricing(threshold, 10)


class TestPromotionalPricing:

    def test_percentage_discount(self):
        assert PromotionalPricing(15).calculate_final_price(Decimal("200")) == Decimal("170")

    def test_zero_and_full_discount(self):
        assert PromotionalPricing(0).calculate_final_price(Decimal("50")) == Decimal("50")
        assert PromotionalPricing(100).calculate_final_price(Decimal("50")) == Decimal("0")

    def test_no_rounding(self):
        assert PromotionalPricing("33.3").calculate_final_price(Decimal("10")) == Decimal("6.670")

    def test_out_of_range(self):
        with pytest.raises(InvalidPricingStrategyError, match="between 0 and 100"):
            PromotionalPricing(150)


@pytest.mark.parametrize(
    "strategy",
    [StandardPricing(), BulkDiscountPricing(100, 5), PromotionalPricing(5)],
)
def test_strategies_are_interchangeable(strategy):
    assert isinstance(strategy, PricingStrategy)
    assert isinstance(strategy.calculate_final_price(Decimal("10")), Decimal)
