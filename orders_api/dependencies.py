"""
FastAPI Dependencies.

Composition root: wires repositories, ports and pricing policy into the
application services.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from orders_core.application.interfaces import CustomerValidator
from orders_core.application.services import (
    CustomerApplicationService,
    OrderApplicationService,
)
from orders_core.data.repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyOrderRepository,
)
from orders_core.domain.errors import InvalidPricingStrategyError
from orders_core.domain.pricing import (
    BulkDiscountPricing,
    PricingStrategy,
    PromotionalPricing,
    StandardPricing,
)
from orders_core.domain.repositories import CustomerRepository, OrderRepository
from orders_core.infrastructure.adapters.customers import CustomerServiceAdapter
from orders_core.infrastructure.adapters.persistence import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
)
from orders_core.infrastructure.database.config import get_session_factory, reset_engine
from orders_core.infrastructure.logging import get_logger
from orders_core.settings import PricingSettings, get_app_settings

logger = get_logger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_order_repository: Optional[OrderRepository] = None
_customer_repository: Optional[CustomerRepository] = None
_pricing_strategy: Optional[PricingStrategy] = None


# =============================================================================
# PRICING
# =============================================================================

def build_pricing_strategy(settings: PricingSettings) -> PricingStrategy:
    """
    Build the pricing strategy selected by configuration.

    Args:
        settings: Pricing settings

    Returns:
        Configured PricingStrategy

    Raises:
        InvalidPricingStrategyError: If the strategy name or its parameters are invalid
    """
    if settings.strategy == "standard":
        return StandardPricing()
    if settings.strategy == "bulk_discount":
        return BulkDiscountPricing(settings.bulk_threshold, settings.discount_percentage)
    if settings.strategy == "promotional":
        return PromotionalPricing(settings.discount_percentage)
    raise InvalidPricingStrategyError(f"Unknown pricing strategy: {settings.strategy}")


class PricingConfigurationError(RuntimeError):
    """Configured pricing strategy cannot be built (answers 500, not 400)."""


def get_pricing_strategy() -> PricingStrategy:
    global _pricing_strategy
    if _pricing_strategy is None:
        try:
            _pricing_strategy = build_pricing_strategy(get_app_settings().pricing)
        except InvalidPricingStrategyError as e:
            logger.error(f"Invalid pricing configuration: {e}")
            raise PricingConfigurationError(f"Invalid pricing configuration: {e}") from e
        logger.info(f"Using pricing strategy: {_pricing_strategy!r}")
    return _pricing_strategy


# =============================================================================
# REPOSITORIES
# =============================================================================

def _use_postgres() -> bool:
    return get_app_settings().server.persistence == "postgres"


def get_order_repository() -> OrderRepository:
    global _order_repository
    if _order_repository is None:
        if _use_postgres():
            _order_repository = SqlAlchemyOrderRepository(get_session_factory())
            logger.info("Created SqlAlchemyOrderRepository instance")
        else:
            _order_repository = InMemoryOrderRepository()
            logger.info("Created InMemoryOrderRepository instance")
    return _order_repository


def get_customer_repository() -> CustomerRepository:
    global _customer_repository
    if _customer_repository is None:
        if _use_postgres():
            _customer_repository = SqlAlchemyCustomerRepository(get_session_factory())
            logger.info("Created SqlAlchemyCustomerRepository instance")
        else:
            _customer_repository = InMemoryCustomerRepository()
            logger.info("Created InMemoryCustomerRepository instance")
    return _customer_repository


# =============================================================================
# SERVICES
# =============================================================================

def get_customer_service(
    repository: CustomerRepository = Depends(get_customer_repository),
) -> CustomerApplicationService:
    return CustomerApplicationService(customer_repository=repository)


def get_customer_validator(
    service: CustomerApplicationService = Depends(get_customer_service),
) -> CustomerValidator:
    return CustomerServiceAdapter(service)


def get_order_service(
    repository: OrderRepository = Depends(get_order_repository),
    validator: CustomerValidator = Depends(get_customer_validator),
    pricing: PricingStrategy = Depends(get_pricing_strategy),
) -> OrderApplicationService:
    return OrderApplicationService(
        order_repository=repository,
        customer_validator=validator,
        pricing_strategy=pricing,
    )


# =============================================================================
# RESET (for testing)
# =============================================================================

def reset_dependencies() -> None:
    global _order_repository, _customer_repository, _pricing_strategy

    _order_repository = None
    _customer_repository = None
    _pricing_strategy = None

    reset_engine()
    get_app_settings.cache_clear()
    logger.info("Dependencies reset")
