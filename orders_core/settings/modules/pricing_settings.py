from decimal import Decimal
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PricingSettings(BaseSettings):
    """
    Pricing policy selection (``PRICING_*`` environment variables).

    ``bulk_threshold`` only applies to the bulk discount strategy;
    ``discount_percentage`` applies to both discount strategies. Out-of-range
    values fail at load time, so a misconfigured server never starts.
    """

    model_config = SettingsConfigDict(env_prefix="PRICING_", extra="ignore")

    strategy: Literal["standard", "bulk_discount", "promotional"] = "standard"
    bulk_threshold: Decimal = Field(default=Decimal("200"), ge=0)
    discount_percentage: Decimal = Field(default=Decimal("0"), ge=0, le=100)
