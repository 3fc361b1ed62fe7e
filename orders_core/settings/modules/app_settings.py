from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from orders_core.infrastructure.database.config import DatabaseSettings
from orders_core.settings.modules.pricing_settings import PricingSettings
from orders_core.settings.modules.server_settings import ServerSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(extra="ignore")

    server: ServerSettings
    pricing: PricingSettings
    database: DatabaseSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        server=ServerSettings(),
        pricing=PricingSettings(),
        database=DatabaseSettings(),
    )
