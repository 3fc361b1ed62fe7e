# Settings package
from orders_core.settings.modules import (
    AppSettings,
    PricingSettings,
    ServerSettings,
    get_app_settings,
)

__all__ = ["get_app_settings", "AppSettings", "PricingSettings", "ServerSettings"]
