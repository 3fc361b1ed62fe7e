from .app_settings import AppSettings, get_app_settings
from .pricing_settings import PricingSettings
from .server_settings import ServerSettings

__all__ = ["AppSettings", "PricingSettings", "ServerSettings", "get_app_settings"]
