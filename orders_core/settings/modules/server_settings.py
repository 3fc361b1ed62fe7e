from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """HTTP server and runtime wiring (``APP_*`` environment variables)."""

    model_config = SettingsConfigDict(env_prefix="APP_", extra="ignore")

    name: str = "clean-orders"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # "memory" keeps everything in process; "postgres" uses DB_* settings
    persistence: Literal["memory", "postgres"] = "memory"

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
