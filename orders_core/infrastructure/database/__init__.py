from .config import (
    DatabaseSettings,
    close_database,
    create_engine,
    get_engine,
    get_session_factory,
    init_database,
    reset_engine,
)

__all__ = [
    "DatabaseSettings",
    "close_database",
    "create_engine",
    "get_engine",
    "get_session_factory",
    "init_database",
    "reset_engine",
]
