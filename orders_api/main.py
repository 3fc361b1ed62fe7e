"""
Clean Orders - Main FastAPI Application.

REST API layer over the order and customer application services.
"""
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from orders_api.dependencies import get_pricing_strategy
from orders_api.routes import customers, health, orders
from orders_core.application.errors import (
    CustomerNotFoundError,
    OrderNotFoundError,
    OrderValidationError,
)
from orders_core.domain.errors import CannotCancelShippedOrderError, DomainValidationError
from orders_core.infrastructure.database.config import close_database, init_database
from orders_core.infrastructure.logging import configure_logging, get_logger
from orders_core.settings import get_app_settings

logger = get_logger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# =============================================================================
# STARTUP/SHUTDOWN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_app_settings()

    # Fail startup on a bad pricing configuration instead of per request
    get_pricing_strategy()
    logger.info(f"{settings.server.name} starting up (persistence: {settings.server.persistence})")

    if settings.server.persistence == "postgres":
        await init_database()

    yield

    if settings.server.persistence == "postgres":
        await close_database()
    logger.info(f"{settings.server.name} shutting down")


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

def register_exception_handlers(app: FastAPI) -> None:
    """Translate domain and application errors into HTTP responses."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
        else:
            message = "Invalid request"
        return _error(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(OrderValidationError)
    async def order_validation_handler(request: Request, exc: OrderValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(OrderNotFoundError)
    async def order_not_found_handler(request: Request, exc: OrderNotFoundError):
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(CustomerNotFoundError)
    async def customer_not_found_handler(request: Request, exc: CustomerNotFoundError):
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(CannotCancelShippedOrderError)
    async def cannot_cancel_handler(request: Request, exc: CannotCancelShippedOrderError):
        return _error(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle all uncaught exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

def create_app() -> FastAPI:
    settings = get_app_settings()
    configure_logging(settings.server.log_level)

    app = FastAPI(
        title="Clean Orders API",
        description="Order placement and cancellation over a clean architecture core.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests with timing."""
        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} "
            f"[{response.status_code}] ({duration:.3f}s)"
        )
        return response

    register_exception_handlers(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(orders.router, prefix="/orders", tags=["Orders"])
    app.include_router(customers.router, prefix="/customers", tags=["Customers"])

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_app_settings()
    uvicorn.run(
        "orders_api.main:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.server.log_level.lower(),
    )


if __name__ == "__main__":
    run()
