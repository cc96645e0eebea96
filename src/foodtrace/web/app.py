"""FastAPI application factory for the admin front-end."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
import pydantic
import structlog
from fastapi import FastAPI

from .._version import __version__
from ..context import LayoutContext
from ..core.config import Settings, get_settings
from ..core.exceptions import ConfigurationError
from ..pages import EmployeeAwardPage, FoodWastePage, InventoryPage
from ..transport.http import AsyncHTTPTransport
from ..utils.logging_config import configure_logging
from .middleware import RequestLoggingMiddleware
from .routes import router

logger = structlog.get_logger()


def load_settings() -> Settings:
    """Read settings once, turning validation failures into ConfigurationError."""
    try:
        return get_settings()
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def create_app(
    settings: Settings | None = None,
    *,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create the admin application.

    ``http_transport`` replaces the network layer of the backend client; tests
    pass an ``httpx.MockTransport`` here.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level, json_output=settings.log_json)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        """Build one session context, transport and page set for the app lifetime."""
        transport = AsyncHTTPTransport(settings.api, http_transport=http_transport)
        context = LayoutContext.from_settings(settings)
        app.state.transport = transport
        app.state.context = context
        app.state.inventory_page = InventoryPage(context, transport)
        app.state.food_waste_page = FoodWastePage()
        app.state.employee_award_page = EmployeeAwardPage()
        logger.info("admin_started", base_url=settings.api.base_url)

        yield

        await transport.close()

    app = FastAPI(
        title=settings.app_name,
        description="Administrative front-end for food ingredient inventory",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(router)
    return app
