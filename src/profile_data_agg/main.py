"""Main module for the profile data aggregation service."""
import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from profile_data_agg.config import Settings, get_settings
from profile_data_agg.providers.core import ApiError
from profile_data_agg.routers import (country_router, exchange_router,
                                      news_router, user_router)
from profile_data_agg.services import create_profile_services

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
    )


async def handle_api_error(_request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError as its JSON error body."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def create_app(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the FastAPI app.

    Args:
        settings: Explicit settings; defaults to the environment-backed singleton.
        transport: Optional httpx transport for every upstream client (tests).
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        """Create providers and services at startup; close providers on shutdown."""
        missing = settings.missing_credentials()
        if missing:
            logger.warning("API keys not configured: %s", ", ".join(missing))
        services = create_profile_services(settings, transport=transport)
        fastapi_app.state.settings = settings
        fastapi_app.state.services = services

        yield

        # Close provider resources (httpx clients)
        for provider in services.providers:
            try:
                await provider.close()
            except Exception as exc:  # pylint: disable=broad-except
                logger.warning("Error closing provider %s: %s", type(provider).__name__, exc)

    fastapi_app = FastAPI(
        title="Profile Data Aggregator",
        description="Random user, country, exchange rate and news lookups",
        version="0.1.0",
        lifespan=lifespan,
    )
    fastapi_app.add_exception_handler(ApiError, handle_api_error)

    fastapi_app.include_router(user_router)
    fastapi_app.include_router(country_router)
    fastapi_app.include_router(exchange_router)
    fastapi_app.include_router(news_router)

    @fastapi_app.get("/")
    def health():
        """Return health check status."""
        return {"status": "ok"}

    return fastapi_app


app = create_app()


def run():
    """Run the server (uvicorn). Use for `poetry run profile-agg`."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Server is running on http://%s:%s", settings.host, settings.port)
    uvicorn.run("profile_data_agg.main:app", host=settings.host, port=settings.port)


def run_dev():
    """Run the development server with auto-reload."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run("profile_data_agg.main:app", host="0.0.0.0", port=settings.port, reload=True)
