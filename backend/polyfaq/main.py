"""FastAPI application entrypoint.

Routes: GET/POST /faqs and GET /health. Auto-generated OpenAPI docs at /docs.

The Database, RedisCacheStore and GoogleTranslationGateway are created once
during the lifespan and stored on app.state for injection via Depends().
They are closed in reverse order on shutdown.
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from polyfaq.api.faqs import router as faqs_router
from polyfaq.api.health import router as health_router
from polyfaq.core.config import settings
from polyfaq.core.exceptions import PolyfaqError
from polyfaq.db.postgres import Database
from polyfaq.db.redis import RedisCacheStore
from polyfaq.services.translation.google import GoogleTranslationGateway


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


_configure_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle."""
    # --- Startup ---
    logger.info(
        "app_startup",
        env=settings.app_env,
        locales=list(settings.locales.all),
    )

    database = Database(settings.postgres_url, pool_size=20, max_overflow=10)
    await database.create_all()
    app.state.database = database

    app.state.cache = RedisCacheStore.from_url(
        settings.redis_url,
        timeout_seconds=settings.cache_timeout_seconds,
    )
    app.state.translator = GoogleTranslationGateway(
        api_url=settings.translation_api_url,
        api_key=settings.translation_api_key,
        locales=settings.locales,
        timeout_seconds=settings.translation_timeout_seconds,
    )

    logger.info("app_adapters_ready")
    yield

    # --- Shutdown ---
    logger.info("app_shutdown")

    await app.state.translator.close()
    await app.state.cache.close()
    await database.close()


app = FastAPI(
    title="polyfaq: Multilingual FAQ API",
    description="FAQ content served per language, cached in Redis, auto-translated on write.",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(PolyfaqError)
async def polyfaq_error_handler(request: Request, exc: PolyfaqError) -> JSONResponse:
    """Structured ``{message, error}`` response for all polyfaq exceptions."""
    logger.error(
        "request_failed",
        path=request.url.path,
        code=exc.code,
        error=exc.error,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_unhandled_error", path=request.url.path)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error", "error": str(exc)},
    )


app.include_router(health_router)
app.include_router(faqs_router)
