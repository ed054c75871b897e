"""Shared FastAPI dependencies for database sessions, adapters, service injection.

The Database, RedisCacheStore and TranslationGateway are created once during
the FastAPI lifespan and stored on app.state. All downstream code retrieves
them via Depends(), never by direct import.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from polyfaq.core.config import settings
from polyfaq.core.locales import LocaleSet
from polyfaq.db.faq_store import FAQStore
from polyfaq.db.redis import RedisCacheStore
from polyfaq.services.faq.read import FAQReadService
from polyfaq.services.faq.write import FAQWriteService
from polyfaq.services.translation.base import TranslationGateway


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped async database session."""
    async with request.app.state.database.session() as session:
        yield session


async def get_faq_store(db: AsyncSession = Depends(get_db)) -> FAQStore:
    return FAQStore(db)


# ---------------------------------------------------------------------------
# Singletons: retrieved from app.state (set during lifespan)
# ---------------------------------------------------------------------------

def get_cache(request: Request) -> RedisCacheStore:
    """Return the cache store created during lifespan."""
    return request.app.state.cache


def get_translator(request: Request) -> TranslationGateway:
    """Return the translation gateway created during lifespan."""
    return request.app.state.translator


def get_locales() -> LocaleSet:
    return settings.locales


# ---------------------------------------------------------------------------
# Service constructors: wired via Depends()
# ---------------------------------------------------------------------------

async def get_read_service(
    cache: RedisCacheStore = Depends(get_cache),
    store: FAQStore = Depends(get_faq_store),
    translator: TranslationGateway = Depends(get_translator),
    locales: LocaleSet = Depends(get_locales),
) -> FAQReadService:
    """Return an FAQReadService instance."""
    return FAQReadService(
        cache=cache,
        store=store,
        translator=translator,
        locales=locales,
        cache_ttl_seconds=settings.faq_cache_ttl_seconds,
    )


async def get_write_service(
    store: FAQStore = Depends(get_faq_store),
    translator: TranslationGateway = Depends(get_translator),
    locales: LocaleSet = Depends(get_locales),
    cache: RedisCacheStore = Depends(get_cache),
) -> FAQWriteService:
    """Return an FAQWriteService instance."""
    return FAQWriteService(
        store=store,
        translator=translator,
        locales=locales,
        cache=cache,
        max_attempts=settings.translation_max_attempts,
    )
