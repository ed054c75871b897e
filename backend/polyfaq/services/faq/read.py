"""Cache-aside read path for translated FAQ lists.

FAQReadService.list_faqs() runs one request through:
1. CHECK_CACHE: GET faqs:{lang}. An outage or undecodable payload is a miss.
2. HIT: return the cached list unchanged (no revalidation against the store).
3. MISS: load every FAQ from the store and resolve it to ``lang`` using the
   translations materialized at write time. A supported locale missing from
   an older record is translated on the fly; if that fails the canonical
   text is served instead.
4. POPULATE_CACHE: SET the list with a TTL. Failure is logged, never raised.
"""

from __future__ import annotations

import asyncio
import json

import structlog
from pydantic import TypeAdapter, ValidationError

from polyfaq.core.exceptions import (
    CacheUnavailable,
    FAQRetrievalFailed,
    InvalidLocale,
    PersistenceError,
    TranslationUnavailable,
)
from polyfaq.core.locales import LocaleSet
from polyfaq.db.faq_store import FAQStore
from polyfaq.db.redis import (
    CacheHit,
    CacheUnavailableResult,
    RedisCacheStore,
    faq_cache_key,
)
from polyfaq.models.faq import FAQ
from polyfaq.schemas.faq import TranslatedFAQ
from polyfaq.services.translation.base import TranslationGateway

logger = structlog.get_logger(__name__)

_payload_adapter = TypeAdapter(list[TranslatedFAQ])


def serialize_faqs(faqs: list[TranslatedFAQ]) -> str:
    return json.dumps([f.model_dump() for f in faqs], ensure_ascii=False)


def deserialize_faqs(raw: str) -> list[TranslatedFAQ]:
    return _payload_adapter.validate_json(raw)


class FAQReadService:
    """Serves per-language FAQ lists with Redis in front of the store."""

    def __init__(
        self,
        cache: RedisCacheStore,
        store: FAQStore,
        translator: TranslationGateway,
        locales: LocaleSet,
        cache_ttl_seconds: int,
    ) -> None:
        self._cache = cache
        self._store = store
        self._translator = translator
        self._locales = locales
        self._ttl = cache_ttl_seconds

    async def list_faqs(self, lang: str | None) -> list[TranslatedFAQ]:
        locale = self._locales.resolve(lang)
        key = faq_cache_key(locale)

        cached = await self._check_cache(key)
        if cached is not None:
            logger.debug("faq_cache_hit", locale=locale, count=len(cached))
            return cached

        logger.debug("faq_cache_miss", locale=locale)
        try:
            records = await self._store.find_all()
        except PersistenceError as e:
            raise FAQRetrievalFailed(e) from e

        translated = list(
            await asyncio.gather(*(self._resolve(faq, locale) for faq in records))
        )

        await self._populate_cache(key, translated)
        return translated

    async def _check_cache(self, key: str) -> list[TranslatedFAQ] | None:
        result = await self._cache.get(key)
        if isinstance(result, CacheUnavailableResult):
            logger.warning("faq_cache_degraded", key=key, error=result.error.error)
            return None
        if not isinstance(result, CacheHit):
            return None
        try:
            return deserialize_faqs(result.value)
        except ValidationError as e:
            logger.warning("faq_cache_decode_failed", key=key, error=str(e))
            return None

    async def _resolve(self, faq: FAQ, locale: str) -> TranslatedFAQ:
        stored = faq.text_for(locale)
        if stored is not None:
            return TranslatedFAQ(question=stored[0], answer=stored[1])

        question, answer = faq.canonical_text(self._locales.canonical)
        if not self._locales.is_translation_target(locale):
            return TranslatedFAQ(question=question, answer=answer)

        # Record predates this locale: translate now, fall back to canonical
        try:
            question_t, answer_t = await asyncio.gather(
                self._translator.translate(question, locale),
                self._translator.translate(answer, locale),
            )
        except (TranslationUnavailable, InvalidLocale, ValueError) as e:
            logger.warning(
                "faq_lazy_translation_failed",
                faq_id=str(faq.id),
                locale=locale,
                error=str(e),
            )
            return TranslatedFAQ(question=question, answer=answer)
        return TranslatedFAQ(question=question_t, answer=answer_t)

    async def _populate_cache(self, key: str, faqs: list[TranslatedFAQ]) -> None:
        try:
            await self._cache.set(key, serialize_faqs(faqs), self._ttl)
        except CacheUnavailable as e:
            logger.warning("faq_cache_populate_failed", key=key, error=e.error)
            return
        logger.debug("faq_cache_populated", key=key, count=len(faqs))
