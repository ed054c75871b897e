"""Write path: translate a new FAQ into every supported locale, then persist.

FAQWriteService.create_faq() does exactly these things in order:
1. Build a draft with only the canonical-locale question and answer
2. Translate both fields into every additional locale (issued concurrently,
   joined before step 3); TranslationUnavailable is retried with backoff
3. Insert the completed record; nothing is written if any translation failed
4. Invalidate the per-locale cache entries (best-effort)
"""

from __future__ import annotations

import asyncio

import structlog

from polyfaq.core.exceptions import (
    CacheUnavailable,
    FAQCreationFailed,
    InvalidLocale,
    TranslationUnavailable,
)
from polyfaq.core.locales import LocaleSet
from polyfaq.db.faq_store import FAQStore
from polyfaq.db.redis import RedisCacheStore, faq_cache_key
from polyfaq.models.faq import FAQ
from polyfaq.services.translation.base import TranslationGateway

logger = structlog.get_logger(__name__)

_BACKOFF_SECONDS = (0.5, 1.0, 2.0)


class FAQWriteService:
    """Creates fully translated FAQs. A persisted FAQ always has every locale."""

    def __init__(
        self,
        store: FAQStore,
        translator: TranslationGateway,
        locales: LocaleSet,
        cache: RedisCacheStore,
        max_attempts: int = 2,
        backoff_seconds: tuple[float, ...] = _BACKOFF_SECONDS,
    ) -> None:
        self._store = store
        self._translator = translator
        self._locales = locales
        self._cache = cache
        self._max_attempts = max(1, max_attempts)
        self._backoff = backoff_seconds

    async def create_faq(self, question: str, answer: str) -> FAQ:
        canonical = self._locales.canonical
        questions = {canonical: question}
        answers = {canonical: answer}

        targets = self._locales.additional
        jobs = [
            self._translate_with_retry(text, locale)
            for locale in targets
            for text in (question, answer)
        ]
        # return_exceptions so every call has finished before we decide
        results = await asyncio.gather(*jobs, return_exceptions=True)

        for result in results:
            if isinstance(result, (TranslationUnavailable, InvalidLocale, ValueError)):
                logger.error("faq_creation_translation_failed", error=str(result))
                raise FAQCreationFailed(result) from result
            if isinstance(result, BaseException):
                raise result

        for i, locale in enumerate(targets):
            questions[locale] = results[2 * i]
            answers[locale] = results[2 * i + 1]

        faq = await self._store.insert(FAQ(question=questions, answer=answers))

        await self._invalidate_cache()
        logger.info(
            "faq_created",
            faq_id=str(faq.id),
            locales=list(self._locales.all),
        )
        return faq

    async def _translate_with_retry(self, text: str, locale: str) -> str:
        """Retry TranslationUnavailable with backoff. InvalidLocale is final."""
        for attempt in range(self._max_attempts):
            try:
                return await self._translator.translate(text, locale)
            except TranslationUnavailable as e:
                logger.warning(
                    "translation_attempt_failed",
                    locale=locale,
                    attempt=attempt + 1,
                    error=e.error,
                )
                if attempt == self._max_attempts - 1:
                    raise
                delay = self._backoff[min(attempt, len(self._backoff) - 1)] if self._backoff else 0
                await asyncio.sleep(delay)
        raise TranslationUnavailable(f"Translation to '{locale}' not attempted")

    async def _invalidate_cache(self) -> None:
        keys = [faq_cache_key(locale) for locale in self._locales.all]
        try:
            await self._cache.delete(*keys)
        except CacheUnavailable as e:
            logger.warning("faq_cache_invalidate_failed", keys=keys, error=e.error)
