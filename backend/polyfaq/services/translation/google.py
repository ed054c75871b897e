"""Google Cloud Translation (v2 REST) gateway.

Uses a shared httpx.AsyncClient with a bounded timeout.
Instantiated once in the FastAPI lifespan; injected via app/api deps.
No retries here: retry policy belongs to the caller.
"""

from typing import Any

import httpx
import structlog

from polyfaq.core.exceptions import InvalidLocale, TranslationUnavailable
from polyfaq.core.locales import LocaleSet
from polyfaq.services.translation.base import TranslationGateway

logger = structlog.get_logger(__name__)

_TIMEOUT_SECONDS = 10.0


class GoogleTranslationGateway(TranslationGateway):
    """Translates canonical-locale text through the Google v2 ``translate`` endpoint."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        locales: LocaleSet,
        timeout_seconds: float = _TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_url = api_url
        self._api_key = api_key
        self._locales = locales
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)
        logger.info(
            "translation_gateway_initialized",
            source=locales.canonical,
            targets=list(locales.additional),
        )

    async def translate(self, text: str, target_locale: str) -> str:
        if not text:
            raise ValueError("text must be non-empty")
        if not self._locales.is_translation_target(target_locale):
            raise InvalidLocale(target_locale)

        try:
            response = await self._client.post(
                self._api_url,
                params={"key": self._api_key},
                json={
                    "q": text,
                    "source": self._locales.canonical,
                    "target": target_locale,
                    "format": "text",
                },
            )
            response.raise_for_status()
            body: Any = response.json()
        except httpx.TimeoutException as e:
            logger.error(
                "translation_timeout",
                target=target_locale,
                text_len=len(text),
            )
            raise TranslationUnavailable(
                f"Translation to '{target_locale}' timed out"
            ) from e
        except httpx.HTTPStatusError as e:
            logger.error(
                "translation_failed",
                target=target_locale,
                status_code=e.response.status_code,
            )
            raise TranslationUnavailable(
                f"Translation provider returned {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error("translation_failed", target=target_locale, error=str(e))
            raise TranslationUnavailable(f"Translation request failed: {e}") from e

        translated = self._extract(body)
        if translated is None:
            logger.error("translation_malformed_response", target=target_locale)
            raise TranslationUnavailable("Translation provider returned no text")

        logger.debug(
            "translation_ok",
            target=target_locale,
            text_len=len(text),
            translated_len=len(translated),
        )
        return translated

    @staticmethod
    def _extract(body: Any) -> str | None:
        try:
            translated = body["data"]["translations"][0]["translatedText"]
        except (KeyError, IndexError, TypeError):
            return None
        return translated if isinstance(translated, str) else None

    async def close(self) -> None:
        logger.info("translation_gateway_shutdown")
        await self._client.aclose()
