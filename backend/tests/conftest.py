"""Shared pytest fixtures for the polyfaq test suite.

Provides:
  - locales: LocaleSet with canonical "en" plus "hi" and "bn"
  - mock_cache: in-memory cache store that can simulate an outage
  - mock_translator: deterministic TranslationGateway with per-locale failures
  - faq_store: in-memory FAQ document store with call tracking

All external services are faked. No Redis, Postgres or provider calls.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from polyfaq.core.exceptions import (
    CacheUnavailable,
    InvalidLocale,
    PersistenceError,
    TranslationUnavailable,
)
from polyfaq.core.locales import LocaleSet
from polyfaq.db.redis import (
    CacheHit,
    CacheMiss,
    CacheResult,
    CacheUnavailableResult,
)
from polyfaq.models.faq import FAQ
from polyfaq.services.translation.base import TranslationGateway


# ---------------------------------------------------------------------------
# Mock Cache Store
# ---------------------------------------------------------------------------


class MockCacheStore:
    """In-memory stand-in for RedisCacheStore.

    ``unavailable`` makes every call behave like a Redis outage;
    ``fail_writes`` only breaks set()/delete().
    """

    def __init__(self) -> None:
        self._store: dict[str, str] = {}
        self._ttls: dict[str, int | None] = {}
        self.unavailable = False
        self.fail_writes = False
        self.get_calls: list[str] = []
        self.set_calls: list[str] = []
        self.delete_calls: list[tuple[str, ...]] = []

    async def get(self, key: str) -> CacheResult:
        self.get_calls.append(key)
        if self.unavailable:
            return CacheUnavailableResult(error=CacheUnavailable("connection refused"))
        if key not in self._store:
            return CacheMiss()
        return CacheHit(value=self._store[key])

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        self.set_calls.append(key)
        if self.unavailable or self.fail_writes:
            raise CacheUnavailable("connection refused")
        self._store[key] = value
        self._ttls[key] = ttl_seconds

    async def delete(self, *keys: str) -> int:
        self.delete_calls.append(keys)
        if self.unavailable or self.fail_writes:
            raise CacheUnavailable("connection refused")
        removed = 0
        for key in keys:
            if self._store.pop(key, None) is not None:
                self._ttls.pop(key, None)
                removed += 1
        return removed

    async def ping(self) -> bool:
        return not self.unavailable

    async def close(self) -> None:
        pass

    def raw_value(self, key: str) -> str | None:
        return self._store.get(key)

    def ttl(self, key: str) -> int | None:
        return self._ttls.get(key)


# ---------------------------------------------------------------------------
# Mock Translation Gateway
# ---------------------------------------------------------------------------


class MockTranslationGateway(TranslationGateway):
    """Returns ``"[<locale>] <text>"``. Locales in ``fail_for`` raise TranslationUnavailable."""

    def __init__(
        self,
        locales: LocaleSet,
        fail_for: set[str] | None = None,
    ) -> None:
        self._locales = locales
        self.fail_for = set(fail_for or ())
        self.calls: list[dict[str, Any]] = []

    async def translate(self, text: str, target_locale: str) -> str:
        self.calls.append({"text": text, "target_locale": target_locale})
        if not text:
            raise ValueError("text must be non-empty")
        if not self._locales.is_translation_target(target_locale):
            raise InvalidLocale(target_locale)
        if target_locale in self.fail_for:
            raise TranslationUnavailable(f"provider down for {target_locale}")
        return f"[{target_locale}] {text}"


# ---------------------------------------------------------------------------
# In-memory FAQ Store
# ---------------------------------------------------------------------------


class InMemoryFAQStore:
    """Mimics FAQStore: assigns identity and timestamps on insert."""

    _EPOCH = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)

    def __init__(self) -> None:
        self.records: list[FAQ] = []
        self.fail_insert = False
        self.fail_find = False
        self.find_calls = 0
        self.insert_calls = 0

    async def find_all(self) -> list[FAQ]:
        self.find_calls += 1
        if self.fail_find:
            raise PersistenceError("connection lost")
        return list(self.records)

    async def insert(self, faq: FAQ) -> FAQ:
        self.insert_calls += 1
        if self.fail_insert:
            raise PersistenceError("duplicate key value violates unique constraint")
        stamp = self._EPOCH + timedelta(seconds=len(self.records))
        faq.id = uuid.uuid4()
        faq.created_at = stamp
        faq.updated_at = stamp
        self.records.append(faq)
        return faq

    def seed(self, question: dict[str, str], answer: dict[str, str]) -> FAQ:
        """Insert a record directly, bypassing the write path."""
        stamp = self._EPOCH + timedelta(seconds=len(self.records))
        faq = FAQ(
            id=uuid.uuid4(),
            question=question,
            answer=answer,
            created_at=stamp,
            updated_at=stamp,
        )
        self.records.append(faq)
        return faq


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def locales() -> LocaleSet:
    """Canonical English plus Hindi and Bengali."""
    return LocaleSet(canonical="en", additional=("hi", "bn"))


@pytest.fixture
def mock_cache() -> MockCacheStore:
    return MockCacheStore()


@pytest.fixture
def mock_translator(locales: LocaleSet) -> MockTranslationGateway:
    return MockTranslationGateway(locales)


@pytest.fixture
def faq_store() -> InMemoryFAQStore:
    return InMemoryFAQStore()


@pytest.fixture
def sample_faq_maps() -> tuple[dict[str, str], dict[str, str]]:
    """Fully translated question/answer maps for seeding the store."""
    return (
        {"en": "What is X?", "hi": "X क्या है?", "bn": "X কী?"},
        {"en": "X is Y.", "hi": "X, Y है।", "bn": "X হল Y।"},
    )
