"""Redis async cache store for the per-language FAQ projections.

The store is constructed once during the FastAPI lifespan, attached to
app.state and injected via Depends(). It is never a module-level client.

get() returns a discriminated result so callers can tell a missing key apart
from an outage without try/except. set() and delete() raise CacheUnavailable
on transport errors or timeouts; callers treat them as best-effort.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Union

import structlog
from redis.asyncio import Redis
from redis.asyncio import from_url as redis_from_url
from redis.exceptions import RedisError

from polyfaq.core.exceptions import CacheUnavailable

logger = structlog.get_logger(__name__)

_DEFAULT_TIMEOUT_SECONDS = 2.0


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CacheHit:
    value: str


@dataclass(frozen=True)
class CacheMiss:
    pass


@dataclass(frozen=True)
class CacheUnavailableResult:
    error: CacheUnavailable


CacheResult = Union[CacheHit, CacheMiss, CacheUnavailableResult]


def faq_cache_key(locale: str) -> str:
    """Cache key for the translated FAQ list of one locale."""
    return f"faqs:{locale}"


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class RedisCacheStore:
    """Thin wrapper over redis.asyncio.Redis with typed results.

    Every command is bounded by ``timeout_seconds``; RedisError and timeouts
    are normalized to CacheUnavailable.
    """

    def __init__(
        self,
        client: Redis,
        timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._r = client
        self._timeout = timeout_seconds

    @classmethod
    def from_url(
        cls,
        url: str,
        timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS,
    ) -> "RedisCacheStore":
        client = redis_from_url(url, decode_responses=True, encoding="utf-8")
        logger.info("redis_cache_store_initialized")
        return cls(client, timeout_seconds=timeout_seconds)

    async def _run(self, op: str, key: str, awaitable: Awaitable[Any]) -> Any:
        try:
            return await asyncio.wait_for(awaitable, timeout=self._timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"redis_{op}_timeout", key=key, timeout_seconds=self._timeout)
            raise CacheUnavailable(
                f"Redis {op.upper()} timed out after {self._timeout}s"
            ) from e
        except RedisError as e:
            logger.error(f"redis_{op}_failed", key=key, error=str(e))
            raise CacheUnavailable(f"Redis {op.upper()} failed: {e}") from e

    async def get(self, key: str) -> CacheResult:
        """GET a key. Missing keys are a CacheMiss, outages CacheUnavailableResult."""
        try:
            value = await self._run("get", key, self._r.get(name=key))
        except CacheUnavailable as e:
            return CacheUnavailableResult(error=e)
        if value is None:
            return CacheMiss()
        return CacheHit(value=value)

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        """SET a key, with an expiration when ``ttl_seconds`` is given."""
        if ttl_seconds:
            await self._run("set", key, self._r.setex(name=key, time=ttl_seconds, value=value))
        else:
            await self._run("set", key, self._r.set(name=key, value=value))

    async def delete(self, *keys: str) -> int:
        """DELETE keys. Returns the number of keys removed."""
        if not keys:
            return 0
        return await self._run("delete", ",".join(keys), self._r.delete(*keys))

    async def ping(self) -> bool:
        """True when Redis answers PING within the timeout."""
        try:
            return bool(await self._run("ping", "-", self._r.ping()))
        except CacheUnavailable:
            return False

    async def close(self) -> None:
        """Gracefully close the Redis connection pool."""
        logger.info("redis_shutdown")
        await self._r.aclose()
