"""Liveness endpoint. A cache outage is reported but does not fail health."""

from fastapi import APIRouter, Depends

from polyfaq.api.deps import get_cache
from polyfaq.db.redis import RedisCacheStore

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(cache: RedisCacheStore = Depends(get_cache)) -> dict[str, str]:
    cache_ok = await cache.ping()
    return {"status": "ok", "cache": "ok" if cache_ok else "unavailable"}
