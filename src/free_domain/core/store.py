"""Metadata store abstraction supporting Redis and in-memory backends."""

# pylint: disable=missing-function-docstring

import logging
from typing import Optional, Protocol

import redis.asyncio as aioredis
from aiocache import SimpleMemoryCache

from free_domain.core.config import Settings


logger = logging.getLogger(__name__)


class MetadataStore(Protocol):
    """Protocol for key-value metadata stores."""

    async def get(self, key: str) -> Optional[str]: ...
    async def put(self, key: str, value: str) -> None: ...


class RedisStore:
    """Redis metadata store."""

    def __init__(self, url: str):
        self._client = aioredis.from_url(
            url,
            encoding="utf-8",
            decode_responses=True,
        )

    async def get(self, key: str) -> Optional[str]:
        """Get value from Redis."""
        return await self._client.get(key)

    async def put(self, key: str, value: str) -> None:
        """Store value in Redis without expiry."""
        await self._client.set(key, value)

    async def close(self) -> None:
        await self._client.aclose()


class MemoryStore:
    """In-process metadata store using aiocache."""

    def __init__(self):
        self._cache = SimpleMemoryCache()

    async def get(self, key: str) -> Optional[str]:
        """Get value from memory."""
        return await self._cache.get(key)

    async def put(self, key: str, value: str) -> None:
        """Store value in memory without expiry."""
        await self._cache.set(key, value)

    async def close(self) -> None:
        await self._cache.close()


def build_store(settings: Settings) -> Optional[MetadataStore]:
    """Create the store selected by settings, or None when disabled."""
    backend = settings.metadata_backend

    if backend == "redis" and settings.use_redis:
        return RedisStore(settings.redis_url)

    if backend == "redis":
        logger.warning("METADATA_STORE=redis but REDIS_IP is not set, store disabled")
        return None

    if backend == "memory":
        return MemoryStore()

    return None


# Default store instance; None means no store is configured
_store: Optional[MetadataStore] = None


def get_metadata_store() -> Optional[MetadataStore]:
    """Get the configured metadata store, if any."""
    return _store


def init_store(settings: Settings) -> Optional[MetadataStore]:
    """Initialize the store from settings. Call at app startup."""
    global _store  # pylint: disable=global-statement

    _store = build_store(settings)

    return _store


def set_metadata_store(store: Optional[MetadataStore]) -> None:
    """Set a custom store (useful for testing)."""
    global _store  # pylint: disable=global-statement

    _store = store


async def close_store() -> None:
    """Release the store's connections and forget it."""
    global _store  # pylint: disable=global-statement

    close = getattr(_store, "close", None)

    if close is not None:
        await close()

    _store = None
