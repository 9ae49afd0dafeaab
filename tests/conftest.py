"""Pytest configuration and fixtures."""

# pylint: disable=redefined-outer-name

import asyncio
import os
from dataclasses import dataclass, field
from typing import Optional

import pytest

# Set test environment variables before importing application code
os.environ.setdefault("DOMAIN_EXTENSION", "example.com")
os.environ.setdefault("CLOUDFLARE_ZONE_ID", "zone123")
os.environ.setdefault("CLOUDFLARE_API_TOKEN", "test-token")

# pylint: disable=wrong-import-position
from free_domain.core.config import Settings  # noqa: E402
from free_domain.core.store import MemoryStore  # noqa: E402


@dataclass
class FakeProvider:
    """Fake DNS provider that keeps records in memory and records calls."""

    records: dict[str, list[dict]] = field(default_factory=dict)
    create_response: Optional[dict] = None
    error: Optional[Exception] = None
    list_calls: list[str] = field(default_factory=list)
    create_calls: list[dict] = field(default_factory=list)

    async def list_records(self, name: str) -> list[dict]:
        self.list_calls.append(name)
        if self.error is not None:
            raise self.error
        existing = list(self.records.get(name, []))
        # Yield so concurrent registrations can interleave like real I/O
        await asyncio.sleep(0)
        return existing

    async def create_record(self, record: dict) -> dict:
        self.create_calls.append(record)
        if self.create_response is not None:
            return self.create_response
        self.records.setdefault(record["name"], []).append(record)
        return {"success": True, "errors": [], "result": record}


@dataclass
class FailingStore:
    """Metadata store whose operations always fail."""

    puts: int = 0

    async def get(self, key: str) -> Optional[str]:
        raise ConnectionError("store unavailable")

    async def put(self, key: str, value: str) -> None:
        self.puts += 1
        raise ConnectionError("store unavailable")


@pytest.fixture
def test_settings():
    """Provide test settings with predictable values."""
    return Settings(
        cloudflare_api_token="test-token",
        cloudflare_zone_id="zone123",
        domain_extension="example.com",
        record_ttl=3600,
        record_proxied=False,
        strict_target_validation=False,
        metadata_store="memory",
        redis_ip=None,
        sentry_dsn=None,
        _env_file=None,
    )


@pytest.fixture
def fake_provider():
    """Create an empty fake DNS provider."""
    return FakeProvider()


@pytest.fixture
def failing_store():
    """Metadata store that is unreachable."""
    return FailingStore()


@pytest.fixture
def memory_store():
    """Fresh in-memory metadata store for each test."""
    return MemoryStore()
