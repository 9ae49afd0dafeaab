"""Cloudflare DNS API client."""

import logging
from dataclasses import dataclass, field

import aiohttp

from free_domain.core.config import Settings, get_settings
from free_domain.utils.exceptions import ProviderError

logger = logging.getLogger(__name__)


@dataclass
class CloudflareClient:
    """
    Minimal client for the zone's DNS records collection.

    Cloudflare reports failures inside the JSON envelope, so bodies are
    decoded regardless of HTTP status. No timeout or retry is applied beyond
    aiohttp's defaults.
    """

    settings: Settings = field(default_factory=get_settings)

    @property
    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.settings.cloudflare_api_token}",
            "Content-Type": "application/json",
        }

    async def _request(self, method: str, **kwargs) -> dict:
        url = self.settings.records_url

        async with aiohttp.ClientSession(headers=self._headers) as session:
            async with session.request(method, url, **kwargs) as resp:
                payload = await resp.json(content_type=None)

        if not isinstance(payload, dict):
            raise ProviderError(f"Unexpected {method} response from {url}: {resp.status}")

        return payload

    async def list_records(self, name: str) -> list[dict]:
        """
        List DNS records with the given fully qualified name.

        Args:
            name: Fully qualified domain name

        Returns:
            Matching records; empty when none exist or the response has no result
        """
        payload = await self._request("GET", params={"name": name})

        return payload.get("result") or []

    async def create_record(self, record: dict) -> dict:
        """Create a DNS record and return Cloudflare's response envelope."""
        payload = await self._request("POST", json=record)

        if payload.get("success"):
            logger.info(f"Cloudflare record created: {record.get('name')}")

        return payload
