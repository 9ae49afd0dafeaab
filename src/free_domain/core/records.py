"""Registered domain record entity."""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Format a UTC datetime as ISO-8601 with milliseconds and a Z suffix."""
    value = value.astimezone(timezone.utc)

    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class DomainRecord:
    """A subdomain bound to a target through a DNS record."""

    domain: str
    target: str
    type: str
    created_at: datetime = field(default_factory=_utc_now)

    def to_dict(self) -> dict:
        """Convert to the metadata store document."""
        return {
            "domain": self.domain,
            "target": self.target,
            "type": self.type,
            "createdAt": format_timestamp(self.created_at),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def to_provider_payload(self, ttl: int, proxied: bool) -> dict:
        """Build the DNS record creation body."""
        return {
            "type": self.type,
            "name": self.domain,
            "content": self.target,
            "ttl": ttl,
            "proxied": proxied,
        }
