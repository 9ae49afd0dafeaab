"""Subdomain registration and lookup logic."""

import json
import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

from free_domain.core.config import Settings, get_settings
from free_domain.core.records import DomainRecord
from free_domain.core.store import MetadataStore, get_metadata_store
from free_domain.core.validators import INVALID_LABEL, check_target, is_valid_label
from free_domain.provider.cloudflare import CloudflareClient
from free_domain.utils.exceptions import MetadataStoreError, capture_exception

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields"
ALREADY_REGISTERED = "Domain already registered"
REGISTRATION_FAILED = "Domain registration failed"
REGISTERED = "Domain registered successfully"
NOT_FOUND = "Domain not found"


class DNSProvider(Protocol):
    """Protocol for DNS provider operations."""

    async def list_records(self, name: str) -> list[dict]: ...

    async def create_record(self, record: dict) -> dict: ...


@dataclass
class RegistrationResult:
    """Outcome of a registration attempt with its HTTP status."""

    success: bool
    message: str
    status_code: int
    domain: Optional[str] = None

    @classmethod
    def failure(cls, message: str, status_code: int = 400) -> "RegistrationResult":
        return cls(success=False, message=message, status_code=status_code)

    def to_dict(self) -> dict:
        body = {"success": self.success, "message": self.message}

        if self.domain is not None:
            body["domain"] = self.domain

        return body


@dataclass
class LookupResult:
    """Outcome of a metadata lookup with its HTTP status."""

    success: bool
    status_code: int
    data: Optional[dict] = None
    message: Optional[str] = None

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True, "data": self.data}

        return {"success": False, "message": self.message}


def _provider_error_message(response: dict) -> Optional[str]:
    """Return the first error message of a Cloudflare envelope, if any."""
    errors = response.get("errors") or []

    if errors and isinstance(errors[0], dict):
        return errors[0].get("message") or None

    return None


@dataclass
class Registrar:
    """
    Registers subdomains under the configured extension.

    The duplicate check and the creation call are separate requests to the
    provider, so two concurrent registrations of one label can both pass the
    check. The provider's own uniqueness behaviour is the only backstop.
    """

    settings: Settings = field(default_factory=get_settings)
    provider: Optional[DNSProvider] = None
    store: Optional[MetadataStore] = field(default_factory=get_metadata_store)

    def __post_init__(self):
        if self.provider is None:
            self.provider = CloudflareClient(settings=self.settings)

    async def register(
        self,
        label: Optional[str],
        target: Optional[str],
        record_type: Optional[str],
    ) -> RegistrationResult:
        """
        Create a DNS record for ``label`` pointing at ``target``.

        Provider and store exceptions propagate to the caller.
        """
        if not label or not target or not record_type:
            return RegistrationResult.failure(MISSING_FIELDS)

        if not is_valid_label(label):
            return RegistrationResult.failure(INVALID_LABEL)

        # Provider record types are upper case
        record_type = record_type.upper()

        if self.settings.strict_target_validation:
            reason = check_target(target, record_type)
            if reason:
                return RegistrationResult.failure(reason)

        full_domain = self.settings.full_domain(label)

        existing = await self.provider.list_records(full_domain)

        if existing:
            logger.info(f"{full_domain} already has {len(existing)} record(s)")
            return RegistrationResult.failure(ALREADY_REGISTERED)

        record = DomainRecord(domain=full_domain, target=target, type=record_type)
        response = await self.provider.create_record(
            record.to_provider_payload(
                ttl=self.settings.record_ttl,
                proxied=self.settings.record_proxied,
            )
        )

        if not response.get("success"):
            message = _provider_error_message(response) or REGISTRATION_FAILED
            logger.warning(f"Provider rejected {full_domain}: {message}")
            return RegistrationResult.failure(message)

        await self._persist(record)

        logger.info(f"Registered {full_domain} -> {target} ({record_type})")

        return RegistrationResult(
            success=True, message=REGISTERED, status_code=200, domain=full_domain
        )

    async def _persist(self, record: DomainRecord) -> bool:
        """Best-effort write of the denormalized record."""
        if self.store is None:
            return False

        try:
            await self.store.put(record.domain, record.to_json())
        except Exception as e:  # pylint: disable=broad-exception-caught
            # The DNS record already exists, so the registration still succeeds
            capture_exception(
                MetadataStoreError(f"Failed to store metadata: {e}"),
                {"domain": record.domain},
                level="warning",
            )
            return False

        return True

    async def lookup(self, label: str) -> LookupResult:
        """Return stored metadata for ``label`` without querying the provider."""
        full_domain = self.settings.full_domain(label)

        if self.store is not None:
            raw = await self.store.get(full_domain)
            if raw:
                return LookupResult(success=True, status_code=200, data=json.loads(raw))

        return LookupResult(success=False, status_code=404, message=NOT_FOUND)
