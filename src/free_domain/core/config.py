"""Centralized configuration using Pydantic BaseSettings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

METADATA_BACKENDS = ("none", "memory", "redis")


def _strip_dots(s: str) -> str:
    """Strip whitespace and surrounding dots from a DNS name."""
    return s.strip().strip(".")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Cloudflare configuration
    cloudflare_api_token: str = ""
    cloudflare_zone_id: str = ""
    cloudflare_api_base: str = "https://api.cloudflare.com/client/v4"

    # Parent domain handed out to users
    domain_extension: str = "your-domain.com"

    # Created record defaults
    record_ttl: int = 3600
    record_proxied: bool = False

    # Enforce target and CNAME rules in the handler, not only in clients
    strict_target_validation: bool = False

    # Metadata store: none, memory or redis
    metadata_store: str = "none"

    # Redis configuration
    redis_ip: Optional[str] = None
    redis_port: int = 6379
    redis_db: int = 0

    # Sentry configuration (optional)
    sentry_dsn: Optional[str] = None
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 1.0

    @property
    def extension(self) -> str:
        """Return the domain extension without leading or trailing dots."""
        return _strip_dots(self.domain_extension).lower()

    def full_domain(self, label: str) -> str:
        """Return the fully qualified name for a user label."""
        return f"{label}.{self.extension}"

    @property
    def records_url(self) -> str:
        """Return the DNS records collection URL for the configured zone."""
        base = self.cloudflare_api_base.rstrip("/")

        return f"{base}/zones/{self.cloudflare_zone_id}/dns_records"

    @property
    def provider_configured(self) -> bool:
        """Check if Cloudflare credentials are present."""
        return bool(self.cloudflare_api_token and self.cloudflare_zone_id)

    @property
    def use_redis(self) -> bool:
        """Check if Redis is configured."""
        return self.redis_ip is not None

    @property
    def redis_url(self) -> str:
        """Return Redis connection URL."""
        return f"redis://{self.redis_ip}:{self.redis_port}/{self.redis_db}"

    @property
    def metadata_backend(self) -> str:
        """Return the effective metadata store backend name."""
        backend = self.metadata_store.strip().lower()

        if backend not in METADATA_BACKENDS:
            backend = "none"

        if backend == "none" and self.use_redis:
            return "redis"

        return backend


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
