"""Custom exceptions, error reporting and Sentry setup."""

import logging
from typing import Optional

import sentry_sdk

from free_domain.core.config import get_settings

logger = logging.getLogger(__name__)


class FreeDomainError(Exception):
    """Base exception for Free Domain Service errors."""


class ProviderError(FreeDomainError):
    """DNS provider call failed or returned an unusable response."""


class MetadataStoreError(FreeDomainError):
    """Metadata store operation failed."""


def capture_exception(
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "error",
) -> None:
    """
    Capture exception to Sentry if configured, otherwise log it.

    Args:
        exception: The exception to capture
        context: Additional context to include
        level: Log level ('error', 'warning', 'info')
    """
    settings = get_settings()

    # Log locally
    log_func = getattr(logger, level, logger.error)
    log_func("%s: %s", type(exception).__name__, exception, exc_info=True)

    # Send to Sentry if configured
    if settings.sentry_dsn:
        if context:
            with sentry_sdk.new_scope() as scope:
                for key, value in context.items():
                    scope.set_extra(key, value)
                sentry_sdk.capture_exception(exception)
        else:
            sentry_sdk.capture_exception(exception)


def init_sentry() -> bool:
    """Initialize Sentry SDK if configured. Returns True when enabled."""
    settings = get_settings()

    if not settings.sentry_dsn:
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        send_default_pii=False,
    )

    return True
