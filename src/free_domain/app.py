"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from free_domain.api.healthcheck import router as healthcheck_router
from free_domain.api.middleware import install_middleware
from free_domain.api.routes import router
from free_domain.core.config import get_settings
from free_domain.core.store import close_store, init_store
from free_domain.utils.exceptions import init_sentry

# Configure logging for the application
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logging.getLogger("free_domain").setLevel(logging.INFO)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan handler."""
    # Startup
    sentry_enabled = init_sentry()
    settings = get_settings()
    store = init_store(settings)

    logger.info("Free Domain Service starting...")
    logger.info(f"Extension: {settings.extension}")
    logger.info(f"Zone: {settings.cloudflare_zone_id or 'unset'}")
    logger.info(f"Metadata store: {settings.metadata_backend if store else 'none'}")
    logger.info(f"Sentry: {'enabled' if sentry_enabled else 'disabled'}")

    if not settings.provider_configured:
        logger.warning("CLOUDFLARE_API_TOKEN or CLOUDFLARE_ZONE_ID is not set")

    yield

    # Shutdown
    logger.info("Free Domain Service shutting down...")
    await close_store()


app = FastAPI(
    title="Free Domain Service",
    description="Subdomain registration backed by Cloudflare DNS",
    version="1.0.0",
    lifespan=lifespan,
)

install_middleware(app)

# Health check first: the API router ends with a catch-all route
app.include_router(healthcheck_router)
app.include_router(router)
