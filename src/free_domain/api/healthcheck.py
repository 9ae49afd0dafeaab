"""Health check API endpoint."""

from fastapi import APIRouter, Depends

from free_domain.api.models import HealthResponse
from free_domain.api.routes import RouteDependencies, get_dependencies

router = APIRouter(tags=["health"])


@router.get("/healthcheck", response_model=HealthResponse)
async def health_check(
    deps: RouteDependencies = Depends(get_dependencies),
) -> HealthResponse:
    """
    Health check endpoint (no auth required).

    Reports whether Cloudflare credentials are set and which metadata store
    backs lookups.
    """
    store_backend = "none"

    if deps.registrar.store is not None:
        store_backend = deps.settings.metadata_backend

    return HealthResponse(
        status="ok",
        provider_configured=deps.settings.provider_configured,
        metadata_store=store_backend,
    )
