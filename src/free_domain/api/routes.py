"""API routes for the Free Domain Service."""

from dataclasses import dataclass, field
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from free_domain.api.models import RegisterRequest
from free_domain.core.config import Settings, get_settings
from free_domain.core.registrar import Registrar
from free_domain.utils.exceptions import capture_exception

INTERNAL_ERROR = "Internal server error"
SERVICE_NAME = "Free Domain Service API"

router = APIRouter()


@dataclass
class RouteDependencies:
    """Dependencies for route handlers."""

    settings: Settings = field(default_factory=get_settings)
    registrar: Optional[Registrar] = None

    def __post_init__(self):
        if self.registrar is None:
            self.registrar = Registrar(settings=self.settings)


# Global dependencies instance (can be overridden for testing)
_dependencies: Optional[RouteDependencies] = None


def get_dependencies() -> RouteDependencies:
    """Get the current route dependencies."""
    global _dependencies  # pylint: disable=global-statement
    if _dependencies is None:
        _dependencies = RouteDependencies()
    return _dependencies


def set_dependencies(deps: RouteDependencies) -> None:
    """Set custom dependencies (useful for testing)."""
    global _dependencies  # pylint: disable=global-statement
    _dependencies = deps


def reset_dependencies() -> None:
    """Reset dependencies to default (useful for testing)."""
    global _dependencies  # pylint: disable=global-statement
    _dependencies = None


def internal_error_response() -> JSONResponse:
    """Generic 500 body that leaks no internal detail."""
    return JSONResponse({"success": False, "message": INTERNAL_ERROR}, status_code=500)


@router.post("/register")
async def register(
    request: Request,
    deps: RouteDependencies = Depends(get_dependencies),
):
    """Register a subdomain label and create its DNS record."""
    try:
        payload = await request.json()
        if payload is not None and not isinstance(payload, dict):
            # Arrays, strings and numbers carry no fields
            payload = {}
        body = RegisterRequest.model_validate(payload)
        result = await deps.registrar.register(body.domain, body.target, body.type)
    except Exception as e:  # pylint: disable=broad-exception-caught
        # Malformed bodies and provider/network failures alike
        capture_exception(e, {"path": "/register"})
        return internal_error_response()

    return JSONResponse(result.to_dict(), status_code=result.status_code)


@router.get("/check/{domain:path}")
async def check(domain: str, deps: RouteDependencies = Depends(get_dependencies)):
    """Return stored metadata for a registered label."""
    # Only the first path segment names the label
    label = domain.split("/")[0]
    result = await deps.registrar.lookup(label)

    return JSONResponse(result.to_dict(), status_code=result.status_code)


@router.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
async def index(path: str):  # pylint: disable=unused-argument
    """Describe the API for any unmatched path."""
    return {
        "success": True,
        "message": SERVICE_NAME,
        "endpoints": {
            "register": "POST /register",
            "check": "GET /check/:domain",
        },
    }
