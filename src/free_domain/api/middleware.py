"""CORS headers and the outermost error guard."""

from fastapi import FastAPI, Request, Response

from free_domain.api.routes import internal_error_response
from free_domain.utils.exceptions import capture_exception

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "Content-Type": "application/json",
}


async def cors_and_error_guard(request: Request, call_next) -> Response:
    """
    Answer preflights, stamp CORS headers on every response and turn any
    uncaught exception into a JSON 500.
    """
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    try:
        response = await call_next(request)
    except Exception as e:  # pylint: disable=broad-exception-caught
        capture_exception(e, {"method": request.method, "path": request.url.path})
        response = internal_error_response()

    response.headers.update(CORS_HEADERS)

    return response


def install_middleware(app: FastAPI) -> None:
    """Attach the CORS/error middleware to an application."""
    app.middleware("http")(cors_and_error_guard)
