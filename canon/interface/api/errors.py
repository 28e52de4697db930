"""Exception handlers for errors that escape the routes."""

import logfire
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from canon.adapter.error import LookupServiceError


async def lookup_service_error_handler(
    request: Request, exc: LookupServiceError
) -> JSONResponse:
    """Report account store failures as 503."""
    logfire.error(
        "Account store lookup failed",
        path=request.url.path,
        error=str(exc),
    )
    return JSONResponse(
        status_code=503,
        content={"detail": "Account store unavailable"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(LookupServiceError, lookup_service_error_handler)
