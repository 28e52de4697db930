"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from canon.config import Settings
from canon.interface.api.errors import register_error_handlers
from canon.interface.api.routes import health, identities, users
from canon.util.di.container import create_container, setup_di
from canon.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Canonical Identity API",
        description="Resolves canonical user identities across local and linked provider accounts",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(identities.router)

    return app_instance
