"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from knot.interface.api.errors import register_error_handlers
from knot.interface.api.routes import auth, github, health, users
from knot.util.di.container import create_container, setup_di
from knot.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container if omitted
    """
    app_instance = FastAPI(
        title="Knot User API",
        description="User accounts, profiles, GitHub links and user search",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    # GitHub routes first so /users/me/github is not shadowed by /users/{user_id}
    app_instance.include_router(github.router)
    app_instance.include_router(users.router)

    return app_instance
