"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from knot.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build production container.

    Uses PostgreSQL persistence and bcrypt password hashing. Settings are
    loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the current Request to request-scoped factories
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the FastAPI app.

    Args:
        app: FastAPI application
        container: DI container (production or test)
    """
    setup_dishka(container, app)
