"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from knot.config import PasswordSettings, SearchSettings, Settings
from knot.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_password_settings(self, settings: Settings) -> PasswordSettings:
        """Provide password hashing settings."""
        return settings.password

    @provide(scope=Scope.APP)
    def provide_search_settings(self, settings: Settings) -> SearchSettings:
        """Provide user search settings."""
        return settings.search
