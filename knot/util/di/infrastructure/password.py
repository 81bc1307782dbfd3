"""Password hashing infrastructure providers."""

from dishka import Scope, provide

from knot.adapter.password import BcryptPasswordEncoder
from knot.config import PasswordSettings
from knot.domain.service import PasswordEncoder
from knot.util.di.base import ProviderBase


class PasswordProvider(ProviderBase):
    """Password component base."""

    __mock_component__ = "password"


class ProdPasswordProvider(PasswordProvider):
    """Production password provider using bcrypt."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_password_encoder(self, settings: PasswordSettings) -> PasswordEncoder:
        """Provide bcrypt password encoder."""
        return BcryptPasswordEncoder(rounds=settings.bcrypt_rounds)
