"""Security infrastructure providers."""

from dishka import Scope, provide

from skillswap.adapter.security.bcrypt_hasher import BcryptPasswordHasher
from skillswap.domain.service.password import PasswordHasher
from skillswap.util.di.base import ProviderBase


class SecurityProvider(ProviderBase):
    """Security component base."""

    __mock_component__ = "security"


class ProdSecurityProvider(SecurityProvider):
    """Production password hashing."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return BcryptPasswordHasher(rounds=12)
