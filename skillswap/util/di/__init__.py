"""Dependency injection module."""

from typing import Type

from skillswap.util.di.application import ProdApplicationProvider
from skillswap.util.di.base import Component, ProviderBase
from skillswap.util.di.core import ProdConfigProvider
from skillswap.util.di.domain import ProdDomainProvider
from skillswap.util.di.infrastructure import (
    EmailProvider,
    MediaProvider,
    PersistenceProvider,
    ProdEmailProvider,
    ProdMediaProvider,
    ProdPersistenceProvider,
    ProdSecurityProvider,
    SecurityProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    EmailProvider,
    MediaProvider,
    SecurityProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Select the provider class to instantiate for ``base``.

    Concrete providers are returned as they are. For a mockable component
    the subclass whose ``__is_mock__`` flag matches ``use_mock`` is chosen.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    if not base.is_mockable():
        return base

    impl = next(
        (c for c in base.__subclasses__() if c.__is_mock__ == use_mock),
        None,
    )
    if impl is None:
        kind = "mock" if use_mock else "production"
        name = base.component_name() or base.__name__
        raise ValueError(f"No {kind} implementation for {name}")
    return impl


__all__ = [
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "get_provider",
    # Core providers
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    # Infrastructure base classes
    "EmailProvider",
    "MediaProvider",
    "PersistenceProvider",
    "SecurityProvider",
    # Infrastructure implementations
    "ProdEmailProvider",
    "ProdMediaProvider",
    "ProdPersistenceProvider",
    "ProdSecurityProvider",
]
