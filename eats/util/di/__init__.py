"""Dependency injection wiring.

Infrastructure components (`auth0`, `media`, `persistence`) have a base
provider with one production and one mock subclass each; everything else is
a concrete provider used as-is in every environment.
"""

from typing import Type

from eats.util.di.application import ProdApplicationProvider
from eats.util.di.base import Component, ProviderBase
from eats.util.di.core import ProdConfigProvider
from eats.util.di.domain import ProdDomainProvider
from eats.util.di.infrastructure import (
    Auth0Provider,
    MediaProvider,
    PersistenceProvider,
    ProdAuth0Provider,
    ProdMediaProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable in tests
    Auth0Provider,
    MediaProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class that should be instantiated.

    Mock subclasses register themselves simply by being imported, so the test
    suite must import `tests.di` before asking for them.

    Raises:
        ValueError: If `base` is swappable but lacks the requested variant
    """
    variants = {
        getattr(sub, "__is_mock__", False): sub for sub in base.__subclasses__()
    }
    if not variants:
        return base

    try:
        return variants[use_mock]
    except KeyError:
        component = getattr(base, "__mock_component__", base.__name__)
        variant = "mock" if use_mock else "production"
        raise ValueError(f"{component} has no {variant} provider") from None


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "Auth0Provider",
    "MediaProvider",
    "PersistenceProvider",
    "ProdAuth0Provider",
    "ProdMediaProvider",
    "ProdPersistenceProvider",
]
