"""Dependency injection wiring."""

from typing import Type

from civicfix.util.di.application import ProdApplicationProvider
from civicfix.util.di.base import Component, ProviderBase
from civicfix.util.di.core import ProdConfigProvider
from civicfix.util.di.domain import ProdDomainProvider
from civicfix.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Config, domain and application providers are concrete; persistence is
# a component whose implementation is chosen per container
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Raises:
        ValueError: If ``base`` is a component lacking the requested variant
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if getattr(variant, "__is_mock__", False) == use_mock:
            return variant

    kind = "mock" if use_mock else "production"
    name = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {name}")


__all__ = [
    "PROVIDERS",
    "Component",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
