"""Dependency injection module.

Providers come in two kinds. Concrete providers (config, adapters, domain
services, use cases) are used as they are. A mockable component is a base
class naming itself in ``__mock_component__`` with one production and one
mock subclass; containers pick the implementation they need.
"""

from typing import Type

from discuss.util.di.adapter import ProdAdapterProvider
from discuss.util.di.application import ProdApplicationProvider
from discuss.util.di.base import Component, ProviderBase
from discuss.util.di.core import ProdConfigProvider
from discuss.util.di.domain import ProdDomainProvider
from discuss.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdAdapterProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        ``base`` itself for concrete providers, otherwise the selected subclass

    Raises:
        ValueError: If the component has no implementation of the requested kind
    """
    implementations = {
        getattr(cls, "__is_mock__", False): cls for cls in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {base.__mock_component__}"
        ) from None


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdAdapterProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
