"""Dependency injection wiring."""

from collections.abc import Collection

from ranker.util.di.application import ApplicationProvider
from ranker.util.di.base import Component, ProviderBase
from ranker.util.di.core import ConfigProvider
from ranker.util.di.domain import DomainProvider
from ranker.util.di.infrastructure import MailProvider, PersistenceProvider

# Order does not matter to dishka; listed by layer for readability
PROVIDERS: list[type[ProviderBase]] = [
    ConfigProvider,
    PersistenceProvider,
    MailProvider,
    DomainProvider,
    ApplicationProvider,
]

MOCKABLE: frozenset[Component] = frozenset(
    p.__mock_component__ for p in PROVIDERS if p.__mock_component__ is not None
)


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per slot, mocking the named components.

    Raises:
        ValueError: If ``mocked`` names an unknown component
    """
    unknown = set(mocked) - MOCKABLE
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")
    return [
        base.variant(mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "MOCKABLE",
    "PROVIDERS",
    "ProviderBase",
    "build_providers",
]
