"""Restaurant use cases."""

from .list_restaurants import (
    ListRestaurantsRequest,
    ListRestaurantsResponse,
    ListRestaurantsUseCase,
    RestaurantItem,
)
from .seed_catalog import (
    DEFAULT_CATALOG,
    CatalogEntry,
    SeedCatalogRequest,
    SeedCatalogResponse,
    SeedCatalogUseCase,
)

__all__ = [
    "CatalogEntry",
    "DEFAULT_CATALOG",
    "ListRestaurantsRequest",
    "ListRestaurantsResponse",
    "ListRestaurantsUseCase",
    "RestaurantItem",
    "SeedCatalogRequest",
    "SeedCatalogResponse",
    "SeedCatalogUseCase",
]
