"""Seed catalog use case."""

import logfire
from pydantic import BaseModel, Field

from ranker.application.usecase.base import BaseUseCase
from ranker.domain.service import RestaurantService

from .list_restaurants import RestaurantItem


class CatalogEntry(BaseModel):
    """A restaurant to add when seeding."""

    name: str
    description: str = ""
    website: str = ""
    image_url: str = ""


DEFAULT_CATALOG: list[CatalogEntry] = [
    CatalogEntry(
        name="Dave's Hot Chicken",
        description=(
            "Street food sensation turned fast-casual hit. Specializing in "
            "Nashville-style hot chicken tenders & sliders."
        ),
        website="https://daveshotchicken.com",
        image_url="/images/daves-hot-chicken.jpg",
    ),
    CatalogEntry(
        name="Main Bird Hot Chicken",
        description=(
            "Started as a food truck in 2020, serving fully halal, "
            "Nashville-style hot chicken in Houston."
        ),
        website="https://mainbirdhotchicken.com",
        image_url="/images/main-bird.jpg",
    ),
    CatalogEntry(
        name="Urban Bird Hot Chicken",
        description=(
            "Veteran Owned and Operated. Original Nashville style Hot Chicken "
            "using only All Natural Halal chicken."
        ),
        website="https://www.urbanbirdhotchicken.com",
        image_url="/images/urban-bird.jpg",
    ),
    CatalogEntry(
        name="Birdside HTX",
        description=(
            "On a mission to serve up 100% Halal fried chicken with a taste "
            "unlike anything you've experienced before."
        ),
        website="https://birdsidehtx.com",
        image_url="/images/birdside-htx.jpg",
    ),
]


class SeedCatalogRequest(BaseModel):
    """Seed catalog request."""

    entries: list[CatalogEntry] = Field(default_factory=lambda: list(DEFAULT_CATALOG))


class SeedCatalogResponse(BaseModel):
    """Seed catalog response."""

    deleted: int
    restaurants: list[RestaurantItem]


class SeedCatalogUseCase(BaseUseCase[SeedCatalogRequest, SeedCatalogResponse]):
    """Use case for replacing the catalog with a fresh set of restaurants."""

    def __init__(self, restaurant_service: RestaurantService) -> None:
        """Initialize seed catalog use case.

        Args:
            restaurant_service: Restaurant domain service
        """
        self.restaurant_service = restaurant_service

    async def execute(self, request: SeedCatalogRequest) -> SeedCatalogResponse:
        """Clear the catalog and insert the entries in order, counters at zero."""
        with logfire.span("seed_catalog.execute", entries=len(request.entries)):
            deleted = await self.restaurant_service.clear_catalog()

            created = []
            for entry in request.entries:
                restaurant = await self.restaurant_service.create_restaurant(
                    name=entry.name,
                    description=entry.description,
                    website=entry.website,
                    image_url=entry.image_url,
                )
                created.append(RestaurantItem.from_domain(restaurant))

            logfire.info("Catalog seeded", deleted=deleted, created=len(created))
            return SeedCatalogResponse(deleted=deleted, restaurants=created)
