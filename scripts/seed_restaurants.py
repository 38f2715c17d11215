#!/usr/bin/env python3
"""Replace the restaurant catalog with the default launch list.

Every restaurant (and, by cascade, every comment) is deleted first.
"""

import asyncio

from ranker.application.usecase.restaurant import (
    SeedCatalogRequest,
    SeedCatalogResponse,
    SeedCatalogUseCase,
)
from ranker.util.di.container import create_container
from ranker.util.observability import bootstrap_process, reported_failure


async def seed() -> SeedCatalogResponse:
    # Resolve through a request scope so the session commits on exit
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(SeedCatalogUseCase)
            return await use_case.execute(SeedCatalogRequest())
    finally:
        await container.close()


def main() -> None:
    bootstrap_process()
    with reported_failure("Seeding failed"):
        response = asyncio.run(seed())

    for restaurant in response.restaurants:
        print(f"  {restaurant.name} ({restaurant.id})")
    print(f"Removed {response.deleted}, added {len(response.restaurants)} restaurants")


if __name__ == "__main__":
    main()
