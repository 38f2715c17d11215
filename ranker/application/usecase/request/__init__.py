"""Restaurant request use cases."""

from .request_restaurant import (
    RequestRestaurantRequest,
    RequestRestaurantResponse,
    RequestRestaurantUseCase,
)

__all__ = [
    "RequestRestaurantRequest",
    "RequestRestaurantResponse",
    "RequestRestaurantUseCase",
]
