"""Use case providers."""

from dishka import Scope, provide

from ranker.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from ranker.application.usecase.request import RequestRestaurantUseCase
from ranker.application.usecase.restaurant import (
    ListRestaurantsUseCase,
    SeedCatalogUseCase,
)
from ranker.application.usecase.vote import CastVoteUseCase
from ranker.util.di.base import ProviderBase


class ApplicationProvider(ProviderBase):
    """One instance of each use case per request."""

    scope = Scope.REQUEST

    list_restaurants = provide(ListRestaurantsUseCase)
    seed_catalog = provide(SeedCatalogUseCase)
    cast_vote = provide(CastVoteUseCase)
    create_comment = provide(CreateCommentUseCase)
    get_comments = provide(GetCommentsUseCase)
    request_restaurant = provide(RequestRestaurantUseCase)
