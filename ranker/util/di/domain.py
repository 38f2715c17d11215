"""Domain service providers.

Services are wired from their constructor annotations and live for one
request, like the repositories they wrap.
"""

from dishka import Scope, provide

from ranker.domain.service import (
    CommentService,
    NotificationService,
    RestaurantService,
    VoteService,
)
from ranker.util.di.base import ProviderBase


class DomainProvider(ProviderBase):
    scope = Scope.REQUEST

    restaurant_service = provide(RestaurantService)
    vote_service = provide(VoteService)
    comment_service = provide(CommentService)
    notification_service = provide(NotificationService)
