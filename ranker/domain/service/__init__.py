"""Domain services."""

from .comment_service import CommentService
from .notification_service import Mailer, NotificationService
from .restaurant_service import RestaurantService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "Mailer",
    "NotificationService",
    "RestaurantService",
    "VoteService",
]
