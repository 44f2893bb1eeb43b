from .user import User
from .friendship import (
    Friendship,
    FriendshipQuerySet,
    FriendshipStatus,
    FriendshipTransitionError,
)

__all__ = [
    "User",
    "Friendship",
    "FriendshipQuerySet",
    "FriendshipStatus",
    "FriendshipTransitionError",
]
