from .friendships import FriendEntry, FriendshipService

__all__ = ["FriendEntry", "FriendshipService"]
