from .user_repo import UserRepo

__all__ = ["UserRepo"]
