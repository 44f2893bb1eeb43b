from __future__ import annotations
from typing import Dict
from django.http import HttpRequest
from friends.models import Friendship


def friend_requests(request: HttpRequest) -> Dict[str, object]:
    """Provide the number of friend requests awaiting the current user's answer."""
    user = getattr(request, "user", None)
    if not user or not user.is_authenticated:
        return {}
    return {
        "pending_friend_request_count": Friendship.objects.received_by(user).count(),
    }
