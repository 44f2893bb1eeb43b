"""Dashboard listing friends, requests to act on and users to befriend."""

from django.contrib.auth.decorators import login_required
from django.shortcuts import render

from friends.services import FriendshipService


@login_required
def dashboard(request):
    """Render the current user's friendship overview."""
    service = FriendshipService(request.user)
    return render(request, "app/dashboard.html", {
        "friends": service.friend_entries(),
        "pending_received": service.pending_received(),
        "pending_sent": service.pending_sent(),
        "befriendable": list(service.befriendable()),
    })
