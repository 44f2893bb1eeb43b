"""Create, accept and remove friendships; every action ends in a redirect with a flash message."""

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.contrib.auth.mixins import LoginRequiredMixin
from django.shortcuts import redirect
from django.views import View
from django.views.decorators.http import require_POST

from friends.forms import FriendRequestForm
from friends.services import FriendshipService
from friends.views.view_utils import redirect_back


@login_required
@require_POST
def create_friendship(request):
    """Send a friend request to the user named by ``friend_id``."""
    form = FriendRequestForm(request.POST)
    status = "invalid"
    if form.is_valid():
        status = FriendshipService(request.user).request(form.cleaned_data["friend_id"])["status"]

    if status == "requested":
        messages.add_message(request, messages.SUCCESS, "Friend requested.")
    else:
        messages.add_message(request, messages.ERROR, "Unable to request friendship.")
    return redirect_back(request)


class FriendshipView(LoginRequiredMixin, View):
    """
    Accept (PUT) or remove (DELETE) a single friendship.

    Browsers can only submit GET and POST, so a POST carrying a ``_method``
    field of ``put`` or ``delete`` is routed to the matching handler.
    """

    http_method_names = ["post", "put", "delete"]

    def post(self, request, pk):
        override = request.POST.get("_method", "").lower()
        if override == "put":
            return self.put(request, pk)
        if override == "delete":
            return self.delete(request, pk)
        return self.http_method_not_allowed(request, pk)

    def put(self, request, pk):
        if FriendshipService(request.user).accept(pk):
            messages.add_message(request, messages.SUCCESS, "Successfully confirmed friend!")
        else:
            messages.add_message(request, messages.ERROR, "Sorry! Could not confirm friend!")
        return redirect("home")

    def delete(self, request, pk):
        if FriendshipService(request.user).decline(pk):
            messages.add_message(request, messages.SUCCESS, "Removed friendship.")
        else:
            messages.add_message(request, messages.ERROR, "Unable to remove friendship.")
        return redirect_back(request)
