from django.contrib.messages import get_messages

from friends.models import Friendship, User


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")
    return User.objects.create_user(
        username=username,
        email=kwargs.pop("email", f"{username}@example.org"),
        password=kwargs.pop("password", "Password123"),
        first_name=kwargs.pop("first_name", "John"),
        last_name=kwargs.pop("last_name", "Doe"),
        **kwargs,
    )


def make_friendship(requester, recipient, *, accepted=False):
    return Friendship.objects.create(requester=requester, recipient=recipient, accepted=accepted)


def flashed(response):
    """Return the (level_tag, text) pairs flashed while handling ``response``."""
    return [(m.level_tag, str(m)) for m in get_messages(response.wsgi_request)]
