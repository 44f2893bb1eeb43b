from functools import wraps

from django.conf import settings
from django.shortcuts import redirect


def login_prohibited(view_function):
    """Redirect authenticated users away from views that should be anonymous-only."""
    @wraps(view_function)
    def modified_view_function(request, *args, **kwargs):
        if request.user.is_authenticated:
            return redirect(settings.REDIRECT_URL_WHEN_LOGGED_IN)
        return view_function(request, *args, **kwargs)
    return modified_view_function
