from django.shortcuts import render

from friends.views.decorators import login_prohibited


@login_prohibited
def home(request):
    """Display the landing page for anonymous visitors."""
    return render(request, "public/home.html")
