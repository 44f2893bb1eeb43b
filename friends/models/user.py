"""Custom user model with display helpers used by the friend lists."""

from django.contrib.auth.models import AbstractUser
from django.core.validators import RegexValidator
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Account that can send, accept and decline friend requests."""

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^\w{3,}$',
            message='Username must consist of at least three alphanumericals'
        )]
    )
    first_name = models.CharField(max_length=50, blank=True)
    last_name = models.CharField(max_length=50, blank=True)
    email = models.EmailField(unique=True, blank=False)

    class Meta:
        """Default ordering for users."""
        ordering = ['username']

    def full_name(self):
        """Return full name string."""
        return f'{self.first_name} {self.last_name}'.strip()

    @property
    def display_name(self):
        """Full name when set, otherwise the username."""
        return self.full_name() or self.username

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        return gravatar_object.get_image(size=size, default='mp')

    def mini_gravatar(self):
        """Return smaller gravatar URL."""
        return self.gravatar(size=60)
