"""Model for the pending/confirmed relationship between two users."""

from django.conf import settings
from django.db import models
from django.db.models import F, Q
from django.db.models.functions import Greatest, Least


class FriendshipStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    CONFIRMED = "confirmed", "Confirmed"


class FriendshipTransitionError(Exception):
    """Raised when a friendship is moved to a state it cannot reach."""


class FriendshipQuerySet(models.QuerySet):
    """Query helpers for the derived friend and request lists."""

    def pending(self):
        return self.filter(accepted=False)

    def confirmed(self):
        return self.filter(accepted=True)

    def involving(self, user):
        return self.filter(Q(requester=user) | Q(recipient=user))

    def between(self, user, other):
        """Friendships linking the two users, in either direction."""
        return self.filter(
            Q(requester=user, recipient=other) | Q(requester=other, recipient=user)
        )

    def sent_by(self, user):
        return self.pending().filter(requester=user)

    def received_by(self, user):
        return self.pending().filter(recipient=user)


class Friendship(models.Model):
    """
    A friend request from ``requester`` to ``recipient``.

    The row is pending until the recipient accepts it, at which point it
    becomes a confirmed friendship shared by both users. Declining or
    unfriending deletes the row.
    """

    requester = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="friendships_requested",
    )
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="friendships_received",
    )
    accepted = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = FriendshipQuerySet.as_manager()

    class Meta:
        """One friendship per unordered pair; no self friendships."""
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                Least("requester", "recipient"),
                Greatest("requester", "recipient"),
                name="uniq_friendship_pair",
            ),
            models.CheckConstraint(
                condition=~Q(requester=F("recipient")),
                name="chk_friendship_not_self",
            ),
        ]

    def __str__(self) -> str:
        return f"Friendship({self.requester_id} -> {self.recipient_id}, {self.status})"

    @property
    def status(self) -> FriendshipStatus:
        return FriendshipStatus.CONFIRMED if self.accepted else FriendshipStatus.PENDING

    def involves(self, user) -> bool:
        user_id = getattr(user, "pk", user)
        return user_id in (self.requester_id, self.recipient_id)

    def other_party(self, user):
        """Return the user on the opposite side of the pair from ``user``."""
        if not self.involves(user):
            raise ValueError(f"{user!r} is not part of {self}")
        user_id = getattr(user, "pk", user)
        return self.recipient if user_id == self.requester_id else self.requester

    def confirm(self):
        """Move a pending friendship to confirmed and persist the flag."""
        if self.accepted:
            raise FriendshipTransitionError(f"{self} is already confirmed")
        self.accepted = True
        self.save(update_fields=["accepted"])
