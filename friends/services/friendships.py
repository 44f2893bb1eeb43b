import logging
from dataclasses import dataclass
from typing import List

from django.db import IntegrityError, transaction

from friends.models import Friendship, User
from friends.repos import UserRepo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FriendEntry:
    """A confirmed friendship paired with the friend seen from the actor's side."""
    friendship: Friendship
    friend: User


class FriendshipService:
    """Request, accept and decline friendships on behalf of ``actor``."""

    def __init__(self, actor, users=None):
        self.actor = actor
        self.users = users or UserRepo()

    def _is_authenticated(self):
        return bool(self.actor and getattr(self.actor, "is_authenticated", False))

    @transaction.atomic
    def request(self, recipient_id):
        """Create a pending friendship from the actor to ``recipient_id``."""
        if not self._is_authenticated():
            return {"status": "noop"}

        recipient = self.users.find_by_id(recipient_id)
        if recipient is None:
            logger.info("Friend request from %s to unknown user %r", self.actor.pk, recipient_id)
            return {"status": "missing"}
        if recipient.pk == self.actor.pk:
            logger.info("User %s tried to befriend themself", self.actor.pk)
            return {"status": "noop"}

        if Friendship.objects.between(self.actor, recipient).exists():
            logger.info("Friendship between %s and %s already exists", self.actor.pk, recipient.pk)
            return {"status": "exists"}

        try:
            with transaction.atomic():
                friendship = Friendship.objects.create(requester=self.actor, recipient=recipient)
        except IntegrityError:
            # A concurrent request for the same pair won the insert.
            logger.warning("Duplicate friendship insert between %s and %s", self.actor.pk, recipient.pk)
            return {"status": "exists"}

        logger.info("Friendship %s requested by %s", friendship.pk, self.actor.pk)
        return {"status": "requested", "friendship": friendship}

    @transaction.atomic
    def accept(self, friendship_id):
        """Confirm a pending request addressed to the actor."""
        if not self._is_authenticated():
            return False
        try:
            friendship = Friendship.objects.select_for_update().get(
                id=friendship_id,
                recipient=self.actor,
                accepted=False,
            )
        except (Friendship.DoesNotExist, ValueError, TypeError):
            logger.info("User %s cannot accept friendship %r", self.actor.pk, friendship_id)
            return False

        friendship.confirm()
        logger.info("Friendship %s confirmed by %s", friendship.pk, self.actor.pk)
        return True

    @transaction.atomic
    def decline(self, friendship_id):
        """
        Delete a friendship the actor is allowed to remove.

        A pending request can only be declined by its recipient. A confirmed
        friendship can be removed by either party.
        """
        if not self._is_authenticated():
            return False
        try:
            friendship = Friendship.objects.select_for_update().get(id=friendship_id)
        except (Friendship.DoesNotExist, ValueError, TypeError):
            logger.info("Friendship %r not found for decline by %s", friendship_id, self.actor.pk)
            return False

        if not self._may_remove(friendship):
            logger.warning("User %s is not allowed to remove friendship %s", self.actor.pk, friendship.pk)
            return False

        friendship.delete()
        logger.info("Friendship %r removed by %s", friendship_id, self.actor.pk)
        return True

    def _may_remove(self, friendship):
        if friendship.accepted:
            return friendship.involves(self.actor)
        return friendship.recipient_id == self.actor.pk

    def friendships(self):
        return Friendship.objects.confirmed().involving(self.actor).select_related("requester", "recipient")

    def friend_entries(self) -> List[FriendEntry]:
        """Confirmed friendships with the friend resolved for display."""
        return [FriendEntry(f, f.other_party(self.actor)) for f in self.friendships()]

    def friends(self):
        """Users sharing a confirmed friendship with the actor."""
        ids = {entry.friend.pk for entry in self.friend_entries()}
        return User.objects.filter(id__in=ids)

    def pending_sent(self):
        return Friendship.objects.sent_by(self.actor).select_related("recipient")

    def pending_received(self):
        return Friendship.objects.received_by(self.actor).select_related("requester")

    def befriendable(self):
        """Active users with no friendship row of any state involving the actor."""
        linked = Friendship.objects.involving(self.actor).values_list("requester_id", "recipient_id")
        excluded = {user_id for pair in linked for user_id in pair}
        excluded.add(self.actor.pk)
        return self.users.active_except(excluded)
