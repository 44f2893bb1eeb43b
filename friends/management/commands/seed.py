"""Management command to seed the database with sample users and friendships."""

import re
from random import random, sample

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction

from friends.models import Friendship, User

user_fixtures = [
    {'username': 'johndoe', 'email': 'john.doe@example.org', 'first_name': 'John', 'last_name': 'Doe'},
    {'username': 'janedoe', 'email': 'jane.doe@example.org', 'first_name': 'Jane', 'last_name': 'Doe'},
    {'username': 'charlie', 'email': 'charlie.johnson@example.org', 'first_name': 'Charlie', 'last_name': 'Johnson'},
]


def create_username(first_name, last_name):
    return re.sub(r'\W', '', f'{first_name}{last_name}'.lower())[:30]


def create_email(first_name, last_name):
    return f'{create_username(first_name, last_name)}@example.org'


class Command(BaseCommand):
    """Management command to seed the database with sample users and friendships."""
    USER_COUNT = 50
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample users and friendships'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total number of users to reach.")
        parser.add_argument("--per-user", type=int, default=4, help="Friend requests sent by each user.")
        parser.add_argument(
            "--accept-ratio",
            type=float,
            default=0.6,
            help="Share of seeded requests that are already confirmed.",
        )

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.create_users(options["users"])
        created = self.seed_friendships(per_user=options["per_user"], accept_ratio=options["accept_ratio"])
        self.stdout.write(f"Friendships created: {created}")
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, target_count):
        """Create fixture users, then random users until ``target_count`` is reached."""
        for data in user_fixtures:
            self.try_create_user(data)
        attempts = 0
        while User.objects.count() < target_count and attempts < target_count * 5:
            attempts += 1
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            self.try_create_user({
                'username': create_username(first_name, last_name),
                'email': create_email(first_name, last_name),
                'first_name': first_name,
                'last_name': last_name,
            })

    def try_create_user(self, data):
        """Create a user, skipping duplicates."""
        try:
            with transaction.atomic():
                User.objects.create_user(
                    data['username'],
                    email=data['email'],
                    password=self.DEFAULT_PASSWORD,
                    first_name=data['first_name'],
                    last_name=data['last_name'],
                )
        except IntegrityError:
            self.stdout.write(f"Skipping duplicate user {data['username']}")

    def seed_friendships(self, *, per_user=4, accept_ratio=0.6):
        """Create random friend requests, a share of them confirmed; return the count created."""
        ids = list(User.objects.values_list("id", flat=True))
        if len(ids) < 2:
            return 0

        taken = {
            frozenset(pair)
            for pair in Friendship.objects.values_list("requester_id", "recipient_id")
        }
        k = max(0, min(per_user, len(ids) - 1))
        rows = []
        for requester_id in ids:
            for recipient_id in sample([x for x in ids if x != requester_id], k):
                pair = frozenset((requester_id, recipient_id))
                if pair in taken:
                    continue
                taken.add(pair)
                rows.append(Friendship(
                    requester_id=requester_id,
                    recipient_id=recipient_id,
                    accepted=random() < accept_ratio,
                ))

        # ignore_conflicts skips rows silently, so count what actually landed.
        before = Friendship.objects.count()
        with transaction.atomic():
            Friendship.objects.bulk_create(rows, ignore_conflicts=True, batch_size=500)
        return Friendship.objects.count() - before
