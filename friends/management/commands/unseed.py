from django.core.management.base import BaseCommand
from django.db import transaction
from friends.repos import UserRepo

class Command(BaseCommand):
    """
    Management command to remove (unseed) user data from the database.

    Deletes all non-staff users. Their friendships go with them through the
    cascading foreign keys, so administrative accounts are left with a clean
    slate.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        with transaction.atomic():
            deleted_count = UserRepo().delete(is_staff=False)

        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} non-staff users and related data."))
