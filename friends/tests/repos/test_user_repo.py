from django.test import TestCase
from friends.repos import UserRepo
from friends.tests.helpers import make_user


class UserRepoTests(TestCase):
    def setUp(self):
        self.repo = UserRepo()
        self.alice = make_user(username="alice")
        self.bob = make_user(username="bob")

    def test_find_by_id(self):
        self.assertEqual(self.repo.find_by_id(self.alice.id), self.alice)
        self.assertEqual(self.repo.find_by_id(str(self.bob.id)), self.bob)

    def test_find_by_id_handles_bad_input(self):
        self.assertIsNone(self.repo.find_by_id(None))
        self.assertIsNone(self.repo.find_by_id("abc"))
        self.assertIsNone(self.repo.find_by_id(9999))

    def test_find_by_id_skips_inactive(self):
        self.bob.is_active = False
        self.bob.save()
        self.assertIsNone(self.repo.find_by_id(self.bob.id))

    def test_active_except(self):
        cara = make_user(username="cara")
        self.assertEqual(list(self.repo.active_except({self.alice.id})), [self.bob, cara])
        self.assertEqual(list(self.repo.active_except([])), [self.alice, self.bob, cara])
