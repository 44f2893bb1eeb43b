from django.test import TestCase
from django.urls import reverse
from friends.tests.helpers import make_friendship, make_user


class DashboardViewTestCase(TestCase):
    def setUp(self):
        self.url = reverse('dashboard')
        self.user = make_user(username='alice', first_name='Alice', last_name='Able')
        self.friend = make_user(username='bob', first_name='Bob', last_name='Baker')
        self.asker = make_user(username='cara', first_name='Cara', last_name='Cole')
        self.asked = make_user(username='dan', first_name='Dan', last_name='Dunn')
        self.stranger = make_user(username='erin', first_name='Erin', last_name='East')
        self.confirmed = make_friendship(self.user, self.friend, accepted=True)
        self.received = make_friendship(self.asker, self.user)
        self.sent = make_friendship(self.user, self.asked)
        self.client.login(username=self.user.username, password='Password123')

    def test_dashboard_url(self):
        self.assertEqual(self.url, '/dashboard/')

    def test_dashboard_requires_login(self):
        self.client.logout()
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 302)
        self.assertIn(reverse('account_login'), response.url)

    def test_dashboard_context(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'app/dashboard.html')
        self.assertEqual([e.friend for e in response.context['friends']], [self.friend])
        self.assertEqual(list(response.context['pending_received']), [self.received])
        self.assertEqual(list(response.context['pending_sent']), [self.sent])
        self.assertEqual(response.context['befriendable'], [self.stranger])
        self.assertNotIn('form', response.context)

    def test_dashboard_renders_actions(self):
        response = self.client.get(self.url)
        self.assertContains(response, 'Bob Baker')
        self.assertContains(response, 'Cara Cole')
        self.assertContains(response, 'Dan Dunn')
        self.assertContains(response, 'Erin East')
        self.assertContains(response, reverse('friendship', kwargs={'pk': self.received.pk}))
        self.assertContains(response, reverse('friendship', kwargs={'pk': self.confirmed.pk}))
        self.assertContains(response, 'value="put"')
        self.assertContains(response, reverse('friendships'))

    def test_one_add_friend_button_per_befriendable_user(self):
        response = self.client.get(self.url)
        self.assertContains(response, 'name="friend_id"', count=1)
        self.assertContains(response, f'value="{self.stranger.pk}"', count=1)
        self.assertNotContains(response, '<select')

    def test_dashboard_shows_pending_count_in_nav(self):
        response = self.client.get(self.url)
        self.assertEqual(response.context['pending_friend_request_count'], 1)
        self.assertContains(response, 'Friends (1)')

    def test_dashboard_empty_state(self):
        self.client.logout()
        self.client.login(username=self.stranger.username, password='Password123')
        response = self.client.get(self.url)
        self.assertContains(response, 'You have no friends yet.')
        self.assertContains(response, 'No pending requests.')
