from django.apps import AppConfig

class FriendsConfig(AppConfig):
    """Django app config for user accounts and friendships."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'friends'
