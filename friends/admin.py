from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from friends.models import Friendship, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin configuration for accounts."""
    list_display = ('username', 'email', 'first_name', 'last_name', 'is_staff')


@admin.register(Friendship)
class FriendshipAdmin(admin.ModelAdmin):
    """Admin configuration for friendships with a bulk confirm action."""
    list_display = ('requester', 'recipient', 'status_display', 'created_at')
    list_filter = ('accepted', 'created_at')
    search_fields = ('requester__username', 'recipient__username')
    list_select_related = ('requester', 'recipient')
    actions = ['confirm_friendships']

    @admin.display(description='Status')
    def status_display(self, obj):
        """Return the friendship status label."""
        return obj.status.label

    @admin.action(description='Confirm selected friendships')
    def confirm_friendships(self, request, queryset):
        """Mark selected pending friendships as confirmed."""
        updated = queryset.filter(accepted=False).update(accepted=True)
        self.message_user(request, f"{updated} friendship(s) confirmed.")
