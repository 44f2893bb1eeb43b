from django import forms


class FriendRequestForm(forms.Form):
    """Validate the target of a friend request before it reaches the service."""
    friend_id = forms.IntegerField(min_value=1, widget=forms.HiddenInput())
