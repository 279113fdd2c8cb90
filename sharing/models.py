from django.contrib.auth.models import User
from django.db import models


class ShareLink(models.Model):
    """Public, read-only link to one user's whole collection."""

    hash = models.CharField(max_length=64, unique=True)
    # One active link per user
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="share_link")
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.user_id}:{self.hash}"
