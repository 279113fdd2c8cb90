from django.contrib.auth.models import User
from django.db import models


class Content(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="contents")
    title = models.TextField()
    # A single string, or a list of strings for list-format items
    body = models.JSONField()
    type = models.TextField()
    tags = models.JSONField(default=list, blank=True)
    link = models.URLField(max_length=2048, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["user", "created_at"], name="content_user_created_idx"),
        ]

    def __str__(self):
        return f"{self.type}: {self.title}"
