from django.contrib import admin

from .models import ShareLink


@admin.register(ShareLink)
class ShareLinkAdmin(admin.ModelAdmin):
    list_display = ["hash", "user", "created_at"]
    search_fields = ["hash", "user__username"]
