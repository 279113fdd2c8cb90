from django.contrib import admin

from .models import Content


@admin.register(Content)
class ContentAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "type", "user", "created_at"]
    list_filter = ["type"]
    search_fields = ["title", "user__username"]
