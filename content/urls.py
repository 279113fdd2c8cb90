from django.urls import path

from .views import ContentDeleteView, ContentListCreateView

urlpatterns = [
    path("content", ContentListCreateView.as_view(), name="content-list"),
    path("content/<str:content_id>", ContentDeleteView.as_view(), name="content-delete"),
]
