from django.urls import path

from .views import PublicBrainView, ShareToggleView

urlpatterns = [
    path("content/share", ShareToggleView.as_view(), name="content-share"),
    path("brain/<str:share_hash>", PublicBrainView.as_view(), name="public-brain"),
]
