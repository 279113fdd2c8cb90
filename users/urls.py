from django.urls import path

from .views import SigninView, SignupView, UserProfileView

urlpatterns = [
    path("signup", SignupView.as_view(), name="user-signup"),
    path("signin", SigninView.as_view(), name="user-signin"),
    path("me", UserProfileView.as_view(), name="user-me"),
]
