"""
Accounts URL configuration.

All endpoints are mounted under /api/ by the root URL config.
"""

from django.urls import path

from .views import CurrentUserView, LoginView, LogoutView, RegisterView

urlpatterns = [
    path("register", RegisterView.as_view(), name="auth-register"),
    path("login", LoginView.as_view(), name="auth-login"),
    path("logout", LogoutView.as_view(), name="auth-logout"),
    path("user", CurrentUserView.as_view(), name="auth-user"),
]
