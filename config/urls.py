"""Root URL configuration: all API routes live under /api/."""

from django.urls import include, path

urlpatterns = [
    path("api/", include("apps.accounts.urls")),
    path("api/", include("apps.tasks.urls")),
]
