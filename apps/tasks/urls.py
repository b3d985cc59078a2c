"""
Tasks app URL configuration.

Uses a DRF router for URL generation from the ViewSet.  Paths carry no
trailing slash (/api/tasks, /api/tasks/{id}).
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import TaskViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"tasks", TaskViewSet, basename="task")

urlpatterns = [
    path("", include(router.urls)),
]
