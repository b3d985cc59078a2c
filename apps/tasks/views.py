"""
ViewSet for Task CRUD over the in-memory task store.

Key patterns:
  - Every store call is scoped to request.user.id (no cross-user access)
  - Missing and foreign tasks both answer 404, never 403
  - Partial updates only (PATCH); PUT is disabled
"""

import logging

from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .exceptions import NotFoundOrForbidden
from .filters import TaskFilter
from .serializers import TaskSerializer, TaskWriteSerializer
from .store import get_task_store

logger = logging.getLogger(__name__)


class TaskViewSet(viewsets.ViewSet):
    """
    CRUD for user-owned tasks.

    list           → GET    /api/tasks        (?category=, ?completed=, ?search=)
    create         → POST   /api/tasks
    retrieve       → GET    /api/tasks/{id}
    partial_update → PATCH  /api/tasks/{id}
    destroy        → DELETE /api/tasks/{id}
    """

    permission_classes = [IsAuthenticated]
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]
    lookup_value_regex = r"\d+"

    def list(self, request):
        # A plain dict, so absent booleans stay absent instead of False
        filterset = TaskFilter(data=request.query_params.dict())
        filterset.is_valid(raise_exception=True)
        tasks = filterset.filter_tasks(get_task_store().get_tasks(request.user.id))
        return Response(TaskSerializer(tasks, many=True).data)

    def create(self, request):
        serializer = TaskWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        task = get_task_store().create_task(request.user.id, serializer.validated_data)
        return Response(TaskSerializer(task).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        task = get_task_store().get_task(int(pk), request.user.id)
        if task is None:
            raise NotFoundOrForbidden()
        return Response(TaskSerializer(task).data)

    def partial_update(self, request, pk=None):
        serializer = TaskWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        task = get_task_store().update_task(
            int(pk), request.user.id, serializer.validated_data
        )
        if task is None:
            logger.info("User %s: update of task %s refused", request.user.id, pk)
            raise NotFoundOrForbidden()
        return Response(TaskSerializer(task).data)

    def destroy(self, request, pk=None):
        if not get_task_store().delete_task(int(pk), request.user.id):
            logger.info("User %s: delete of task %s refused", request.user.id, pk)
            raise NotFoundOrForbidden()
        return Response(status=status.HTTP_204_NO_CONTENT)
