"""
Query-parameter filtering for GET /api/tasks.

Supports filtering by:
  - category (exact match)
  - completed (boolean)
  - search (case-insensitive substring of title or description)

The store hands back plain lists, so filters run in Python after the
parameters have been validated by ``TaskFilter``.
"""

from rest_framework import serializers


class TaskFilter(serializers.Serializer):
    """
    Filterable fields exposed as query parameters on GET /tasks.

    Examples:
        ?category=Work
        ?completed=false
        ?search=milk
    """

    category = serializers.CharField(required=False, allow_blank=True)
    completed = serializers.BooleanField(required=False)
    search = serializers.CharField(required=False, allow_blank=True)

    def filter_tasks(self, tasks):
        """Return the tasks matching every supplied parameter."""
        params = self.validated_data

        if params.get("category"):
            tasks = [t for t in tasks if t.category == params["category"]]

        if "completed" in params:
            tasks = [t for t in tasks if t.completed == params["completed"]]

        if params.get("search"):
            needle = params["search"].lower()
            tasks = [
                t for t in tasks
                if needle in t.title.lower()
                or needle in (t.description or "").lower()
            ]
        return tasks
