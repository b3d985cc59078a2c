"""
In-memory task store.

Every operation is scoped by an explicit ``user_id`` argument that the
API layer takes from the session.  A task that does not exist and a task
owned by someone else produce the same outcome (``None`` / ``False``),
so callers cannot probe for other users' task ids.
"""

import dataclasses
import itertools
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, time
from datetime import timezone as dt_timezone

from django.apps import apps
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

logger = logging.getLogger(__name__)

# Fields a caller may set on create / overwrite on update
EDITABLE_FIELDS = ("title", "description", "due_date", "completed", "category")


@dataclass(frozen=True)
class Task:
    id: int
    user_id: int
    title: str
    category: str
    created_at: datetime
    description: str | None = None
    due_date: datetime | None = None
    completed: bool = False


def parse_due_date(value):
    """
    Parse an ISO-8601 date or datetime string into an aware UTC datetime.

    A bare date (``2024-06-01``) means midnight UTC that day.  ``None``
    passes through; anything unparseable, or out of range in UTC,
    raises ``ValueError``.
    """
    if value is None or isinstance(value, datetime):
        return value

    parsed = parse_datetime(value)
    if parsed is None:
        day = parse_date(value)
        if day is None:
            raise ValueError(f"Not an ISO-8601 date: {value!r}")
        parsed = datetime.combine(day, time.min)

    if timezone.is_naive(parsed):
        return timezone.make_aware(parsed, dt_timezone.utc)
    try:
        return parsed.astimezone(dt_timezone.utc)
    except OverflowError:
        # e.g. 9999-12-31T23:59:59-01:00 has no UTC representation
        raise ValueError(f"Out of range once converted to UTC: {value!r}")


class TaskStore:
    """Process-wide task table.  Read-modify-write sections hold ``self._lock``."""

    def __init__(self):
        self._tasks: dict[int, Task] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create_task(self, user_id: int, fields: dict) -> Task:
        """
        Store a new task owned by ``user_id``.

        Keys outside ``EDITABLE_FIELDS`` (``id``, ``user_id``, ``created_at``)
        are ignored.  ``completed`` defaults to False.
        """
        values = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS}
        values["due_date"] = parse_due_date(values.get("due_date"))
        if values.get("completed") is None:
            values["completed"] = False

        with self._lock:
            task = Task(
                id=next(self._ids),
                user_id=user_id,
                created_at=timezone.now(),
                **values,
            )
            self._tasks[task.id] = task
        logger.info("Created task %s for user %s", task.id, user_id)
        return task

    def get_tasks(self, user_id: int) -> list[Task]:
        """All of ``user_id``'s tasks, in insertion order."""
        return [t for t in list(self._tasks.values()) if t.user_id == user_id]

    def get_task(self, task_id: int, user_id: int) -> Task | None:
        task = self._tasks.get(task_id)
        if task is None or task.user_id != user_id:
            return None
        return task

    def update_task(self, task_id: int, user_id: int, updates: dict) -> Task | None:
        """
        Overwrite the fields present in ``updates``; leave the rest alone.

        Returns ``None`` if the task is missing or not ``user_id``'s.
        """
        changes = {k: v for k, v in updates.items() if k in EDITABLE_FIELDS}
        if "due_date" in changes:
            changes["due_date"] = parse_due_date(changes["due_date"])

        with self._lock:
            task = self.get_task(task_id, user_id)
            if task is None:
                return None
            task = dataclasses.replace(task, **changes)
            self._tasks[task_id] = task
        logger.debug("Updated task %s fields %s", task_id, sorted(changes))
        return task

    def delete_task(self, task_id: int, user_id: int) -> bool:
        """Remove the task; ``False`` if it is missing or not ``user_id``'s."""
        with self._lock:
            if self.get_task(task_id, user_id) is None:
                return False
            del self._tasks[task_id]
        logger.info("Deleted task %s", task_id)
        return True


def get_task_store():
    """Return the store built by ``TasksConfig.ready()``."""
    return apps.get_app_config("tasks").store
