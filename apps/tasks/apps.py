from django.apps import AppConfig
from django.conf import settings
from django.utils.module_loading import import_string


class TasksConfig(AppConfig):
    name = "apps.tasks"
    label = "tasks"

    store = None

    def ready(self):
        self.store = import_string(settings.TASK_STORE_CLASS)()
