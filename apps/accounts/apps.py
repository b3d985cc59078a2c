from django.apps import AppConfig
from django.conf import settings
from django.utils.module_loading import import_string


class AccountsConfig(AppConfig):
    name = "apps.accounts"
    label = "accounts"

    store = None

    def ready(self):
        # One store per process, handed to the views via get_credential_store()
        self.store = import_string(settings.CREDENTIAL_STORE_CLASS)()
