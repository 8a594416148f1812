from django.apps import AppConfig


class AggregatorConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "aggregator"
    verbose_name = "Agrégateur de soumissions"

    def ready(self):
        from entries.meta import register_entry_meta
        from .services import entry_meta
        from .services.replication import ORIGIN_KEY
        from . import signals  # noqa: F401

        register_entry_meta(ORIGIN_KEY, entry_meta.definition())
