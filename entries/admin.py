# entries/admin.py
from django.contrib import admin

from .meta import get_entry_meta, meta_value
from .models import Entry, Form


@admin.register(Form)
class FormAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "is_active", "entry_count", "updated_at")
    list_filter = ("is_active",)
    search_fields = ("title", "description")

    def entry_count(self, obj):
        return obj.entries.count()
    entry_count.short_description = "Soumissions"


@admin.register(Entry)
class EntryAdmin(admin.ModelAdmin):
    list_filter = ("form", "created_at")
    search_fields = ("source_url",)
    readonly_fields = ("created_at",)

    # Colonnes des métadonnées déclarées comme colonne par défaut
    def get_list_display(self, request):
        cols = ["id", "form", "created_at"]
        for key, definition in get_entry_meta().items():
            if definition.is_default_column:
                cols.append(self._meta_column(key, definition.label))
        return cols

    @staticmethod
    def _meta_column(key, label):
        def column(obj):
            return meta_value(key, obj)
        column.short_description = label
        column.__name__ = f"meta_{key}"
        return column
