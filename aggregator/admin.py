# aggregator/admin.py
from django.contrib import admin

from .forms import FormMappingForm, SiteConfigurationForm
from .models import FormMapping, ForwardLog, SiteConfiguration


# ---------- Configuration (singleton) ----------
@admin.register(SiteConfiguration)
class SiteConfigurationAdmin(admin.ModelAdmin):
    form = SiteConfigurationForm
    list_display = ("__str__", "local_identifier", "results_enabled", "updated_at")
    fieldsets = (
        ("Remote Site Configuration", {
            "description": "À compléter pour envoyer les soumissions de ce site vers un site central. "
                           "Laisser vide si ce site est le site central.",
            "fields": ("remote_base_url", "public_key", "private_key"),
        }),
        ("Local Site Configuration", {
            "fields": ("local_identifier", "results_enabled"),
        }),
    )

    def has_add_permission(self, request):
        return not SiteConfiguration.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False


# ---------- Formulaires agrégés ----------
@admin.register(FormMapping)
class FormMappingAdmin(admin.ModelAdmin):
    form = FormMappingForm
    list_display = ("form", "enabled", "remote_form_id", "delete_after_forward", "updated_at")
    list_filter = ("enabled", "delete_after_forward")
    search_fields = ("form__title", "remote_form_id")


# ---------- Journal ----------
@admin.register(ForwardLog)
class ForwardLogAdmin(admin.ModelAdmin):
    list_display = ("entry_id", "form", "remote_form_id", "status", "deleted", "created_at")
    list_filter = ("status", "form", "created_at")
    search_fields = ("entry_id", "message")
