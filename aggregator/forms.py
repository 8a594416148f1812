# aggregator/forms.py
from django import forms

from .models import FormMapping, SiteConfiguration


class SiteConfigurationForm(forms.ModelForm):
    private_key = forms.CharField(
        required=False,
        widget=forms.PasswordInput(render_value=True),
        help_text="Clé privée de l'API du site central (stockée en base).",
    )

    class Meta:
        model = SiteConfiguration
        fields = ["remote_base_url", "public_key", "private_key", "local_identifier", "results_enabled"]
        labels = {
            "remote_base_url": "URL",
            "public_key": "API Key",
            "private_key": "API Private Key",
            "local_identifier": "Site Identifier",
            "results_enabled": "Enable Results Page",
        }

    def clean(self):
        cleaned = super().clean()
        url = (cleaned.get("remote_base_url") or "").strip()
        public_key = (cleaned.get("public_key") or "").strip()
        private_key = (cleaned.get("private_key") or "").strip()
        # URL renseignée => les deux clés sont nécessaires
        if url and not (public_key and private_key):
            raise forms.ValidationError("L'URL du site central exige la clé API et la clé privée.")
        return cleaned


class FormMappingForm(forms.ModelForm):
    class Meta:
        model = FormMapping
        fields = ["form", "enabled", "remote_form_id", "delete_after_forward"]
        labels = {
            "enabled": "Remote Aggregation",
            "remote_form_id": "Remote Form ID",
            "delete_after_forward": "Delete entries",
        }

    def clean_remote_form_id(self):
        return (self.cleaned_data.get("remote_form_id") or "").strip()
