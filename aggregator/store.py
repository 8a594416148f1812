# aggregator/store.py
import logging

from django.db import transaction

from .models import FormMapping, SiteConfiguration

logger = logging.getLogger(__name__)


class ConfigurationStore:
    """Accès aux réglages persistés. Aucune logique métier ici."""

    def get_site_configuration(self):
        return SiteConfiguration.load()

    def get_form_mapping(self, form_id):
        return FormMapping.objects.filter(form_id=form_id).first()

    def save_form_mapping(self, form_id, mapping):
        mapping.form_id = form_id
        mapping.save()
        return mapping

    def claim_remote_form_id(self, form_id, remote_form_id: str) -> str:
        """
        Écrit remote_form_id seulement si la valeur stockée est encore vide.
        Retourne la valeur effectivement enregistrée après l'opération.
        """
        with transaction.atomic():
            updated = (
                FormMapping.objects
                .filter(form_id=form_id, remote_form_id="")
                .update(remote_form_id=remote_form_id)
            )
            if updated:
                return remote_form_id
            current = (
                FormMapping.objects
                .filter(form_id=form_id)
                .values_list("remote_form_id", flat=True)
                .first()
            )
        if current and current != remote_form_id:
            logger.warning(
                f"Form {form_id} already mapped to remote form {current}; "
                f"remote form {remote_form_id} left unused"
            )
            return current
        return remote_form_id
