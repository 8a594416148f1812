# aggregator/signals.py
import logging

from django.dispatch import receiver

from entries.signals import entry_created
from .models import ForwardLog
from .services.replication import FAILED, FORWARDED, default_engine

logger = logging.getLogger(__name__)


@receiver(entry_created, dispatch_uid="aggregator_forward_entry")
def forward_entry(sender, entry, form, **kwargs):
    """Envoie la nouvelle soumission au site central (après le commit local)."""
    result = default_engine().on_record_created(entry.to_record(), form.to_definition())

    if result.status not in (FORWARDED, FAILED):
        return result

    ForwardLog.objects.create(
        form_id=form.pk,
        entry_id=str(entry.pk),
        remote_form_id=result.remote_form_id,
        status=result.status,
        deleted=result.deleted,
        message=str(result.error) if result.error else "",
    )
    return result
