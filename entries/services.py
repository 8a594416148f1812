# entries/services.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from django.conf import settings
from django.db import transaction

from .meta import get_entry_meta
from .models import Entry, Form
from .signals import entry_created

logger = logging.getLogger(__name__)


def site_display_name() -> str:
    """Nom lisible de l'installation (SITE_NAME dans les settings)."""
    return (getattr(settings, "SITE_NAME", "") or "").strip() or "Django"


def _fire_entry_created(entry: Entry, form: Form) -> None:
    for receiver, response in entry_created.send_robust(sender=Entry, entry=entry, form=form):
        if isinstance(response, Exception):
            logger.error(
                f"entry_created receiver {getattr(receiver, '__name__', receiver)} "
                f"failed for entry {entry.pk}: {response!r}"
            )


def create_entry(
    form: Form,
    values: Dict[str, Any],
    meta: Optional[Dict[str, Any]] = None,
    source_url: str = "",
) -> Entry:
    """
    Enregistre une soumission.
    - meta=None (soumission locale): les métadonnées déclarées sont calculées
      via leur update_callback.
    - meta fourni (import): stocké tel quel.
    L'évènement entry_created part après le commit.
    """
    with transaction.atomic():
        entry = Entry.objects.create(
            form=form,
            values=dict(values or {}),
            meta=dict(meta or {}),
            source_url=source_url or "",
        )
        if meta is None:
            computed = {}
            for key, definition in get_entry_meta().items():
                computed[key] = definition.update_callback(key, entry, form)
            if computed:
                entry.meta = computed
                entry.save(update_fields=["meta"])

        transaction.on_commit(lambda: _fire_entry_created(entry, form))
    return entry


def delete_entry(entry_id) -> None:
    deleted, _ = Entry.objects.filter(pk=entry_id).delete()
    if not deleted:
        logger.info(f"Entry {entry_id} already gone, nothing to delete")
