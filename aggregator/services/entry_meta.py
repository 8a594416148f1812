# aggregator/services/entry_meta.py
"""
Métadonnée "Site ID" des soumissions.

La valeur persistée dans Entry.meta est prioritaire ; à défaut elle est
calculée à la volée depuis la configuration courante, ce qui permet
d'afficher et de filtrer des soumissions antérieures à un changement de
configuration.
"""
from __future__ import annotations

from django.db.models import Q

from aggregator.models import SiteConfiguration
from aggregator.services.replication import ORIGIN_KEY
from entries.meta import EntryMetaDefinition
from entries.services import site_display_name

LABEL = "Site ID"
OPERATORS = ("is", "isnot", "contains")


def current_identifier() -> str:
    config = SiteConfiguration.load()
    if config is None:
        return site_display_name()
    return config.effective_identifier(site_display_name())


def update_entry_meta(key, entry, form):
    if key == ORIGIN_KEY:
        return current_identifier()
    return None


def resolve(entry) -> str:
    value = (entry.meta or {}).get(ORIGIN_KEY)
    if value not in (None, ""):
        return str(value)
    return current_identifier()


def matches(value, operator: str, needle: str) -> bool:
    value = "" if value is None else str(value)
    needle = "" if needle is None else str(needle)
    if operator == "is":
        return value == needle
    if operator == "isnot":
        return value != needle
    if operator == "contains":
        return needle.lower() in value.lower()
    raise ValueError(f"Unsupported operator: {operator}")


def filter_queryset(queryset, operator: str, needle: str):
    """Filtre un queryset d'Entry sur le Site ID."""
    if operator not in OPERATORS:
        raise ValueError(f"Unsupported operator: {operator}")

    lookup = f"meta__{ORIGIN_KEY}"
    present = Q(meta__has_key=ORIGIN_KEY) & ~Q(**{lookup: ""})

    if operator == "is":
        cond = present & Q(**{lookup: needle})
    elif operator == "isnot":
        cond = present & ~Q(**{lookup: needle})
    else:
        cond = present & Q(**{f"{lookup}__icontains": needle})

    # soumissions sans valeur persistée: comparées à la valeur courante
    if matches(current_identifier(), operator, needle):
        cond |= ~present
    return queryset.filter(cond)


def definition() -> EntryMetaDefinition:
    return EntryMetaDefinition(
        label=LABEL,
        update_callback=update_entry_meta,
        resolve=resolve,
        is_numeric=False,
        is_default_column=True,
        filter_operators=OPERATORS,
    )
