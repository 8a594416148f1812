# entries/meta.py
"""
Registre des métadonnées de soumission ("entry meta").

Une application peut déclarer un champ calculé, stocké dans Entry.meta,
affiché en colonne dans l'admin et filtrable.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple


@dataclass(frozen=True)
class EntryMetaDefinition:
    label: str
    update_callback: Callable[[str, Any, Any], Any]
    resolve: Optional[Callable[[Any], Any]] = None
    is_numeric: bool = False
    is_default_column: bool = False
    filter_operators: Tuple[str, ...] = field(default=("is", "isnot"))


_registry: Dict[str, EntryMetaDefinition] = {}


def register_entry_meta(key: str, definition: EntryMetaDefinition) -> None:
    _registry[key] = definition


def unregister_entry_meta(key: str) -> None:
    _registry.pop(key, None)


def get_entry_meta() -> Dict[str, EntryMetaDefinition]:
    return dict(_registry)


def meta_value(key: str, entry) -> Any:
    """Valeur affichée: resolve() si défini, sinon la valeur persistée."""
    definition = _registry.get(key)
    if definition is not None and definition.resolve is not None:
        return definition.resolve(entry)
    return (entry.meta or {}).get(key)
