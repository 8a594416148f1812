# aggregator/services/replication.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from aggregator.exceptions import (
    AggregatorError,
    ConfigurationIncomplete,
    LocalDeletionFailed,
    RemoteEntryForwardFailed,
    RemoteError,
    RemoteFormCreationFailed,
)

logger = logging.getLogger(__name__)

# clé de métadonnée portant l'identifiant du site d'origine
ORIGIN_KEY = "aggregator_site_id"
FORM_ID_KEY = "form_id"

SKIPPED, FORWARDED, FAILED = "SKIPPED", "FORWARDED", "FAILED"


@dataclass
class ForwardResult:
    status: str
    remote_form_id: str = ""
    deleted: bool = False
    error: Optional[AggregatorError] = None


class ReplicationEngine:
    """
    Envoie chaque nouvelle soumission vers le site central.

    Collaborateurs injectés :
    - store : ConfigurationStore (réglages du site et des formulaires)
    - client_factory(config) -> client exposant create_form / create_entry
    - delete_record(entry_id) : suppression locale
    - display_name() : nom du site, utilisé si aucun identifiant n'est saisi
    """

    def __init__(self, store, client_factory: Callable[[Any], Any],
                 delete_record: Callable[[Any], None], display_name: Callable[[], str]):
        self.store = store
        self.client_factory = client_factory
        self.delete_record = delete_record
        self.display_name = display_name

    def effective_identifier(self, config=None) -> str:
        if config is None:
            config = self.store.get_site_configuration()
        if config is None:
            return self.display_name()
        return config.effective_identifier(self.display_name())

    def _load(self, form_id):
        config = self.store.get_site_configuration()
        if config is None or not config.is_configured:
            raise ConfigurationIncomplete("remote site not configured")
        mapping = self.store.get_form_mapping(form_id)
        if mapping is None or not mapping.enabled:
            raise ConfigurationIncomplete(f"aggregation disabled for form {form_id}")
        return config, mapping

    def _resolve_remote_form_id(self, client, form_id, mapping, form_definition) -> str:
        remote_form_id = mapping.remote_form_id or ""
        if remote_form_id:
            return remote_form_id

        try:
            created = client.create_form(form_definition)
        except RemoteError as e:
            raise RemoteFormCreationFailed(f"form {form_id}: {e}") from e
        if not created:
            raise RemoteFormCreationFailed(f"form {form_id}: remote site returned an empty form id")

        remote_form_id = self.store.claim_remote_form_id(form_id, str(created))
        mapping.remote_form_id = remote_form_id
        logger.info(f"Form {form_id} mapped to remote form {remote_form_id}")
        return remote_form_id

    def on_record_created(self, record: Dict[str, Any], form_definition: Dict[str, Any]) -> ForwardResult:
        form_id = form_definition.get("id")
        entry_id = record.get("id")

        try:
            config, mapping = self._load(form_id)
        except ConfigurationIncomplete as e:
            logger.debug(f"Entry {entry_id} not forwarded: {e}")
            return ForwardResult(SKIPPED)

        identifier = self.effective_identifier(config)
        client = self.client_factory(config)

        try:
            remote_form_id = self._resolve_remote_form_id(client, form_id, mapping, form_definition)
        except RemoteFormCreationFailed as e:
            logger.error(f"Entry {entry_id} not forwarded, remote form creation failed: {e}")
            return ForwardResult(FAILED, error=e)

        record[FORM_ID_KEY] = remote_form_id
        record[ORIGIN_KEY] = identifier

        try:
            client.create_entry(record)
        except RemoteError as e:
            err = RemoteEntryForwardFailed(f"entry {entry_id}: {e}")
            err.__cause__ = e
            logger.error(f"Entry {entry_id} kept locally, forward failed: {e}")
            return ForwardResult(FAILED, remote_form_id=remote_form_id, error=err)

        logger.info(f"Entry {entry_id} forwarded to remote form {remote_form_id} as '{identifier}'")

        if not mapping.delete_after_forward:
            return ForwardResult(FORWARDED, remote_form_id=remote_form_id)

        try:
            self.delete_record(entry_id)
        except Exception as e:
            err = LocalDeletionFailed(f"entry {entry_id}: {e}")
            err.__cause__ = e
            logger.warning(f"Entry {entry_id} forwarded but local deletion failed: {e}")
            return ForwardResult(FORWARDED, remote_form_id=remote_form_id, error=err)
        return ForwardResult(FORWARDED, remote_form_id=remote_form_id, deleted=True)


def default_engine() -> ReplicationEngine:
    from aggregator.store import ConfigurationStore
    from aggregator.services.web_api import WebAPIClient
    from entries.services import delete_entry, site_display_name

    return ReplicationEngine(
        store=ConfigurationStore(),
        client_factory=WebAPIClient.from_configuration,
        delete_record=delete_entry,
        display_name=site_display_name,
    )
