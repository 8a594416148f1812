"""Tests for ConfigurationStore and the configuration models."""

import pytest

from aggregator.models import FormMapping, SiteConfiguration
from aggregator.store import ConfigurationStore

pytestmark = pytest.mark.django_db


def test_no_site_configuration():
    assert ConfigurationStore().get_site_configuration() is None


def test_site_configuration_is_cleaned_and_singleton():
    SiteConfiguration.objects.create(
        remote_base_url="https://central.example.org/api/",
        public_key=" pub ",
        private_key="priv",
    )
    SiteConfiguration(local_identifier="Région 1").save()

    assert SiteConfiguration.objects.count() == 1
    config = ConfigurationStore().get_site_configuration()
    assert config.local_identifier == "Région 1"
    assert config.is_configured is False


def test_is_configured_and_identifier(site_config):
    config = ConfigurationStore().get_site_configuration()

    assert config.remote_base_url == "https://central.example.org/aggregator/api"
    assert config.is_configured
    assert config.effective_identifier("Site A") == "Site A"
    config.local_identifier = "Spain"
    assert config.effective_identifier("Site A") == "Spain"


def test_get_and_save_form_mapping(form):
    store = ConfigurationStore()
    assert store.get_form_mapping(form.pk) is None

    store.save_form_mapping(form.pk, FormMapping(enabled=True, remote_form_id="R9"))

    mapping = store.get_form_mapping(form.pk)
    assert mapping.enabled is True
    assert mapping.remote_form_id == "R9"


def test_claim_writes_empty_mapping_once(mapping):
    store = ConfigurationStore()

    assert store.claim_remote_form_id(mapping.form_id, "77") == "77"
    assert store.claim_remote_form_id(mapping.form_id, "78") == "77"

    mapping.refresh_from_db()
    assert mapping.remote_form_id == "77"
