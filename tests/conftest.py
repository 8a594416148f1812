"""Shared pytest fixtures."""

import pytest

from aggregator.models import FormMapping, SiteConfiguration
from entries.models import Form


@pytest.fixture
def site_name(settings):
    settings.SITE_NAME = "Site A"
    return "Site A"


@pytest.fixture
def api_keys(settings):
    settings.AGGREGATOR_API_PUBLIC_KEY = "central-public"
    settings.AGGREGATOR_API_PRIVATE_KEY = "central-private"
    return settings.AGGREGATOR_API_PUBLIC_KEY, settings.AGGREGATOR_API_PRIVATE_KEY


@pytest.fixture
def form(db):
    return Form.objects.create(
        title="Vaccination",
        fields=[{"id": "1", "label": "Espèce", "type": "text"}],
    )


@pytest.fixture
def site_config(db):
    return SiteConfiguration.objects.create(
        remote_base_url="https://central.example.org/aggregator/api",
        public_key="pub",
        private_key="priv",
    )


@pytest.fixture
def mapping(form):
    return FormMapping.objects.create(form=form, enabled=True)
