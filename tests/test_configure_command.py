"""Tests for the aggregator_configure management command."""

from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.utils import timezone

from aggregator.models import FormMapping, ForwardLog, SiteConfiguration

pytestmark = pytest.mark.django_db


def test_configure_site_and_form(form, site_name):
    out = StringIO()

    call_command(
        "aggregator_configure",
        "--url", "https://central.example.org/aggregator/api/",
        "--public-key", "pub",
        "--private-key", "priv",
        "--form", str(form.pk),
        "--enable",
        "--delete-after-forward",
        stdout=out,
    )

    config = SiteConfiguration.load()
    assert config.remote_base_url == "https://central.example.org/aggregator/api"
    assert config.is_configured
    mapping = FormMapping.objects.get(form=form)
    assert mapping.enabled and mapping.delete_after_forward
    assert mapping.remote_form_id == ""
    assert "Site: Site A" in out.getvalue()
    assert "mode=émetteur" in out.getvalue()


def test_receiver_only(site_name):
    out = StringIO()

    call_command("aggregator_configure", "--identifier", "Central", "--results", stdout=out)

    config = SiteConfiguration.load()
    assert config.results_enabled is True
    assert "Site: Central" in out.getvalue()
    assert "mode=récepteur" in out.getvalue()


def test_form_options_require_form():
    with pytest.raises(CommandError):
        call_command("aggregator_configure", "--enable", stdout=StringIO())


def test_unknown_form():
    with pytest.raises(CommandError):
        call_command("aggregator_configure", "--form", "999", stdout=StringIO())


def test_purge_forward_log(form):
    old = ForwardLog.objects.create(form=form, entry_id="1", status="FORWARDED")
    ForwardLog.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=40))
    recent = ForwardLog.objects.create(form=form, entry_id="2", status="FAILED")
    out = StringIO()

    call_command("aggregator_configure", "--purge-log-days", "30", stdout=out)

    assert list(ForwardLog.objects.values_list("pk", flat=True)) == [recent.pk]
    assert "1 ligne(s) supprimée(s)" in out.getvalue()


def test_purge_rejects_negative_days():
    with pytest.raises(CommandError):
        call_command("aggregator_configure", "--purge-log-days", "-1", stdout=StringIO())
