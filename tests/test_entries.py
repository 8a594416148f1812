"""Tests for the host entry storage."""

import pytest

from entries.models import Entry
from entries.services import delete_entry, site_display_name

pytestmark = pytest.mark.django_db


def test_to_record_is_flat(form):
    entry = Entry.objects.create(form=form, values={"1": "bovin", "id": "spoof"}, meta={"k": "v"})

    record = entry.to_record()

    assert record["id"] == str(entry.pk)
    assert record["form_id"] == str(form.pk)
    assert record["1"] == "bovin"
    assert record["k"] == "v"
    assert record["date_created"]


def test_to_definition(form):
    assert form.to_definition() == {
        "id": str(form.pk),
        "title": "Vaccination",
        "description": "",
        "fields": [{"id": "1", "label": "Espèce", "type": "text"}],
    }


def test_delete_entry_is_best_effort(form):
    entry = Entry.objects.create(form=form)

    delete_entry(str(entry.pk))
    delete_entry(str(entry.pk))

    assert not Entry.objects.exists()


def test_site_display_name(settings):
    settings.SITE_NAME = ""
    assert site_display_name() == "Django"
    settings.SITE_NAME = "  Site B "
    assert site_display_name() == "Site B"
