"""Tests for the Site ID entry meta."""

import pytest

from aggregator.models import SiteConfiguration
from aggregator.services import entry_meta
from aggregator.services.replication import ORIGIN_KEY
from entries.meta import get_entry_meta, meta_value
from entries.models import Entry
from entries.services import create_entry

pytestmark = pytest.mark.django_db


def test_definition_is_registered():
    definition = get_entry_meta()[ORIGIN_KEY]

    assert definition.label == "Site ID"
    assert definition.is_default_column is True
    assert definition.is_numeric is False
    assert definition.filter_operators == ("is", "isnot", "contains")


def test_submission_is_stamped_with_site_name(form, site_name):
    entry = create_entry(form, {"1": "ovin"})

    assert entry.meta[ORIGIN_KEY] == "Site A"


def test_submission_is_stamped_with_identifier(form, site_name):
    SiteConfiguration.objects.create(local_identifier="Spain / Region 1")

    entry = create_entry(form, {"1": "ovin"})

    assert entry.meta[ORIGIN_KEY] == "Spain / Region 1"


def test_imported_meta_is_kept(form, site_name):
    entry = create_entry(form, {"1": "ovin"}, meta={ORIGIN_KEY: "North"})

    assert entry.meta == {ORIGIN_KEY: "North"}
    assert meta_value(ORIGIN_KEY, entry) == "North"


def test_resolve_falls_back_to_live_identifier(form, site_name):
    entry = Entry.objects.create(form=form, values={"1": "ovin"})

    assert entry_meta.resolve(entry) == "Site A"
    SiteConfiguration.objects.create(local_identifier="East")
    assert entry_meta.resolve(entry) == "East"


@pytest.mark.parametrize("operator,needle,expected", [
    ("is", "North", True),
    ("is", "north", False),
    ("isnot", "North", False),
    ("isnot", "South", True),
    ("contains", "ort", True),
    ("contains", "ORT", True),
    ("contains", "xyz", False),
])
def test_matches(operator, needle, expected):
    assert entry_meta.matches("North", operator, needle) is expected


def test_unknown_operator():
    with pytest.raises(ValueError):
        entry_meta.matches("North", ">", "x")


def test_filter_queryset(form, site_name):
    north = Entry.objects.create(form=form, meta={ORIGIN_KEY: "North"})
    south = Entry.objects.create(form=form, meta={ORIGIN_KEY: "South"})
    legacy = Entry.objects.create(form=form, meta={})
    qs = Entry.objects.all()

    def ids(operator, needle):
        return set(entry_meta.filter_queryset(qs, operator, needle).values_list("pk", flat=True))

    assert ids("is", "North") == {north.pk}
    assert ids("is", "Site A") == {legacy.pk}
    assert ids("isnot", "North") == {south.pk, legacy.pk}
    assert ids("contains", "th") == {north.pk, south.pk}
    assert ids("contains", "site") == {legacy.pk}


def test_resolve_and_match_non_string_values(form, site_name):
    entry = Entry.objects.create(form=form, meta={ORIGIN_KEY: 5})

    assert entry_meta.resolve(entry) == "5"
    assert entry_meta.matches(5, "contains", "5") is True
    assert entry_meta.matches(5, "is", "5") is True
