"""Tests for the receiving API of the central site."""

import time
from urllib.parse import urlencode

import pytest
from rest_framework.test import APIClient

from aggregator.services.replication import ORIGIN_KEY
from aggregator.services.web_api import sign
from entries.models import Entry, Form

pytestmark = pytest.mark.django_db


def signed_url(route, public_key="central-public", private_key="central-private", expires=None):
    expires = expires if expires is not None else int(time.time()) + 600
    signature = sign(public_key, private_key, "POST", route, expires)
    return f"/aggregator/api/{route}", {"api_key": public_key, "signature": signature, "expires": expires}


def post(route, body, **kwargs):
    path, params = signed_url(route, **kwargs)
    return APIClient().post(f"{path}?{urlencode(params)}", body, format="json")


def test_create_forms(api_keys):
    response = post("forms", [{"title": "Vaccination", "fields": [{"id": "1", "label": "Espèce"}]}])

    assert response.status_code == 201
    assert response.json()["status"] == 201
    [form_id] = response.json()["response"]
    form = Form.objects.get(pk=form_id)
    assert form.title == "Vaccination"
    assert form.fields == [{"id": "1", "label": "Espèce"}]


def test_create_entries_keeps_origin(api_keys, form):
    body = [{"id": "12", "form_id": str(form.pk), "1": "bovin", ORIGIN_KEY: "Site A", "date_created": "2024-01-01"}]

    response = post("entries", body)

    assert response.status_code == 201
    [entry_id] = response.json()["response"]
    entry = Entry.objects.get(pk=entry_id)
    assert entry.form == form
    assert entry.values == {"1": "bovin"}
    assert entry.meta == {ORIGIN_KEY: "Site A"}


def test_unknown_form(api_keys):
    response = post("entries", [{"form_id": "999", "1": "x"}])

    assert response.status_code == 404
    assert response.json()["status"] == 404
    assert not Entry.objects.exists()


def test_invalid_payload(api_keys):
    response = post("forms", [{"description": "no title"}])

    assert response.status_code == 400


def test_bad_signature(api_keys, form):
    response = post("entries", [{"form_id": str(form.pk)}], private_key="wrong")

    assert response.status_code == 403
    assert not Entry.objects.exists()


def test_expired_signature(api_keys):
    response = post("forms", [{"title": "x"}], expires=int(time.time()) - 10)

    assert response.status_code == 403


def test_signature_bound_to_route(api_keys, form):
    path, params = signed_url("forms")
    response = APIClient().post(f"/aggregator/api/entries?{urlencode(params)}", [{"form_id": str(form.pk)}],
                                format="json")

    assert response.status_code == 403


def test_api_disabled_without_keys(settings):
    settings.AGGREGATOR_API_PUBLIC_KEY = ""
    settings.AGGREGATOR_API_PRIVATE_KEY = ""

    response = post("forms", [{"title": "x"}], public_key="", private_key="")

    assert response.status_code == 403


def test_non_string_origin_is_stored_as_text(api_keys, form):
    response = post("entries", [{"form_id": str(form.pk), "1": "x", ORIGIN_KEY: 5}])

    assert response.status_code == 201
    entry = Entry.objects.get(pk=response.json()["response"][0])
    assert entry.meta == {ORIGIN_KEY: "5"}
