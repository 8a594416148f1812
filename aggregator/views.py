# aggregator/views.py
import logging
from collections import Counter, OrderedDict

from django.contrib.auth.decorators import login_required
from django.db import transaction
from django.http import Http404
from django.shortcuts import render
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from entries.models import Entry, Form
from entries.services import create_entry
from .filters import EntrySiteFilter
from .models import SiteConfiguration
from .permissions import HasValidSignature
from .serializers import EntryRecordSerializer, FormDefinitionSerializer
from .services import entry_meta
from .services.replication import FORM_ID_KEY, ORIGIN_KEY

logger = logging.getLogger(__name__)

# clés de la soumission distante qui ne sont pas des valeurs de champs
RESERVED_KEYS = {"id", FORM_ID_KEY, "date_created", "source_url", ORIGIN_KEY}


def _envelope(payload, code):
    return Response({"status": code, "response": payload}, status=code)


def _as_list(data):
    return data if isinstance(data, list) else [data]


# ---------- API de réception (site central) ----------
class SignedAPIView(APIView):
    authentication_classes = []
    permission_classes = [HasValidSignature]
    route = ""

    def permission_denied(self, request, message=None, code=None):
        logger.warning(f"Rejected {request.method} /{self.route}: {message}")
        super().permission_denied(request, message=message, code=code)


class FormsView(SignedAPIView):
    route = "forms"

    def post(self, request):
        serializer = FormDefinitionSerializer(data=_as_list(request.data), many=True)
        if not serializer.is_valid():
            return _envelope(serializer.errors, status.HTTP_400_BAD_REQUEST)

        with transaction.atomic():
            ids = [
                str(Form.objects.create(**item).pk)
                for item in serializer.validated_data
            ]
        logger.info(f"Created forms {ids} from remote site")
        return _envelope(ids, status.HTTP_201_CREATED)


class EntriesView(SignedAPIView):
    route = "entries"

    def post(self, request):
        serializer = EntryRecordSerializer(data=_as_list(request.data), many=True)
        if not serializer.is_valid():
            return _envelope(serializer.errors, status.HTTP_400_BAD_REQUEST)

        items = serializer.validated_data
        forms = {}
        for item in items:
            form_id = item[FORM_ID_KEY]
            if form_id not in forms:
                form = Form.objects.filter(pk=form_id).first() if form_id.isdigit() else None
                if form is None:
                    return _envelope(f"Form {form_id} not found", status.HTTP_404_NOT_FOUND)
                forms[form_id] = form

        ids = []
        with transaction.atomic():
            for item in items:
                payload = item["payload"]
                values = {k: v for k, v in payload.items() if k not in RESERVED_KEYS}
                origin = payload.get(ORIGIN_KEY)
                origin = str(origin) if origin not in (None, "") else None
                entry = create_entry(
                    forms[item[FORM_ID_KEY]],
                    values,
                    meta={ORIGIN_KEY: origin} if origin else {},
                    source_url=payload.get("source_url") or "",
                )
                ids.append(str(entry.pk))
        return _envelope(ids, status.HTTP_201_CREATED)


# ---------- Page des résultats ----------
@login_required
def results(request):
    config = SiteConfiguration.load()
    if config is None or not config.results_enabled:
        raise Http404("Results page disabled")

    qs = Entry.objects.select_related("form").order_by("form_id", "id")
    f = EntrySiteFilter(request.GET or None, queryset=qs)
    entries = f.qs if f.is_bound and f.is_valid() else qs

    # {form: Counter(site_id -> n)}
    per_form = OrderedDict()
    for entry in entries:
        per_form.setdefault(entry.form, Counter())[entry_meta.resolve(entry)] += 1

    rows = [
        {
            "form": form,
            "total": sum(counter.values()),
            "sites": sorted(counter.items()),
        }
        for form, counter in per_form.items()
    ]
    return render(request, "aggregator/results.html", {
        "title": "Aggregation Results",
        "filter": f,
        "rows": rows,
        "total": sum(r["total"] for r in rows),
    })
