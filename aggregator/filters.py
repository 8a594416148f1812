# aggregator/filters.py
import django_filters

from entries.models import Entry, Form
from .services import entry_meta


class EntrySiteFilter(django_filters.FilterSet):
    form = django_filters.ModelChoiceFilter(queryset=Form.objects.all())
    site = django_filters.CharFilter(method="filter_site", label="Site ID")
    op = django_filters.ChoiceFilter(
        choices=[(o, o) for o in entry_meta.OPERATORS],
        method="filter_noop",
        label="Opérateur",
    )

    class Meta:
        model = Entry
        fields = ["form"]

    def filter_noop(self, queryset, name, value):
        # appliqué dans filter_site
        return queryset

    def filter_site(self, queryset, name, value):
        operator = self.form.cleaned_data.get("op") or "is"
        return entry_meta.filter_queryset(queryset, operator, value)
