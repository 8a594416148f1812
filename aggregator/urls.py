# aggregator/urls.py
from django.urls import path

from . import views

app_name = "aggregator"
urlpatterns = [
    path("api/forms", views.FormsView.as_view(), name="api_forms"),
    path("api/entries", views.EntriesView.as_view(), name="api_entries"),
    path("results/", views.results, name="results"),
]
