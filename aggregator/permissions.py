# aggregator/permissions.py
import hmac
import time

from django.conf import settings
from rest_framework.permissions import BasePermission

from .services.web_api import sign


class HasValidSignature(BasePermission):
    """
    Vérifie api_key / expires / signature passés en query string
    (même schéma que WebAPIClient).
    """
    message = "Invalid or expired signature."

    def has_permission(self, request, view):
        public_key = getattr(settings, "AGGREGATOR_API_PUBLIC_KEY", "")
        private_key = getattr(settings, "AGGREGATOR_API_PRIVATE_KEY", "")
        if not public_key or not private_key:
            return False

        params = request.query_params
        api_key = params.get("api_key", "")
        signature = params.get("signature", "")
        try:
            expires = int(params.get("expires", ""))
        except ValueError:
            return False

        if api_key != public_key or expires < int(time.time()):
            return False

        route = getattr(view, "route", "")
        expected = sign(public_key, private_key, request.method, route, expires)
        return hmac.compare_digest(expected, signature)
