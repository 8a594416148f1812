# aggregator/services/web_api.py
from __future__ import annotations

import base64
import hashlib
import hmac
import time
from typing import Any, Dict, List, Optional

import requests
from django.conf import settings

from aggregator.exceptions import RemoteError


def sign(public_key: str, private_key: str, method: str, route: str, expires: int) -> str:
    """Signature HMAC-SHA1 base64 de "public_key:METHOD:route:expires"."""
    string_to_sign = f"{public_key}:{method.upper()}:{route}:{expires}"
    digest = hmac.new(private_key.encode("utf-8"), string_to_sign.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


class WebAPIClient:
    """Client de l'API Web du site central (création de formulaires et de soumissions)."""

    def __init__(self, api_url: str, public_key: str, private_key: str,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.api_url = api_url.rstrip("/")
        self.public_key = public_key
        self.private_key = private_key
        self.timeout = timeout if timeout is not None else getattr(settings, "AGGREGATOR_HTTP_TIMEOUT", 60)
        # sans session fournie: requests.request, qui ouvre et ferme la sienne
        self.session = session

    @classmethod
    def from_configuration(cls, config) -> "WebAPIClient":
        return cls(config.remote_base_url, config.public_key, config.private_key)

    # --- transport ---
    def _signed_params(self, method: str, route: str) -> Dict[str, Any]:
        ttl = int(getattr(settings, "AGGREGATOR_SIGNATURE_TTL", 3600))
        expires = int(time.time()) + ttl
        return {
            "api_key": self.public_key,
            "signature": sign(self.public_key, self.private_key, method, route, expires),
            "expires": expires,
        }

    def _request(self, method: str, route: str, body: Any = None) -> Any:
        url = f"{self.api_url}/{route}"
        try:
            send = self.session.request if self.session is not None else requests.request
            r = send(
                method,
                url,
                params=self._signed_params(method, route),
                json=body,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RemoteError(f"{method} {url}: {e}") from e

        try:
            data = r.json()
        except ValueError:
            raise RemoteError(f"{method} {url}: invalid JSON response (HTTP {r.status_code})", status=r.status_code)

        # enveloppe {"status": ..., "response": ...}
        if isinstance(data, dict) and "status" in data:
            try:
                status = int(data.get("status") or r.status_code)
            except (TypeError, ValueError):
                raise RemoteError(f"{method} {url}: invalid status {data.get('status')!r}", status=r.status_code)
            payload = data.get("response")
        else:
            status, payload = r.status_code, data

        if status >= 300 or r.status_code >= 300:
            raise RemoteError(f"{method} {url}: HTTP {status} {payload!r}", status=status)
        return payload

    # --- formulaires ---
    def create_forms(self, forms: List[Dict[str, Any]]) -> List[str]:
        body = [{k: v for k, v in form.items() if k != "id"} for form in forms]
        ids = self._request("POST", "forms", body)
        if not isinstance(ids, list):
            raise RemoteError(f"Unexpected forms response: {ids!r}")
        return [str(i) for i in ids]

    def create_form(self, form: Dict[str, Any]) -> str:
        ids = self.create_forms([form])
        if not ids or not ids[0]:
            raise RemoteError("Remote site returned no form id")
        return ids[0]

    # --- soumissions ---
    def create_entries(self, entries: List[Dict[str, Any]]) -> List[Any]:
        result = self._request("POST", "entries", list(entries))
        return result if isinstance(result, list) else [result]

    def create_entry(self, entry: Dict[str, Any]) -> Any:
        acks = self.create_entries([entry])
        return acks[0] if acks else None
