"""Client for the Exa search and research API."""
from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from exaCli.config.settings import DEFAULT_API_BASE, DEFAULT_TIMEOUT, ExaSettings
from exaCli.core.endpoints import Endpoint, endpoint_path
from exaCli.errors import ApiError, TransportError
from exaCli.utils.log_json import JsonLogger

_logger = JsonLogger("exa-client")


def read_text(resp: requests.Response) -> str:
    """Return the body as text, decoding as UTF-8 unless a charset is declared."""
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = "utf-8"
    return resp.text


def parse_payload(text: str) -> Any:
    """Decode ``text`` as JSON, wrapping anything undecodable as ``{"raw": text}``."""
    try:
        return json.loads(text)
    except ValueError:
        return {"raw": text}


@dataclass(slots=True)
class ExaClient:
    """Thin wrapper issuing exactly one request per :meth:`call`.

    Parameters
    ----------
    base_url:
        API root (defaults to ``https://api.exa.ai``); trailing slashes are
        ignored.
    api_key:
        Value sent in the ``x-api-key`` header.
    session:
        Optional :class:`requests.Session` for connection reuse or testing.
    timeout:
        Request timeout in seconds (defaults to 30).
    """

    base_url: str = DEFAULT_API_BASE
    api_key: Optional[str] = None
    session: Optional[requests.Session] = None
    timeout: float = DEFAULT_TIMEOUT
    _session: requests.Session = field(init=False, repr=False)
    _owns_session: bool = field(init=False, default=False, repr=False)

    API_KEY_HEADER = "x-api-key"

    def __post_init__(self) -> None:
        self._owns_session = self.session is None
        self._session = self.session or requests.Session()

    @classmethod
    def from_settings(cls, settings: ExaSettings, *, session: Optional[requests.Session] = None) -> "ExaClient":
        return cls(
            base_url=settings.api_base,
            api_key=settings.api_key,
            session=session,
            timeout=settings.timeout,
        )

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "ExaClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------#
    def _headers(self, *, with_body: bool) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if with_body:
            headers["Content-Type"] = "application/json"
        if self.api_key is not None:
            headers[self.API_KEY_HEADER] = self.api_key
        return headers

    def _request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url.rstrip('/')}{path}"
        _logger.info("api.request", route=path, method=method, fields=sorted(body or {}))
        started = time.perf_counter()
        try:
            resp = self._session.request(
                method,
                url,
                json=body,
                headers=self._headers(with_body=body is not None),
                timeout=self.timeout,
            )
            text = read_text(resp)
        except requests.RequestException as exc:
            _logger.warning("api.request_failed", route=path, method=method, error=str(exc))
            raise TransportError(f"exa request failed: {exc}") from exc
        latency_ms = round((time.perf_counter() - started) * 1000, 1)
        payload = parse_payload(text)
        _logger.info("api.response", route=path, status=resp.status_code, latency_ms=latency_ms)
        if not 200 <= resp.status_code < 300:
            _logger.warning("api.error", route=path, status=resp.status_code)
            raise ApiError(resp.status_code, payload)
        return payload

    # ------------------------------------------------------------------#
    def call(self, endpoint: Endpoint, body: Optional[Dict[str, Any]] = None, **path_params: Optional[str]) -> Any:
        """Send ``body`` to ``endpoint`` and return the decoded payload."""
        path = endpoint_path(endpoint, **path_params)
        if endpoint.has_body:
            return self._request("POST", path, body if body is not None else {})
        return self._request("GET", path)


__all__ = ["ExaClient", "parse_payload", "read_text"]
