"""
Razorpay HTTP transport.

Purpose:
- Performs the actual GET/POST/... calls for every resource wrapper
- Owns authentication (HTTP Basic with key id / key secret) and encoding of
  query strings and form bodies
- Turns non-2xx responses into RazorpayAPIError using the API's error envelope

Request descriptors:
- {"url": "/subscriptions"}                      -> no body / no query
- {"url": "/subscriptions", "data": {...}}       -> query (GET/DELETE) or form body

Nested mappings and lists are sent with bracket keys (``item[name]``, ``ids[0]``),
the same form ``notes[key]`` already uses.

Every method returns an asyncio.Future; an optional callback is attached to it.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from rzp_binding.config import ClientConfig
from rzp_binding.errors import RazorpayAPIError, TransportError
from rzp_binding.utils.futures import Callback, deliver

logger = logging.getLogger(__name__)

QUERY_METHODS = {"GET", "DELETE"}


class APIClient:
    def __init__(self, config: ClientConfig, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=config.timeout_seconds)

    def get(self, descriptor: Mapping[str, Any], callback: Optional[Callback] = None):
        return deliver(self._request("GET", descriptor), callback)

    def post(self, descriptor: Mapping[str, Any], callback: Optional[Callback] = None):
        return deliver(self._request("POST", descriptor), callback)

    def put(self, descriptor: Mapping[str, Any], callback: Optional[Callback] = None):
        return deliver(self._request("PUT", descriptor), callback)

    def patch(self, descriptor: Mapping[str, Any], callback: Optional[Callback] = None):
        return deliver(self._request("PATCH", descriptor), callback)

    def delete(self, descriptor: Mapping[str, Any], callback: Optional[Callback] = None):
        return deliver(self._request("DELETE", descriptor), callback)

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def _headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }
        headers.update(self.config.headers)
        return headers

    def _auth(self) -> Optional[httpx.BasicAuth]:
        if not self.config.has_credentials:
            return None
        return httpx.BasicAuth(self.config.key_id, self.config.key_secret.get_secret_value())

    async def _request(self, method: str, descriptor: Mapping[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{descriptor['url']}"
        kwargs: Dict[str, Any] = {"headers": self._headers()}
        auth = self._auth()
        if auth is not None:
            kwargs["auth"] = auth

        if "data" in descriptor:
            try:
                encoded = _flatten_fields(descriptor["data"])
            except (TypeError, ValueError) as exc:
                logger.warning(f"Could not encode {method} {descriptor['url']} data: {exc}")
                raise TransportError(
                    f"Could not encode request data for {method} {descriptor['url']}: {exc}"
                ) from exc
            if method in QUERY_METHODS:
                kwargs["params"] = encoded
            else:
                kwargs["data"] = encoded

        logger.debug(f"{method} {descriptor['url']}")
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning(f"{method} {descriptor['url']} failed: {exc}")
            raise TransportError(f"{method} {descriptor['url']} failed: {exc}") from exc

        return _handle_response(response)


def _flatten_fields(data: Optional[Mapping[str, Any]], prefix: str = "") -> Dict[str, str]:
    """Flatten ``data`` into bracket-keyed string fields, dropping ``None`` values."""
    fields: Dict[str, str] = {}
    for key, value in (data or {}).items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if value is None:
            continue
        if isinstance(value, Mapping):
            fields.update(_flatten_fields(value, name))
        elif isinstance(value, (list, tuple)):
            fields.update(_flatten_fields(dict(enumerate(value)), name))
        elif isinstance(value, bool):
            fields[name] = "1" if value else "0"
        elif isinstance(value, (str, int, float)):
            fields[name] = str(value)
        else:
            raise TypeError(f"Field {name!r} has unsupported type {type(value).__name__}")
    return fields


def _handle_response(response: httpx.Response) -> Dict[str, Any]:
    if response.is_success:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                f"Could not decode response body (HTTP {response.status_code})",
                payload={"text": response.text},
            ) from exc

    raise _api_error(response)


def _api_error(response: httpx.Response) -> RazorpayAPIError:
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    error = body.get("error") if isinstance(body.get("error"), dict) else {}
    description = error.get("description") or response.text or response.reason_phrase
    logger.warning(
        f"API error {response.status_code} for {response.request.method} "
        f"{response.request.url.path}: {error.get('code')}"
    )
    return RazorpayAPIError(
        str(description),
        status_code=response.status_code,
        code=error.get("code"),
        field=error.get("field"),
        source=error.get("source"),
        step=error.get("step"),
        reason=error.get("reason"),
        metadata=error.get("metadata"),
        payload=body or {"text": response.text},
    )
