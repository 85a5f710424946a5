"""HTTP transport for Foreman API calls."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from tfforeman.constants import API_ACCEPT, API_PREFIX
from tfforeman.errors import APIError, NotFoundError, RequestError

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        decoded = response.json()
    except ValueError:
        return default

    if not isinstance(decoded, dict):
        return default
    error = decoded.get("error")
    if isinstance(error, dict):
        full = error.get("full_messages")
        if isinstance(full, list) and full:
            return "; ".join(str(item) for item in full)
        message = error.get("message")
        if message:
            return str(message)
    elif isinstance(error, str) and error:
        return error
    return default


class ForemanTransport:
    """Async transport sending authenticated JSON requests to ``<server>/api``.

    Every call is a single round trip: failures are raised, never retried.
    """

    def __init__(
        self,
        *,
        server_url: str,
        timeout: float,
        verify_tls: bool,
        username: str | None = None,
        password: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = server_url.rstrip("/") + API_PREFIX
        self._auth = httpx.BasicAuth(username, password or "") if username else None
        self._owns_http_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            verify=verify_tls,
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._client.aclose()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str | int | float | bool] | None = None,
        json_data: Mapping[str, Any] | None = None,
    ) -> Any:
        method_upper = method.upper()
        url = self.url_for(path)
        headers = {"Accept": API_ACCEPT}
        content: bytes | None = None
        if json_data is not None:
            headers["Content-Type"] = "application/json"
            content = json.dumps(dict(json_data)).encode("utf-8")
            logger.debug("%s %s body: [%s]", method_upper, url, content.decode("utf-8"))
        else:
            logger.debug("%s %s params: [%s]", method_upper, url, dict(params) if params else {})

        try:
            response = await self._client.request(
                method_upper,
                url,
                params=params,
                content=content,
                headers=headers,
                auth=self._auth if self._auth is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.HTTPError as exc:
            raise RequestError(f"request failed: {exc}") from exc

        logger.debug("%s %s -> %d", method_upper, url, response.status_code)

        if response.status_code == 404:
            raise NotFoundError(
                status_code=404,
                message=_error_message(response, "resource not found"),
                body=response.text.strip() or None,
            )

        if response.status_code >= 400:
            raise APIError(
                status_code=response.status_code,
                message=_error_message(response, "request failed"),
                body=response.text.strip() or None,
            )

        if response.status_code == 204 or not response.text.strip():
            return {}

        try:
            return response.json()
        except ValueError as exc:
            raise RequestError("response was not valid JSON") from exc
