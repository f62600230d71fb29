"""HTTP client wrapper around httpx."""
from __future__ import annotations

from typing import Any

import httpx

from digitalocean_models.config import DEFAULT_DISCOVERY_TIMEOUT
from digitalocean_models.errors import (
    InvalidResponseError,
    NetworkError,
    ProviderError,
    RequestTimeoutError,
)


def _error_message(body: Any, raw_text: str) -> str:
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return str(body["error"].get("message", raw_text))
    return raw_text


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into digitalocean_models exceptions."""

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str],
        timeout: float = DEFAULT_DISCOVERY_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def get_json(self, path: str) -> Any:
        """Send a GET request and return the decoded JSON body.

        Raises :class:`ProviderError` on a non-2xx status,
        :class:`RequestTimeoutError` or :class:`NetworkError` on transport
        failure, and :class:`InvalidResponseError` when the body is not JSON.
        """
        try:
            resp = self._client.get(path)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(str(exc) or "request timed out", cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc) or type(exc).__name__, cause=exc) from exc

        if not resp.is_success:
            try:
                body = resp.json()
            except ValueError:
                body = {}
            raise ProviderError(
                f"HTTP {resp.status_code}: {_error_message(body, resp.text)}",
                status_code=resp.status_code,
                raw=body if isinstance(body, dict) else None,
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise InvalidResponseError(f"response body is not JSON: {exc}", cause=exc) from exc

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
