"""Exceptions raised inside the package.

None of these reach a discovery caller: :func:`discover_models` turns
each one into a fallback result.
"""
from __future__ import annotations

from typing import Any


class SDKError(Exception):
    """Base error for all digitalocean_models errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ProviderError(SDKError):
    """The provider answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        raw: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.raw = raw


class RequestTimeoutError(SDKError):
    """The request did not complete within the configured timeout."""


class NetworkError(SDKError):
    """The request failed at the transport level."""


class InvalidResponseError(SDKError):
    """The provider returned a body that is not JSON."""


class CatalogError(SDKError):
    """A model catalog resource is unreadable or violates its invariants."""
