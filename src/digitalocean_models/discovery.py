"""Live model discovery against the DigitalOcean GenAI ``/models`` endpoint.

Discovery never raises. Every failure degrades to the static catalog and
the outcome is reported through :class:`DiscoveryResult`, so callers can
tell live data from fallback data without scraping logs.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from digitalocean_models._http import HttpClient
from digitalocean_models.catalog import MODEL_CATALOG
from digitalocean_models.catalog.types import (
    DEFAULT_CONTEXT_WINDOW,
    DEFAULT_COST,
    DEFAULT_MAX_TOKENS,
    ModelDefinition,
)
from digitalocean_models.config import DiscoveryConfig, ExecutionMode
from digitalocean_models.errors import ProviderError

logger = logging.getLogger(__name__)

# Best-effort capability hints for ids the catalog does not know yet. The
# endpoint returns bare ids, so these lists will drift as new families ship.
REASONING_TOKENS: tuple[str, ...] = (
    "thinking",
    "reason",
    "r1",
    "-o1",
    "-o3",
    "opus-4",
    "4.1-opus",
    "sonnet-4",
    "4.5-sonnet",
    "4.5-haiku",
    "3.7-sonnet",
    "codex",
    "5.2",
)

VISION_TOKENS: tuple[str, ...] = ("claude", "gpt-4o", "gpt-4.1", "gpt-5")

NON_VISION_TOKENS: tuple[str, ...] = ("oss", "codex")


class DiscoverySource(StrEnum):
    """Where the returned models came from."""

    LIVE = "live"
    FALLBACK = "fallback"


class FallbackReason(StrEnum):
    """Why discovery returned the static catalog."""

    OFFLINE = "offline"
    HTTP_STATUS = "http_status"
    EMPTY_PAYLOAD = "empty_payload"
    EMPTY_MERGE = "empty_merge"
    ERROR = "error"


@dataclass(frozen=True)
class DiscoveryResult:
    """Outcome of a discovery call."""

    models: tuple[ModelDefinition, ...]
    source: DiscoverySource
    reason: FallbackReason | None = None
    detail: str = ""

    @property
    def is_live(self) -> bool:
        return self.source is DiscoverySource.LIVE

    @classmethod
    def live(cls, models: Iterable[ModelDefinition]) -> DiscoveryResult:
        return cls(models=tuple(models), source=DiscoverySource.LIVE)

    @classmethod
    def fallback(cls, reason: FallbackReason, detail: str = "") -> DiscoveryResult:
        return cls(
            models=MODEL_CATALOG,
            source=DiscoverySource.FALLBACK,
            reason=reason,
            detail=detail,
        )


# ---------------------------------------------------------------------------
# Capability inference
# ---------------------------------------------------------------------------


def infer_reasoning(model_id: str) -> bool:
    """Guess whether an unknown model id names a reasoning model."""
    lowered = model_id.lower()
    return any(token in lowered for token in REASONING_TOKENS)


def infer_vision(model_id: str) -> bool:
    """Guess whether an unknown model id accepts image input."""
    lowered = model_id.lower()
    if any(token in lowered for token in NON_VISION_TOKENS):
        return False
    return any(token in lowered for token in VISION_TOKENS)


def infer_definition(model_id: str) -> ModelDefinition:
    """Synthesize a definition for a model id missing from the catalog."""
    return ModelDefinition(
        id=model_id,
        name=model_id,
        reasoning=infer_reasoning(model_id),
        input=("text", "image") if infer_vision(model_id) else ("text",),
        cost=DEFAULT_COST,
        context_window=DEFAULT_CONTEXT_WINDOW,
        max_tokens=DEFAULT_MAX_TOKENS,
    )


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------


def merge_models(
    remote: Iterable[Mapping[str, Any]],
    catalog: Iterable[ModelDefinition] = MODEL_CATALOG,
) -> list[ModelDefinition]:
    """Combine live-listed descriptors with catalog metadata.

    Provider order is preserved. Known ids yield the catalog's record;
    unknown ids are synthesized with :func:`infer_definition`. Descriptors
    without a string id are skipped and repeated ids are emitted once.
    """
    by_id = {model.id: model for model in catalog}
    merged: list[ModelDefinition] = []
    seen: set[str] = set()

    for descriptor in remote:
        model_id = descriptor.get("id") if isinstance(descriptor, Mapping) else None
        if not isinstance(model_id, str) or not model_id or model_id in seen:
            continue
        seen.add(model_id)
        merged.append(by_id.get(model_id) or infer_definition(model_id))

    return merged


def _remote_descriptors(body: Any) -> list[Any] | None:
    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, list) or not data:
        return None
    return data


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def discover_models(
    api_key: str,
    *,
    config: DiscoveryConfig | None = None,
    client: HttpClient | None = None,
) -> DiscoveryResult:
    """Refresh the catalog from the live endpoint, falling back on any failure.

    Args:
        api_key: DigitalOcean model access key, sent as a bearer token.
        config: Base URL, timeout, and execution mode. ``OFFLINE`` mode
            returns the static catalog without touching the network.
        client: Pre-built HTTP client. The caller keeps ownership; when
            omitted a client is created for this call and closed after it.

    Returns:
        A live result with merged models, or a fallback result carrying
        the static catalog and the reason.
    """
    cfg = config or DiscoveryConfig()
    if cfg.resolved_mode() is ExecutionMode.OFFLINE:
        return DiscoveryResult.fallback(FallbackReason.OFFLINE)

    owns_client = client is None
    try:
        if client is None:
            client = HttpClient(
                base_url=cfg.base_url,
                headers={"authorization": f"Bearer {api_key}"},
                timeout=cfg.timeout,
            )
        body = client.get_json("/models")

        descriptors = _remote_descriptors(body)
        if descriptors is None:
            logger.warning("No models found from DigitalOcean API, using static catalog")
            return DiscoveryResult.fallback(
                FallbackReason.EMPTY_PAYLOAD, "response contained no models"
            )

        merged = merge_models(descriptors)
        if not merged:
            logger.warning("No usable model ids from DigitalOcean API, using static catalog")
            return DiscoveryResult.fallback(
                FallbackReason.EMPTY_MERGE, "no descriptor carried a model id"
            )

        return DiscoveryResult.live(merged)
    except ProviderError as exc:
        logger.warning(
            "Failed to discover DigitalOcean models: HTTP %s, using static catalog",
            exc.status_code,
        )
        return DiscoveryResult.fallback(FallbackReason.HTTP_STATUS, str(exc))
    except Exception as exc:
        logger.warning("DigitalOcean model discovery failed: %s, using static catalog", exc)
        return DiscoveryResult.fallback(FallbackReason.ERROR, str(exc) or type(exc).__name__)
    finally:
        if owns_client and client is not None:
            client.close()


def discover(
    api_key: str,
    *,
    config: DiscoveryConfig | None = None,
    client: HttpClient | None = None,
) -> list[ModelDefinition]:
    """Return the discovered models, or the static catalog on fallback."""
    return list(discover_models(api_key, config=config, client=client).models)
