"""DigitalOcean GenAI model catalog with best-effort live discovery."""
from __future__ import annotations

# Catalog
from digitalocean_models.catalog import (
    CATALOG_VERSION,
    MODEL_CATALOG,
    CatalogData,
    get_model_info,
    list_models,
    load_catalog,
)
from digitalocean_models.catalog.types import (
    DEFAULT_CONTEXT_WINDOW,
    DEFAULT_COST,
    DEFAULT_MAX_TOKENS,
    ModelCost,
    ModelDefinition,
)

# Config
from digitalocean_models.config import (
    DEFAULT_DISCOVERY_TIMEOUT,
    DIGITALOCEAN_BASE_URL,
    DiscoveryConfig,
    ExecutionMode,
    resolve_execution_mode,
)

# Discovery
from digitalocean_models.discovery import (
    DiscoveryResult,
    DiscoverySource,
    FallbackReason,
    discover,
    discover_models,
    infer_definition,
    infer_reasoning,
    infer_vision,
    merge_models,
)

# Errors
from digitalocean_models.errors import (
    CatalogError,
    InvalidResponseError,
    NetworkError,
    ProviderError,
    RequestTimeoutError,
    SDKError,
)

__all__ = [
    # Catalog
    "CATALOG_VERSION",
    "MODEL_CATALOG",
    "CatalogData",
    "DEFAULT_CONTEXT_WINDOW",
    "DEFAULT_COST",
    "DEFAULT_MAX_TOKENS",
    "ModelCost",
    "ModelDefinition",
    "get_model_info",
    "list_models",
    "load_catalog",
    # Config
    "DEFAULT_DISCOVERY_TIMEOUT",
    "DIGITALOCEAN_BASE_URL",
    "DiscoveryConfig",
    "ExecutionMode",
    "resolve_execution_mode",
    # Discovery
    "DiscoveryResult",
    "DiscoverySource",
    "FallbackReason",
    "discover",
    "discover_models",
    "infer_definition",
    "infer_reasoning",
    "infer_vision",
    "merge_models",
    # Errors
    "CatalogError",
    "InvalidResponseError",
    "NetworkError",
    "ProviderError",
    "RequestTimeoutError",
    "SDKError",
]
