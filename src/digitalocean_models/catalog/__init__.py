"""Static catalog of DigitalOcean GenAI models.

The catalog ships as a versioned JSON resource next to this module and
is loaded once at import time. It serves as the fallback whenever live
discovery cannot be completed.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

from digitalocean_models.catalog.types import (
    DEFAULT_CONTEXT_WINDOW,
    DEFAULT_COST,
    DEFAULT_MAX_TOKENS,
    ModelCost,
    ModelDefinition,
)
from digitalocean_models.errors import CatalogError

CATALOG_RESOURCE = "digitalocean.json"


@dataclass(frozen=True)
class CatalogData:
    """A loaded catalog resource."""

    provider: str
    version: str
    models: tuple[ModelDefinition, ...]


def _read_resource(path: str | Path | None) -> Any:
    try:
        if path is None:
            text = resources.files(__name__).joinpath(CATALOG_RESOURCE).read_text(encoding="utf-8")
        else:
            text = Path(path).read_text(encoding="utf-8")
        return json.loads(text)
    except (OSError, ValueError) as exc:
        raise CatalogError(f"cannot read model catalog {path or CATALOG_RESOURCE}: {exc}", cause=exc) from exc


def load_catalog(path: str | Path | None = None) -> CatalogData:
    """Load and validate a catalog resource.

    With no *path*, the packaged DigitalOcean catalog is read. Raises
    :class:`CatalogError` if the resource is unreadable, malformed, or
    repeats a model id.
    """
    raw = _read_resource(path)
    if not isinstance(raw, dict) or not isinstance(raw.get("models"), list):
        raise CatalogError("model catalog must be an object with a 'models' list")

    models: list[ModelDefinition] = []
    seen: set[str] = set()
    for index, entry in enumerate(raw["models"]):
        if not isinstance(entry, dict):
            raise CatalogError(f"catalog entry {index} is not an object")
        try:
            model = ModelDefinition.from_dict(entry)
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogError(f"catalog entry {index} is invalid: {exc}", cause=exc) from exc
        if model.id in seen:
            raise CatalogError(f"duplicate model id in catalog: {model.id}")
        seen.add(model.id)
        models.append(model)

    return CatalogData(
        provider=str(raw.get("provider", "")),
        version=str(raw.get("version", "")),
        models=tuple(models),
    )


_PACKAGED = load_catalog()

MODEL_CATALOG: tuple[ModelDefinition, ...] = _PACKAGED.models
CATALOG_VERSION: str = _PACKAGED.version


def get_model_info(model_id: str) -> ModelDefinition | None:
    """Look up a catalog model by exact (case-sensitive) id."""
    for model in MODEL_CATALOG:
        if model.id == model_id:
            return model
    return None


def list_models(capability: str | None = None) -> list[ModelDefinition]:
    """Return catalog models in definition order.

    Optionally filter by capability: ``"reasoning"`` or ``"vision"``.
    """
    if capability is None:
        return list(MODEL_CATALOG)
    if capability == "reasoning":
        return [m for m in MODEL_CATALOG if m.reasoning]
    if capability == "vision":
        return [m for m in MODEL_CATALOG if m.supports_vision]
    raise ValueError(f"Unknown capability: {capability!r}")


__all__ = [
    "CATALOG_VERSION",
    "CatalogData",
    "DEFAULT_CONTEXT_WINDOW",
    "DEFAULT_COST",
    "DEFAULT_MAX_TOKENS",
    "MODEL_CATALOG",
    "ModelCost",
    "ModelDefinition",
    "get_model_info",
    "list_models",
    "load_catalog",
]
