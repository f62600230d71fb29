"""Model catalog types."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

MODALITIES = frozenset({"text", "image"})

DEFAULT_CONTEXT_WINDOW = 128000
DEFAULT_MAX_TOKENS = 8192


@dataclass(frozen=True)
class ModelCost:
    """Per-unit pricing for a model.

    DigitalOcean bills in account-specific credits rather than per token,
    so every catalog entry carries the all-zero :data:`DEFAULT_COST`.
    """

    input: float = 0.0
    output: float = 0.0
    cache_read: float = 0.0
    cache_write: float = 0.0

    def __post_init__(self) -> None:
        for name in ("input", "output", "cache_read", "cache_write"):
            if getattr(self, name) < 0:
                raise ValueError(f"cost.{name} must be non-negative")

    def to_dict(self) -> dict[str, float]:
        return {
            "input": self.input,
            "output": self.output,
            "cacheRead": self.cache_read,
            "cacheWrite": self.cache_write,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ModelCost:
        return cls(
            input=data.get("input", 0.0),
            output=data.get("output", 0.0),
            cache_read=data.get("cacheRead", 0.0),
            cache_write=data.get("cacheWrite", 0.0),
        )


DEFAULT_COST = ModelCost()


@dataclass(frozen=True)
class ModelDefinition:
    """Static metadata about a model served by DigitalOcean GenAI."""

    id: str
    """API identifier (e.g., "anthropic-claude-opus-4.6"); the merge key."""

    name: str
    """Human-readable name."""

    reasoning: bool = False
    """Whether the model performs extended reasoning."""

    input: tuple[str, ...] = ("text",)
    """Supported input modalities, drawn from "text" and "image"."""

    cost: ModelCost = field(default=DEFAULT_COST)
    """Per-unit pricing."""

    context_window: int = DEFAULT_CONTEXT_WINDOW
    """Max total tokens."""

    max_tokens: int = DEFAULT_MAX_TOKENS
    """Max output tokens per request."""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Model id must be a non-empty string")
        if isinstance(self.input, list):
            object.__setattr__(self, "input", tuple(self.input))
        if not self.input:
            raise ValueError(f"Model {self.id!r} must accept at least one input modality")
        unknown = set(self.input) - MODALITIES
        if unknown:
            raise ValueError(f"Model {self.id!r} has unknown modalities: {sorted(unknown)}")
        if self.context_window <= 0 or self.max_tokens <= 0:
            raise ValueError(f"Model {self.id!r} token limits must be positive")

    @property
    def supports_vision(self) -> bool:
        return "image" in self.input

    def to_dict(self) -> dict[str, Any]:
        """Export in the camelCase record shape used by model registries."""
        return {
            "id": self.id,
            "name": self.name,
            "reasoning": self.reasoning,
            "input": list(self.input),
            "cost": self.cost.to_dict(),
            "contextWindow": self.context_window,
            "maxTokens": self.max_tokens,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ModelDefinition:
        """Build a definition from the camelCase record shape.

        A missing ``cost`` means :data:`DEFAULT_COST`; missing limits fall
        back to the provider-wide defaults. Values of the wrong JSON type
        raise ``ValueError`` rather than being coerced.
        """
        model_id = data["id"]
        reasoning = data.get("reasoning", False)
        if not isinstance(reasoning, bool):
            raise ValueError(f"Model {model_id!r}: reasoning must be a boolean, got {reasoning!r}")
        limits = {}
        for key, default in (("contextWindow", DEFAULT_CONTEXT_WINDOW), ("maxTokens", DEFAULT_MAX_TOKENS)):
            value = data.get(key, default)
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Model {model_id!r}: {key} must be an integer, got {value!r}")
            limits[key] = value
        cost = data.get("cost")
        return cls(
            id=model_id,
            name=data.get("name", model_id),
            reasoning=reasoning,
            input=tuple(data.get("input", ("text",))),
            cost=ModelCost.from_dict(cost) if cost else DEFAULT_COST,
            context_window=limits["contextWindow"],
            max_tokens=limits["maxTokens"],
        )
