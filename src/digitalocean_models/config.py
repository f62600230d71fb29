"""Discovery configuration and execution mode."""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

DIGITALOCEAN_BASE_URL = "https://inference.do-ai.run/v1"

DEFAULT_DISCOVERY_TIMEOUT = 5.0

MODE_ENV_VAR = "DIGITALOCEAN_MODELS_ENV"


class ExecutionMode(StrEnum):
    """Whether discovery may reach the network."""

    LIVE = "live"
    OFFLINE = "offline"


def resolve_execution_mode(environ: Mapping[str, str] | None = None) -> ExecutionMode:
    """Derive the execution mode from environment flags.

    Either ``DIGITALOCEAN_MODELS_ENV=test`` or a set ``PYTEST_CURRENT_TEST``
    selects :attr:`ExecutionMode.OFFLINE`, so test suites never depend on
    network availability.
    """
    env = os.environ if environ is None else environ
    if env.get(MODE_ENV_VAR, "").lower() == "test":
        return ExecutionMode.OFFLINE
    if env.get("PYTEST_CURRENT_TEST"):
        return ExecutionMode.OFFLINE
    return ExecutionMode.LIVE


@dataclass(frozen=True)
class DiscoveryConfig:
    """Settings for a discovery call.

    ``mode=None`` defers to :func:`resolve_execution_mode` at call time.
    """

    base_url: str = DIGITALOCEAN_BASE_URL
    timeout: float = DEFAULT_DISCOVERY_TIMEOUT
    mode: ExecutionMode | None = None

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must be a non-empty string")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    def resolved_mode(self, environ: Mapping[str, str] | None = None) -> ExecutionMode:
        if self.mode is not None:
            return self.mode
        return resolve_execution_mode(environ)
