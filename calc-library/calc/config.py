"""Engine configuration, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class EngineConfig:
    """
    Calculation engine settings.

    - `max_workers`: targets calculated concurrently (1 = sequential)
    - `validate_registry`: check at startup that every known target type has a function
    - `log_level`: root log level applied by the API service
    """

    max_workers: int = 1
    validate_registry: bool = True
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Build from CALC_MAX_WORKERS, CALC_VALIDATE_REGISTRY and CALC_LOG_LEVEL."""
        max_workers = os.environ.get("CALC_MAX_WORKERS", "1")
        try:
            workers = int(max_workers)
        except ValueError:
            raise ValueError(f"CALC_MAX_WORKERS must be an integer, got {max_workers!r}") from None
        return cls(
            max_workers=workers,
            validate_registry=_env_bool("CALC_VALIDATE_REGISTRY", True),
            log_level=os.environ.get("CALC_LOG_LEVEL", "INFO").upper(),
        )
