"""Configuration for fabula."""

import os
from dataclasses import dataclass
from pathlib import Path

from .engine.dispatch import DEFAULT_ORDER, DispatchOrder
from .errors import ConfigError


@dataclass
class Config:
    """Application configuration."""

    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False
    start: str = "forest"
    dispatch_order: DispatchOrder = DEFAULT_ORDER
    prompt: str = ">> "

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_file = os.getenv("FABULA_LOG_FILE")
        order = os.getenv("FABULA_DISPATCH_ORDER", cls.dispatch_order.value)

        try:
            dispatch_order = DispatchOrder(order.lower())
        except ValueError:
            choices = ", ".join(o.value for o in DispatchOrder)
            raise ConfigError(
                f"FABULA_DISPATCH_ORDER must be one of {choices}, got {order!r}"
            ) from None

        return cls(
            log_level=os.getenv("FABULA_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("FABULA_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
            start=os.getenv("FABULA_START", cls.start),
            dispatch_order=dispatch_order,
            prompt=os.getenv("FABULA_PROMPT", cls.prompt),
        )
