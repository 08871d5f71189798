"""Runtime configuration model for Costeo.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, SUPPORTED_LOG_LEVELS
from core.errors import CosteoConfigError


@dataclass(frozen=True)
class CosteoConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level for structured log events.
    """

    log_level: str

    @classmethod
    def from_env(cls) -> "CosteoConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CosteoConfigError: If environment values are invalid.
        """
        log_level_value = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(log_level=_parse_log_level(log_level_value))


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized lowercase level name.

    Raises:
        CosteoConfigError: If value is not a supported level.
    """
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise CosteoConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'. "
            f"Set {LOG_LEVEL_ENV_VAR} to a supported level."
        )
    return level
