"""Runtime configuration model for resource ids.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_LOG_LEVEL,
    FALSE_VALUES,
    LOG_LEVEL_ENV,
    SUPPORTED_LOG_LEVELS,
    TRUE_VALUES,
    VALIDATE_BUCKET_NAMES_ENV,
)
from core.errors import ResourceIdConfigError


@dataclass(frozen=True)
class ResourceIdConfig:
    """Validated runtime configuration.

    Attributes:
        validate_bucket_names: Reject bucket names with characters S3 forbids.
        log_level: Minimum level emitted by structured loggers.
    """

    validate_bucket_names: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "ResourceIdConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ResourceIdConfigError: If environment values are invalid.
        """
        validate_value = os.getenv(VALIDATE_BUCKET_NAMES_ENV, "false")
        log_level_value = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
        return cls(
            validate_bucket_names=_parse_bool(VALIDATE_BUCKET_NAMES_ENV, validate_value),
            log_level=_parse_log_level(log_level_value),
        )


def _parse_bool(name: str, raw_value: str) -> bool:
    """Parse a boolean environment flag.

    Args:
        name: Environment variable name, used in error messages.
        raw_value: Raw string from environment.

    Returns:
        Parsed flag.

    Raises:
        ResourceIdConfigError: If the value is not a recognised boolean.
    """
    value = raw_value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ResourceIdConfigError(
        f"Invalid {name} value: expected true or false, got '{raw_value}'. "
        "Set it to 1, true, yes, 0, false or no."
    )


def _parse_log_level(raw_value: str) -> str:
    value = raw_value.strip().lower()
    if value not in SUPPORTED_LOG_LEVELS:
        raise ResourceIdConfigError(
            f"Invalid {LOG_LEVEL_ENV} value: expected one of "
            f"{', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'."
        )
    return value
