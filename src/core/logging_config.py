"""Structured logging configuration.

This module builds structlog loggers with a stable JSON event format.
Each logger carries the minimum level of the config it was built from,
so loggers with different configs coexist in one process.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from core.config import ResourceIdConfig


def get_logger(name: str, config: ResourceIdConfig | None = None) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.
        config: Optional runtime config; read from the environment when omitted.

    Returns:
        A structlog bound logger with structured output.
    """
    resolved_config = config or ResourceIdConfig.from_env()
    level = logging.getLevelName(resolved_config.log_level.upper())
    return structlog.wrap_logger(
        structlog.PrintLogger(),
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_name=name,
    )
