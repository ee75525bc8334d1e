"""
blueprints.core.logging_config - structlog Setup
==================================================

Every module logs through ``structlog.get_logger()`` and binds a
``component`` name. This module only decides the minimum level and the
renderer; it is called once by the facade at startup.
"""

from __future__ import annotations

import logging

import structlog

from blueprints.core.exceptions import ConfigurationError


def configure_logging(log_level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog for the process.

    Args:
        log_level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: Render JSON lines instead of the console renderer.

    Raises:
        ConfigurationError: If log_level is not a known level name.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            message=f"Unknown log level: '{log_level}'",
            error_code="INVALID_LOG_LEVEL",
            details={"log_level": log_level},
        )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
