"""
blueprints.facade - Application Startup Facade
================================================

BlueprintsApp is the one place where configuration turns into running
components. It is built once per process:

    BlueprintsConfig
        ├── log_level    → configure_logging()
        ├── persistence  → create_persistence()  ─┐
        └── filter_type  → create_filter()       ─┴→ BlueprintsServices
                                                        │
                                                        ▼
                                              BlueprintsAPIController

The filter chosen here stays active until the process exits.

Usage:
    >>> with BlueprintsApp(load_config("blueprints.yaml")) as app:
    ...     response = app.controller.get_all()

    Or inject components directly (tests):
    >>> app = BlueprintsApp(persistence=InMemoryBlueprintPersistence(seed=False))
"""

from __future__ import annotations

from typing import Any, Optional

import structlog

from blueprints.api.controller import BlueprintsAPIController
from blueprints.core.config import BlueprintsConfig
from blueprints.core.logging_config import configure_logging
from blueprints.filters.base import BlueprintsFilter
from blueprints.filters.factory import create_filter
from blueprints.persistence.base import BlueprintPersistence
from blueprints.persistence.factory import create_persistence
from blueprints.services.blueprints_services import BlueprintsServices

logger = structlog.get_logger()


class BlueprintsApp:
    """Top-level facade wiring persistence, filter, services and controller.

    Args:
        config: Configuration. Defaults to BlueprintsConfig(), which reads
            BLUEPRINTS_* environment variables.
        persistence: Optional backend to use instead of the configured one.
        blueprint_filter: Optional filter to use instead of the configured one.
        setup_logging: Whether to configure structlog from config.log_level.
    """

    def __init__(
        self,
        config: Optional[BlueprintsConfig] = None,
        *,
        persistence: Optional[BlueprintPersistence] = None,
        blueprint_filter: Optional[BlueprintsFilter] = None,
        setup_logging: bool = True,
    ) -> None:
        self._config = config or BlueprintsConfig()
        if setup_logging:
            configure_logging(self._config.log_level)

        self._persistence = persistence or create_persistence(self._config.persistence)
        self._services = BlueprintsServices(
            self._persistence,
            blueprint_filter=blueprint_filter or create_filter(self._config.filter_type),
        )
        self._controller = BlueprintsAPIController(self._services)
        self._closed = False
        self._logger = logger.bind(component="blueprints_app")

        self._logger.info(
            "blueprints_app_started",
            environment=self._config.environment,
            filter=type(self._services.blueprint_filter).__name__,
            persistence=type(self._persistence).__name__,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def config(self) -> BlueprintsConfig:
        return self._config

    @property
    def persistence(self) -> BlueprintPersistence:
        return self._persistence

    @property
    def services(self) -> BlueprintsServices:
        return self._services

    @property
    def controller(self) -> BlueprintsAPIController:
        return self._controller

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Release the persistence backend. Safe to call more than once."""
        if self._closed:
            return
        self._persistence.close()
        self._closed = True
        self._logger.info("blueprints_app_closed")

    def __enter__(self) -> BlueprintsApp:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"BlueprintsApp(filter={type(self._services.blueprint_filter).__name__!r}, "
            f"persistence={type(self._persistence).__name__!r})"
        )
