"""
blueprints.core - Foundation Layer
==================================

The building blocks every other package depends on:

    - config:          Configuration (BlueprintsConfig, PersistenceConfig)
    - enums:           FilterType, PersistenceBackend
    - models:          Point, Blueprint, NewBlueprintRequest
    - exceptions:      Exception hierarchy (not found, already exists, config)
    - logging_config:  structlog setup

Dependency Rule:
    core/ depends on NOTHING else in the blueprints package.
"""

from blueprints.core.config import (
    BlueprintsConfig,
    PersistenceConfig,
    get_default_config,
    load_config,
)
from blueprints.core.enums import FilterType, PersistenceBackend
from blueprints.core.exceptions import (
    BlueprintNotFoundError,
    BlueprintPersistenceError,
    BlueprintsError,
    ConfigurationError,
)
from blueprints.core.models import Blueprint, NewBlueprintRequest, Point

__all__ = [
    # Config
    "BlueprintsConfig",
    "PersistenceConfig",
    "get_default_config",
    "load_config",
    # Enums
    "FilterType",
    "PersistenceBackend",
    # Models
    "Point",
    "Blueprint",
    "NewBlueprintRequest",
    # Exceptions
    "BlueprintsError",
    "BlueprintNotFoundError",
    "BlueprintPersistenceError",
    "ConfigurationError",
]
