"""
blueprints.persistence.factory - Persistence Factory
======================================================

Maps PersistenceConfig.backend to a concrete BlueprintPersistence.

Usage:
    >>> store = create_persistence(PersistenceConfig(backend="relational"))
    >>> type(store)  # SQLiteBlueprintPersistence
"""

from __future__ import annotations

from blueprints.core.config import PersistenceConfig
from blueprints.core.enums import PersistenceBackend
from blueprints.core.exceptions import ConfigurationError
from blueprints.persistence.base import BlueprintPersistence


def create_persistence(config: PersistenceConfig) -> BlueprintPersistence:
    """Create the persistence backend named by ``config.backend``.

    Raises:
        ConfigurationError: If the backend is not recognized.
    """
    if config.backend == PersistenceBackend.IN_MEMORY:
        from blueprints.persistence.in_memory import InMemoryBlueprintPersistence
        return InMemoryBlueprintPersistence(seed=config.seed_sample_data)

    if config.backend == PersistenceBackend.RELATIONAL:
        from blueprints.persistence.relational import SQLiteBlueprintPersistence
        return SQLiteBlueprintPersistence(config.database_path)

    raise ConfigurationError(
        message=f"Unknown persistence backend: '{config.backend}'",
        error_code="UNKNOWN_PERSISTENCE_BACKEND",
        details={"backend": str(config.backend)},
    )
