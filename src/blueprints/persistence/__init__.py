"""
blueprints.persistence - Blueprint Storage
============================================

Components:
    - BlueprintPersistence (ABC):     Storage contract keyed by (author, name)
    - InMemoryBlueprintPersistence:   Lock-guarded dict, pre-seeded starter data
    - SQLiteBlueprintPersistence:     Relational tables with ordered points
    - create_persistence:             Build the backend named in configuration

Usage:
    from blueprints.persistence import InMemoryBlueprintPersistence
"""

from blueprints.persistence.base import BlueprintPersistence
from blueprints.persistence.factory import create_persistence
from blueprints.persistence.in_memory import InMemoryBlueprintPersistence, sample_blueprints
from blueprints.persistence.relational import SQLiteBlueprintPersistence

__all__ = [
    "BlueprintPersistence",
    "InMemoryBlueprintPersistence",
    "SQLiteBlueprintPersistence",
    "create_persistence",
    "sample_blueprints",
]
