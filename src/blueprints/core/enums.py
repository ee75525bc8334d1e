"""
blueprints.core.enums - Type-Safe Enumerations
================================================

Enumerations used to select the pluggable parts of the service at startup.

All enums inherit from both `str` and `Enum`, which means:
    - They serialize to strings in JSON/YAML (Pydantic-friendly)
    - They can be compared with plain strings: FilterType.IDENTITY == "identity"
    - Environment variables like BLUEPRINTS_FILTER_TYPE=redundancy parse directly
"""

from enum import Enum


# =============================================================================
# Filter Type Enumeration
# =============================================================================
# Selects the read-time transformation applied to every blueprint the
# services layer returns. Exactly one is active per process:
#
#   IDENTITY      → filters/identity.py       (points returned untouched)
#   REDUNDANCY    → filters/redundancy.py     (consecutive duplicates removed)
#   UNDERSAMPLING → filters/undersampling.py  (every other point dropped)
# =============================================================================
class FilterType(str, Enum):
    """The available blueprint filter strategies.

    Usage:
        >>> FilterType("redundancy") is FilterType.REDUNDANCY
        True
    """

    IDENTITY = "identity"
    REDUNDANCY = "redundancy"
    UNDERSAMPLING = "undersampling"


# =============================================================================
# Persistence Backend Enumeration
# =============================================================================
class PersistenceBackend(str, Enum):
    """Where blueprints are stored.

    IN_MEMORY keeps everything in a process-local dict (pre-seeded with a
    starter dataset). RELATIONAL stores blueprints in SQLite tables.
    """

    IN_MEMORY = "in_memory"
    RELATIONAL = "relational"
