"""
blueprints.filters - Read-Time Blueprint Filters
==================================================

Available Filters:
    - BlueprintsFilter:     Abstract base class defining the filter contract.
    - IdentityFilter:       Returns points unchanged (default).
    - RedundancyFilter:     Collapses consecutive duplicate points.
    - UndersamplingFilter:  Keeps every other point of long blueprints.

Usage:
    >>> from blueprints.filters import create_filter
    >>> active = create_filter(config.filter_type)
    >>> filtered = active.apply(blueprint)
"""

from blueprints.filters.base import BlueprintsFilter
from blueprints.filters.factory import create_filter
from blueprints.filters.identity import IdentityFilter
from blueprints.filters.redundancy import RedundancyFilter
from blueprints.filters.undersampling import UndersamplingFilter

__all__ = [
    "BlueprintsFilter",
    "IdentityFilter",
    "RedundancyFilter",
    "UndersamplingFilter",
    "create_filter",
]
