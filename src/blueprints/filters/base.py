"""
blueprints.filters.base - Abstract Blueprint Filter
=====================================================

A filter is a read-time view over a blueprint's points. The services layer
runs the active filter over every blueprint it hands back to a caller, but
never over what it writes, so stored data is always the raw point sequence
and switching filters never requires migrating anything.

Contract:
    - apply() never mutates its input.
    - apply() returns a blueprint with the same (author, name).
    - Filters hold no state, so one instance is shared by all callers
      without locking.

Implementations:
    - IdentityFilter:       points returned as stored
    - RedundancyFilter:     consecutive duplicate points collapsed
    - UndersamplingFilter:  every other point dropped
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from blueprints.core.enums import FilterType
from blueprints.core.models import Blueprint, Point


class BlueprintsFilter(ABC):
    """Abstract base class for blueprint filters.

    Subclasses set ``filter_type`` and implement ``apply``.

    Example:
        >>> active: BlueprintsFilter = RedundancyFilter()
        >>> filtered = active.apply(blueprint)
    """

    filter_type: FilterType

    @abstractmethod
    def apply(self, bp: Blueprint) -> Blueprint:
        """Return a filtered copy of a blueprint.

        Args:
            bp: The blueprint to transform. Left untouched.

        Returns:
            A new Blueprint with the same author and name.
        """

    @staticmethod
    def _with_points(bp: Blueprint, points: Iterable[Point]) -> Blueprint:
        return Blueprint.create(bp.author, bp.name, points)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
