"""
blueprints.filters.identity - Pass-Through Filter
===================================================

The default filter. Blueprints come back with their stored points.
"""

from __future__ import annotations

from blueprints.core.enums import FilterType
from blueprints.core.models import Blueprint
from blueprints.filters.base import BlueprintsFilter


class IdentityFilter(BlueprintsFilter):
    """Returns an equivalent blueprint with an identical point sequence."""

    filter_type = FilterType.IDENTITY

    def apply(self, bp: Blueprint) -> Blueprint:
        return bp.model_copy()
