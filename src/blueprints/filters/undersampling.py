"""
blueprints.filters.undersampling - Every-Other-Point Filter
=============================================================

Keeps the points at even positions (0, 2, 4, ...) when a blueprint has more
than two points:

    [(0,0), (1,1), (2,2), (3,3), (4,4)]  →  [(0,0), (2,2), (4,4)]

Blueprints with two points or fewer are returned as they are. Unlike the
redundancy filter this one is not idempotent: each application halves a
long sequence again until it is down to two points or fewer.
"""

from __future__ import annotations

from blueprints.core.enums import FilterType
from blueprints.core.models import Blueprint
from blueprints.filters.base import BlueprintsFilter

# Sequences at or below this length are never reduced.
MIN_POINTS_TO_SAMPLE = 2


class UndersamplingFilter(BlueprintsFilter):
    """Drops every odd-indexed point of blueprints longer than two points."""

    filter_type = FilterType.UNDERSAMPLING

    def apply(self, bp: Blueprint) -> Blueprint:
        if len(bp.points) <= MIN_POINTS_TO_SAMPLE:
            return self._with_points(bp, bp.points)
        return self._with_points(bp, bp.points[::2])
