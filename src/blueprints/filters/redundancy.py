"""
blueprints.filters.redundancy - Consecutive Duplicate Removal
===============================================================

Collapses runs of identical adjacent points into a single point:

    [(0,0), (0,0), (10,10), (10,10), (20,20)]  →  [(0,0), (10,10), (20,20)]

Only adjacent repeats go. A point that reappears later in the sequence,
after some other point, is kept:

    [(0,0), (1,1), (0,0)]  →  [(0,0), (1,1), (0,0)]

Applying the filter twice gives the same result as applying it once.
"""

from __future__ import annotations

from blueprints.core.enums import FilterType
from blueprints.core.models import Blueprint, Point
from blueprints.filters.base import BlueprintsFilter


class RedundancyFilter(BlueprintsFilter):
    """Removes consecutive duplicate points."""

    filter_type = FilterType.REDUNDANCY

    def apply(self, bp: Blueprint) -> Blueprint:
        kept: list[Point] = []
        for point in bp.points:
            if not kept or kept[-1] != point:
                kept.append(point)
        return self._with_points(bp, kept)
