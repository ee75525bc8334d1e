"""
blueprints.services.blueprints_services - Blueprint Services
==============================================================

The composition point between storage and filtering. BlueprintsServices
holds exactly one persistence backend and one filter, both chosen when it
is constructed and never swapped afterwards.

Data Flow:
    caller ──read──→ BlueprintsServices ──→ persistence (raw points)
                            │
                            └── active filter applied to each result ──→ caller

    caller ──write─→ BlueprintsServices ──→ persistence (raw points, unfiltered)

Why reads only:
    The redundancy and undersampling filters throw points away. Running them
    on writes would lose data for good, and changing the active filter would
    then mean migrating what was stored. Filtering on the way out keeps the
    stored data complete and recomputes the view on every read.

Errors:
    BlueprintNotFoundError and BlueprintPersistenceError come straight from
    persistence and are never caught here.
"""

from __future__ import annotations

from typing import Optional, Union

import structlog

from blueprints.core.enums import FilterType
from blueprints.core.models import Blueprint
from blueprints.filters.base import BlueprintsFilter
from blueprints.filters.factory import create_filter
from blueprints.persistence.base import BlueprintPersistence

logger = structlog.get_logger()


class BlueprintsServices:
    """Reads blueprints through the active filter and writes them raw.

    Args:
        persistence: Where blueprints are stored.
        filter_type: Which filter to activate. Ignored when
            ``blueprint_filter`` is given.
        blueprint_filter: A ready-made filter instance to use instead.

    Example:
        >>> services = BlueprintsServices(
        ...     InMemoryBlueprintPersistence(),
        ...     FilterType.REDUNDANCY,
        ... )
        >>> services.get_blueprint("john", "garage").points[:2]
        (Point(x=5, y=5), Point(x=15, y=5))
    """

    def __init__(
        self,
        persistence: BlueprintPersistence,
        filter_type: Union[FilterType, str] = FilterType.IDENTITY,
        *,
        blueprint_filter: Optional[BlueprintsFilter] = None,
    ) -> None:
        self._persistence = persistence
        self._filter = blueprint_filter or create_filter(filter_type)
        self._logger = logger.bind(component="blueprints_services")

        self._logger.info(
            "blueprints_services_ready",
            persistence=type(persistence).__name__,
            filter=type(self._filter).__name__,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def persistence(self) -> BlueprintPersistence:
        """The persistence backend."""
        return self._persistence

    @property
    def blueprint_filter(self) -> BlueprintsFilter:
        """The filter applied to every read."""
        return self._filter

    # =========================================================================
    # Reads (filtered)
    # =========================================================================

    def get_all_blueprints(self) -> set[Blueprint]:
        """Every stored blueprint, filtered. Empty when nothing is stored."""
        return {self._filter.apply(bp) for bp in self._persistence.get_all_blueprints()}

    def get_blueprints_by_author(self, author: str) -> set[Blueprint]:
        """Every blueprint by ``author``, filtered.

        Raises:
            BlueprintNotFoundError: If the author has no blueprints.
        """
        found = self._persistence.get_blueprints_by_author(author)
        return {self._filter.apply(bp) for bp in found}

    def get_blueprint(self, author: str, name: str) -> Blueprint:
        """One blueprint, filtered.

        Raises:
            BlueprintNotFoundError: If no blueprint matches.
        """
        return self._filter.apply(self._persistence.get_blueprint(author, name))

    # =========================================================================
    # Writes (raw)
    # =========================================================================

    def add_new_blueprint(self, bp: Blueprint) -> None:
        """Store a new blueprint exactly as given.

        Raises:
            BlueprintPersistenceError: If (author, name) is already taken.
        """
        self._persistence.save_blueprint(bp)
        self._logger.info("blueprint_created", author=bp.author, name=bp.name)

    def add_point(self, author: str, name: str, x: int, y: int) -> None:
        """Append a raw point to a stored blueprint.

        Raises:
            BlueprintNotFoundError: If no blueprint matches.
        """
        self._persistence.add_point(author, name, x, y)
        self._logger.info("point_appended", author=author, name=name, x=x, y=y)
