"""
blueprints.persistence.base - Blueprint Persistence Interface
===============================================================

The storage abstraction behind the services layer. Every implementation
keys blueprints by (author, name) and enforces uniqueness of that pair at
write time.

Operations:
    save_blueprint(bp)                 → raises BlueprintPersistenceError on duplicate
    get_blueprint(author, name)        → raises BlueprintNotFoundError
    get_blueprints_by_author(author)   → raises BlueprintNotFoundError when empty
    get_all_blueprints()               → never raises, may be empty
    add_point(author, name, x, y)      → raises BlueprintNotFoundError

Stored points are always raw. Filters are applied by the services layer on
the way out and never reach persistence.

Implementations:
    - InMemoryBlueprintPersistence:  Lock-guarded dict, pre-seeded for dev/testing
    - SQLiteBlueprintPersistence:    Relational tables in SQLite
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from blueprints.core.models import Blueprint


class BlueprintPersistence(ABC):
    """Abstract base class for blueprint storage.

    Implementations must be safe to call from several threads at once.
    Blueprints handed back to callers are snapshots; changing them does not
    change what is stored.

    Example:
        >>> def publish(store: BlueprintPersistence, bp: Blueprint) -> None:
        ...     store.save_blueprint(bp)
        ...     store.add_point(bp.author, bp.name, 0, 0)
    """

    @abstractmethod
    def save_blueprint(self, bp: Blueprint) -> None:
        """Store a new blueprint with its current points.

        Args:
            bp: The blueprint to store.

        Raises:
            BlueprintPersistenceError: If (author, name) is already stored.
        """

    @abstractmethod
    def get_blueprint(self, author: str, name: str) -> Blueprint:
        """Fetch one blueprint with its full, unfiltered points.

        Raises:
            BlueprintNotFoundError: If no blueprint matches.
        """

    @abstractmethod
    def get_blueprints_by_author(self, author: str) -> set[Blueprint]:
        """Fetch every blueprint by an author.

        An author with no blueprints is indistinguishable from an unknown
        author: both raise instead of returning an empty set.

        Raises:
            BlueprintNotFoundError: If the author has no blueprints.
        """

    @abstractmethod
    def get_all_blueprints(self) -> set[Blueprint]:
        """Fetch every stored blueprint. Returns an empty set when there are none."""

    @abstractmethod
    def add_point(self, author: str, name: str, x: int, y: int) -> None:
        """Append a point to a stored blueprint.

        Raises:
            BlueprintNotFoundError: If no blueprint matches.
        """

    def close(self) -> None:
        """Release any resources held by the backend."""
