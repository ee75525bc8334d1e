"""
blueprints.persistence.in_memory - In-Memory Blueprint Store
==============================================================

Dict-backed implementation for development and testing. Starts out with a
small starter dataset:

    john/house    a closed square outline
    john/garage   a rectangle with a repeated corner
    jane/garden   a path with repeated points

Key Data Structures:
    _blueprints: dict[(author, name), Blueprint]

Every read and write takes the same lock, so a reader never sees a
blueprint half-way through a write. Blueprints are copied on the way in and
on the way out; the stored objects never leave this class.
"""

from __future__ import annotations

import threading
from typing import Optional

import structlog

from blueprints.core.exceptions import BlueprintNotFoundError, BlueprintPersistenceError
from blueprints.core.models import Blueprint, Point
from blueprints.persistence.base import BlueprintPersistence

logger = structlog.get_logger()


def _pts(*coords: tuple[int, int]) -> list[Point]:
    return [Point(x=x, y=y) for x, y in coords]


def sample_blueprints() -> list[Blueprint]:
    """The starter dataset loaded into a fresh in-memory store."""
    return [
        Blueprint.create(
            "john", "house", _pts((0, 0), (10, 0), (10, 10), (0, 10), (0, 0))
        ),
        Blueprint.create(
            "john", "garage", _pts((5, 5), (5, 5), (15, 5), (15, 15), (5, 15))
        ),
        Blueprint.create(
            "jane", "garden", _pts((2, 2), (3, 4), (3, 4), (3, 4), (5, 6), (8, 8))
        ),
    ]


class InMemoryBlueprintPersistence(BlueprintPersistence):
    """In-memory blueprint store.

    Data is lost when the process ends. Safe for concurrent callers within
    one process.

    Args:
        seed: Load the starter dataset (john/house, john/garage, jane/garden).
        initial: Extra blueprints to load after the starter dataset.

    Example:
        >>> store = InMemoryBlueprintPersistence()
        >>> store.get_blueprint("john", "house").name
        'house'
    """

    def __init__(
        self,
        seed: bool = True,
        initial: Optional[list[Blueprint]] = None,
    ) -> None:
        self._blueprints: dict[tuple[str, str], Blueprint] = {}
        self._lock = threading.Lock()
        self._logger = logger.bind(component="in_memory_blueprint_persistence")

        for bp in (sample_blueprints() if seed else []) + list(initial or []):
            self.save_blueprint(bp)

    def save_blueprint(self, bp: Blueprint) -> None:
        with self._lock:
            if bp.identity in self._blueprints:
                raise BlueprintPersistenceError(
                    message=f"Blueprint already exists: {bp.author}:{bp.name}",
                    author=bp.author,
                    name=bp.name,
                )
            self._blueprints[bp.identity] = bp.model_copy()

        self._logger.debug(
            "blueprint_saved",
            author=bp.author,
            name=bp.name,
            points=len(bp.points),
        )

    def get_blueprint(self, author: str, name: str) -> Blueprint:
        with self._lock:
            stored = self._blueprints.get((author, name))
            if stored is None:
                raise BlueprintNotFoundError(
                    message=f"Blueprint not found: {author}/{name}",
                    author=author,
                    name=name,
                )
            return stored.model_copy()

    def get_blueprints_by_author(self, author: str) -> set[Blueprint]:
        with self._lock:
            found = {
                bp.model_copy()
                for (bp_author, _), bp in self._blueprints.items()
                if bp_author == author
            }
        if not found:
            raise BlueprintNotFoundError(
                message=f"No blueprints for author: {author}",
                author=author,
            )
        return found

    def get_all_blueprints(self) -> set[Blueprint]:
        with self._lock:
            return {bp.model_copy() for bp in self._blueprints.values()}

    def add_point(self, author: str, name: str, x: int, y: int) -> None:
        point = Point(x=x, y=y)
        with self._lock:
            stored = self._blueprints.get((author, name))
            if stored is None:
                raise BlueprintNotFoundError(
                    message=f"Blueprint not found: {author}/{name}",
                    author=author,
                    name=name,
                )
            stored.add_point(point)
            size = len(stored.points)

        self._logger.debug("point_added", author=author, name=name, x=x, y=y, points=size)

    def count(self) -> int:
        """Number of stored blueprints."""
        with self._lock:
            return len(self._blueprints)
