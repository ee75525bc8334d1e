"""
blueprints.core.models - Core Data Models
===========================================

This module defines the Pydantic models that flow through every layer of
the service.

Model Hierarchy:
    Point               → one (x, y) integer coordinate, immutable value
    Blueprint           → (author, name) identity + ordered points
    NewBlueprintRequest → wire payload used to create a blueprint

Blueprint Identity:
    Two blueprints are equal when author and name match, whatever their
    points are. Hashing follows the same rule. A set of blueprints therefore
    keeps only the first blueprint it sees for a given (author, name), even
    if a later one carries different points. Persistence relies on this to
    key blueprints by identity.

Point Ownership:
    A blueprint's points are held in a tuple. Callers can read them but never
    mutate them in place; the only way the sequence changes is
    Blueprint.add_point(), which appends one point at the end.

Wire Format:
    model_dump(mode="json") produces exactly what the API exchanges:

        {"author": "john", "name": "house", "points": [{"x": 0, "y": 0}]}
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Signed 64-bit, the range a relational INTEGER column can hold
COORDINATE_MIN = -(2**63)
COORDINATE_MAX = 2**63 - 1


# =============================================================================
# Point
# =============================================================================
class Point(BaseModel):
    """An immutable 2D integer coordinate.

    Frozen, so equality and hashing are by value. Coordinates are limited to
    the signed 64-bit range so every store accepts the same points.

    Example:
        >>> Point(x=1, y=2) == Point(x=1, y=2)
        True
    """

    model_config = ConfigDict(frozen=True)

    x: int = Field(
        ge=COORDINATE_MIN,
        le=COORDINATE_MAX,
        description="Horizontal coordinate",
    )
    y: int = Field(
        ge=COORDINATE_MIN,
        le=COORDINATE_MAX,
        description="Vertical coordinate",
    )


# =============================================================================
# Blueprint
# =============================================================================
class Blueprint(BaseModel):
    """A named, author-owned, ordered sequence of points.

    The identity fields are frozen after construction. Points passed in are
    copied into a tuple, so later changes to the caller's list never leak
    into the blueprint.

    Attributes:
        author: Who drew the blueprint. Part of the identity.
        name: The blueprint name, unique per author. Part of the identity.
        points: Read-only, insertion-ordered points.

    Example:
        >>> bp = Blueprint.create("john", "house", [Point(x=0, y=0)])
        >>> bp.add_point(Point(x=10, y=0))
        >>> len(bp.points)
        2
    """

    author: str = Field(
        min_length=1,
        frozen=True,
        description="Author of the blueprint",
    )
    name: str = Field(
        min_length=1,
        frozen=True,
        description="Name of the blueprint (unique per author)",
    )
    points: tuple[Point, ...] = Field(
        default=(),
        frozen=True,
        description="Ordered points defining the blueprint",
    )

    @classmethod
    def create(
        cls,
        author: str,
        name: str,
        points: Optional[Iterable[Point]] = None,
    ) -> Blueprint:
        """Build a blueprint, defaulting to no points."""
        return cls(author=author, name=name, points=tuple(points or ()))

    def add_point(self, point: Point) -> None:
        """Append a point to the end of the sequence."""
        # points is frozen against assignment; this is the one place it changes
        self.__dict__["points"] = (*self.points, point)

    @property
    def identity(self) -> tuple[str, str]:
        """The (author, name) key this blueprint is stored under."""
        return (self.author, self.name)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Blueprint):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)


# =============================================================================
# New Blueprint Request
# =============================================================================
class NewBlueprintRequest(BaseModel):
    """Request body for creating a blueprint.

    Stricter than Blueprint itself: author and name must contain something
    other than whitespace.
    """

    author: str = Field(description="Author of the blueprint", examples=["john_doe"])
    name: str = Field(description="Name of the blueprint", examples=["modern_house"])
    points: Optional[list[Point]] = Field(
        default=None,
        description="List of coordinate points defining the blueprint",
    )

    @field_validator("author", "name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_blueprint(self) -> Blueprint:
        return Blueprint.create(self.author, self.name, self.points)
