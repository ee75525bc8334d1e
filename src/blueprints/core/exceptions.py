"""
blueprints.core.exceptions - Custom Exception Hierarchy
=========================================================

Exception Hierarchy:
    BlueprintsError (base)
        ├── ConfigurationError          - Invalid config or unknown selections
        ├── BlueprintNotFoundError      - Lookup by (author, name) or author found nothing
        └── BlueprintPersistenceError   - Creation collided with an existing (author, name)

Propagation:
    Persistence raises these errors, the services layer lets them pass
    through untouched, and the API controller maps them to status codes:

        BlueprintNotFoundError    → 404
        BlueprintPersistenceError → 403

    Nothing in between retries or recovers. A lookup that found nothing will
    find nothing again, and a name collision needs a different name.

Usage:
    >>> from blueprints.core.exceptions import BlueprintNotFoundError
    >>> raise BlueprintNotFoundError(
    ...     message="Blueprint not found: john/shed",
    ...     author="john",
    ...     name="shed",
    ... )
"""

from __future__ import annotations

from typing import Any, Optional


# =============================================================================
# Base Exception
# =============================================================================
class BlueprintsError(Exception):
    """Base exception for all blueprint service errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code, UPPER_SNAKE_CASE.
        details: Arbitrary dict with additional debugging context.

    Example:
        >>> try:
        ...     services.get_blueprint("john", "shed")
        ... except BlueprintsError as e:
        ...     print(f"[{e.error_code}] {e.message}")
    """

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)

        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize this exception to a dictionary.

        Returns:
            Dictionary with error_type, message, error_code, and details.
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


# =============================================================================
# Configuration Error
# =============================================================================
# Raised during startup. The process should fail fast instead of running
# with a half-wired services layer.
# =============================================================================
class ConfigurationError(BlueprintsError):
    """Raised when configuration is invalid or names an unknown component.

    Common Causes:
        - Malformed blueprints.yaml (not a mapping)
        - A filter or persistence backend name with no implementation

    Example:
        >>> raise ConfigurationError(
        ...     message="Unknown filter: 'smoothing'",
        ...     error_code="UNKNOWN_FILTER",
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: str = "CONFIG_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


# =============================================================================
# Not Found
# =============================================================================
class BlueprintNotFoundError(BlueprintsError):
    """Raised when no stored blueprint matches a lookup.

    Covers both single lookups by (author, name) and lookups by author
    alone. An author with zero blueprints is reported the same way as an
    unknown author.

    Attributes:
        author: The author that was looked up.
        name: The blueprint name, or None for author-only lookups.
    """

    def __init__(
        self,
        message: str,
        author: str,
        name: Optional[str] = None,
        error_code: str = "BLUEPRINT_NOT_FOUND",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        enriched_details = details or {}
        enriched_details["author"] = author
        if name is not None:
            enriched_details["name"] = name

        super().__init__(message=message, error_code=error_code, details=enriched_details)

        self.author = author
        self.name = name


# =============================================================================
# Persistence Conflict
# =============================================================================
class BlueprintPersistenceError(BlueprintsError):
    """Raised when a blueprint with the same (author, name) is already stored.

    Attributes:
        author: Author of the rejected blueprint.
        name: Name of the rejected blueprint.
    """

    def __init__(
        self,
        message: str,
        author: str,
        name: str,
        error_code: str = "BLUEPRINT_ALREADY_EXISTS",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        enriched_details = details or {}
        enriched_details["author"] = author
        enriched_details["name"] = name

        super().__init__(message=message, error_code=error_code, details=enriched_details)

        self.author = author
        self.name = name
