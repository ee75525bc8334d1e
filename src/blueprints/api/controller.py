"""
blueprints.api.controller - Blueprints API Controller
=======================================================

Transport-agnostic request handling. A web framework (or a test) calls
these methods with path parameters and decoded JSON bodies and gets back an
ApiResponse carrying the status code to send.

Routes the controller is meant to sit behind:

    GET  /blueprints                        → get_all()
    GET  /blueprints/{author}               → get_by_author()
    GET  /blueprints/{author}/{bpname}      → get_by_author_and_name()
    POST /blueprints                        → add()
    PUT  /blueprints/{author}/{bpname}/points → add_point()

Error Mapping:
    pydantic ValidationError    → 400
    BlueprintPersistenceError   → 403
    BlueprintNotFoundError      → 404

Anything else is a server fault and propagates to the transport.
"""

from __future__ import annotations

from typing import Any, Iterable, Union

import structlog
from pydantic import ValidationError

from blueprints.api.responses import ApiResponse
from blueprints.core.exceptions import BlueprintNotFoundError, BlueprintPersistenceError
from blueprints.core.models import Blueprint, NewBlueprintRequest, Point
from blueprints.services.blueprints_services import BlueprintsServices

logger = structlog.get_logger()


def _serialize(blueprints: Iterable[Blueprint]) -> list[dict[str, Any]]:
    ordered = sorted(blueprints, key=lambda bp: bp.identity)
    return [bp.model_dump(mode="json") for bp in ordered]


def _describe(error: ValidationError) -> str:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in issue['loc']) or 'body'}: {issue['msg']}"
        for issue in error.errors()
    )
    return f"Validation failed: {problems}"


class BlueprintsAPIController:
    """Maps API calls onto BlueprintsServices.

    Example:
        >>> controller = BlueprintsAPIController(services)
        >>> controller.get_by_author("nobody").code
        404
    """

    def __init__(self, services: BlueprintsServices) -> None:
        self._services = services
        self._logger = logger.bind(component="blueprints_api_controller")

    def get_all(self) -> ApiResponse:
        return ApiResponse.ok(_serialize(self._services.get_all_blueprints()))

    def get_by_author(self, author: str) -> ApiResponse:
        try:
            found = self._services.get_blueprints_by_author(author)
        except BlueprintNotFoundError as e:
            return ApiResponse.not_found(e.message)
        return ApiResponse.ok(_serialize(found))

    def get_by_author_and_name(self, author: str, bpname: str) -> ApiResponse:
        try:
            bp = self._services.get_blueprint(author, bpname)
        except BlueprintNotFoundError as e:
            return ApiResponse.not_found(e.message)
        return ApiResponse.ok(bp.model_dump(mode="json"))

    def add(self, payload: Union[NewBlueprintRequest, dict[str, Any]]) -> ApiResponse:
        """Create a blueprint from a request body.

        Returns 201 on success, 400 when the body is invalid and 403 when
        the author already has a blueprint with that name.
        """
        try:
            request = NewBlueprintRequest.model_validate(payload)
        except ValidationError as e:
            self._logger.info("invalid_blueprint_request", errors=e.error_count())
            return ApiResponse.bad_request(_describe(e))

        try:
            self._services.add_new_blueprint(request.to_blueprint())
        except BlueprintPersistenceError as e:
            return ApiResponse.forbidden(e.message)
        return ApiResponse.created()

    def add_point(
        self,
        author: str,
        bpname: str,
        payload: Union[Point, dict[str, Any]],
    ) -> ApiResponse:
        """Append a point. Returns 202, 400 for a bad point or 404."""
        try:
            point = Point.model_validate(payload)
        except ValidationError as e:
            self._logger.info("invalid_point", errors=e.error_count())
            return ApiResponse.bad_request(_describe(e))

        try:
            self._services.add_point(author, bpname, point.x, point.y)
        except BlueprintNotFoundError as e:
            return ApiResponse.not_found(e.message)
        return ApiResponse.accepted()
