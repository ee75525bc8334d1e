"""
blueprints.api.responses - Uniform Response Envelope
======================================================

Every controller call returns an ApiResponse, whatever the outcome, so a
transport only has to copy ``code`` to its status line and serialize the
rest:

    {"code": 404, "message": "Blueprint not found: john/shed", "data": null}
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Uniform API response.

    Attributes:
        code: HTTP status code (200, 201, 202, 400, 403, 404, 500).
        message: Human-readable outcome.
        data: Response payload, None for errors and empty acknowledgements.
    """

    code: int = Field(description="HTTP status code", examples=[200])
    message: str = Field(description="Outcome description", examples=["OK"])
    data: Any = Field(default=None, description="Response payload")

    @property
    def is_success(self) -> bool:
        return 200 <= self.code < 300

    @classmethod
    def ok(cls, data: Any, message: str = "OK") -> ApiResponse:
        return cls(code=200, message=message, data=data)

    @classmethod
    def created(cls, data: Any = None, message: str = "Blueprint created") -> ApiResponse:
        return cls(code=201, message=message, data=data)

    @classmethod
    def accepted(cls, data: Any = None, message: str = "Update accepted") -> ApiResponse:
        return cls(code=202, message=message, data=data)

    @classmethod
    def bad_request(cls, message: str) -> ApiResponse:
        return cls(code=400, message=message)

    @classmethod
    def forbidden(cls, message: str) -> ApiResponse:
        return cls(code=403, message=message)

    @classmethod
    def not_found(cls, message: str) -> ApiResponse:
        return cls(code=404, message=message)

    @classmethod
    def error(cls, message: str) -> ApiResponse:
        return cls(code=500, message=message)
