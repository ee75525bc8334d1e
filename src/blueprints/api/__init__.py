"""
blueprints.api - API Boundary
===============================

    - ApiResponse:              uniform {code, message, data} envelope
    - BlueprintsAPIController:  validates requests, calls the services layer,
                                maps errors to status codes
"""

from blueprints.api.controller import BlueprintsAPIController
from blueprints.api.responses import ApiResponse

__all__ = ["ApiResponse", "BlueprintsAPIController"]
