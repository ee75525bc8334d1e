"""
Blueprints - Architectural Blueprint Service
==============================================

Stores named blueprints (ordered sequences of 2D points keyed by author
and name) and serves them through a read-time filter.

Layers (top to bottom):
    1. API          - ApiResponse envelope, BlueprintsAPIController
    2. Services     - BlueprintsServices: filtered reads, raw writes
    3. Filters      - identity, redundancy, undersampling
    4. Persistence  - in-memory and SQLite backends
    5. Core         - models, enums, exceptions, configuration

Quick Start:
    >>> from blueprints import BlueprintsApp
    >>> with BlueprintsApp() as app:
    ...     app.services.get_blueprint("john", "house")
"""

__version__ = "0.1.0"

from blueprints.facade import BlueprintsApp

__all__ = ["BlueprintsApp", "__version__"]
