"""
blueprints.services - Services Layer
======================================

    - BlueprintsServices: applies the active filter to reads and passes
      writes straight through to persistence.
"""

from blueprints.services.blueprints_services import BlueprintsServices

__all__ = ["BlueprintsServices"]
