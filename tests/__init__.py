"""
Blueprints Test Suite
=====================

Test organization mirrors the source code structure:
    tests/
    ├── test_core/          → blueprints.core (models, config, exceptions, logging)
    ├── test_filters/       → blueprints.filters
    ├── test_persistence/   → blueprints.persistence (in-memory, SQLite, factory)
    ├── test_services/      → blueprints.services
    ├── test_api/           → blueprints.api (controller, response envelope)
    ├── test_integration/   → End-to-end tests through the facade
    └── conftest.py         → Shared pytest fixtures

Running Tests:
    pytest                           # Run all tests
    pytest tests/test_filters/       # Run only filter tests
"""
