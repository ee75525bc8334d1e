"""
Shared Test Fixtures for Blueprints
=====================================

Fixtures are organized by layer:

    1. Environment isolation
    2. Persistence fixtures (in-memory, SQLite)
    3. Services and controller fixtures
"""

from __future__ import annotations

import os

import pytest

from blueprints.api.controller import BlueprintsAPIController
from blueprints.core.enums import FilterType
from blueprints.persistence.in_memory import InMemoryBlueprintPersistence
from blueprints.persistence.relational import SQLiteBlueprintPersistence
from blueprints.services.blueprints_services import BlueprintsServices


# =============================================================================
# Environment
# =============================================================================

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep BLUEPRINTS_* variables from the host out of every test."""
    for key in list(os.environ):
        if key.upper().startswith("BLUEPRINTS_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Persistence
# =============================================================================

@pytest.fixture
def memory_store():
    """InMemoryBlueprintPersistence with the starter dataset."""
    return InMemoryBlueprintPersistence()


@pytest.fixture
def empty_memory_store():
    """InMemoryBlueprintPersistence with nothing in it."""
    return InMemoryBlueprintPersistence(seed=False)


@pytest.fixture
def sqlite_store(tmp_path):
    """SQLiteBlueprintPersistence on a fresh temporary database file."""
    store = SQLiteBlueprintPersistence(tmp_path / "blueprints.db")
    yield store
    store.close()


# =============================================================================
# Services and Controller
# =============================================================================

@pytest.fixture
def services(memory_store):
    """BlueprintsServices over the seeded in-memory store with IdentityFilter."""
    return BlueprintsServices(memory_store, FilterType.IDENTITY)


@pytest.fixture
def controller(services):
    """BlueprintsAPIController over the identity-filtered services."""
    return BlueprintsAPIController(services)
