"""
Tests for blueprints.persistence.in_memory
============================================

What's Being Tested:
    - Starter dataset (john/house, john/garage, jane/garden)
    - save / get / get by author / get all / add point
    - Not-found and already-exists errors
    - Snapshots: callers can't change stored data through returned objects
    - Concurrent writers
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from blueprints.core.exceptions import BlueprintNotFoundError, BlueprintPersistenceError
from blueprints.core.models import Blueprint, Point
from blueprints.persistence import BlueprintPersistence, InMemoryBlueprintPersistence
from blueprints.persistence.in_memory import sample_blueprints


def _pts(*coords):
    return [Point(x=x, y=y) for x, y in coords]


# =============================================================================
# Tests: Starter Dataset
# =============================================================================
class TestSeeding:
    """Tests for the pre-loaded starter dataset."""

    def test_is_a_blueprint_persistence(self, memory_store) -> None:
        """InMemoryBlueprintPersistence implements the persistence interface."""
        assert isinstance(memory_store, BlueprintPersistence)

    def test_seeded_identities(self, memory_store) -> None:
        """A seeded store holds john/house, john/garage and jane/garden."""
        identities = {bp.identity for bp in memory_store.get_all_blueprints()}
        assert identities == {("john", "house"), ("john", "garage"), ("jane", "garden")}

    def test_seeded_points_match_sample(self, memory_store) -> None:
        """Seeded points come back exactly as sample_blueprints() defines them."""
        for expected in sample_blueprints():
            stored = memory_store.get_blueprint(expected.author, expected.name)
            assert stored.points == expected.points

    def test_unseeded_is_empty(self, empty_memory_store) -> None:
        """seed=False should start with nothing."""
        assert empty_memory_store.get_all_blueprints() == set()
        assert empty_memory_store.count() == 0

    def test_initial_blueprints(self) -> None:
        """Blueprints passed as initial are loaded at construction."""
        store = InMemoryBlueprintPersistence(
            seed=False, initial=[Blueprint.create("ann", "loft")]
        )
        assert store.get_blueprint("ann", "loft").name == "loft"


# =============================================================================
# Tests: Reads
# =============================================================================
class TestReads:
    """Tests for get_blueprint, get_blueprints_by_author, get_all_blueprints."""

    def test_get_blueprint(self, memory_store) -> None:
        bp = memory_store.get_blueprint("john", "house")
        assert bp.author == "john"
        assert bp.name == "house"

    def test_get_blueprint_not_found(self, memory_store) -> None:
        """Unknown (author, name) raises with a readable message."""
        with pytest.raises(BlueprintNotFoundError) as exc_info:
            memory_store.get_blueprint("noExiste", "nada")
        assert exc_info.value.message == "Blueprint not found: noExiste/nada"

    def test_lookup_is_case_sensitive(self, memory_store) -> None:
        """"John" does not find john's blueprint."""
        with pytest.raises(BlueprintNotFoundError):
            memory_store.get_blueprint("John", "house")

    def test_get_by_author(self, memory_store) -> None:
        """Only the given author's blueprints are returned."""
        found = memory_store.get_blueprints_by_author("john")
        assert {bp.name for bp in found} == {"house", "garage"}

    def test_get_by_unknown_author_raises(self, memory_store) -> None:
        """An author with no blueprints is reported as not found."""
        with pytest.raises(BlueprintNotFoundError) as exc_info:
            memory_store.get_blueprints_by_author("unknown")
        assert exc_info.value.author == "unknown"
        assert exc_info.value.name is None

    def test_get_all_on_empty_store(self, empty_memory_store) -> None:
        assert empty_memory_store.get_all_blueprints() == set()


# =============================================================================
# Tests: Writes
# =============================================================================
class TestWrites:
    """Tests for save_blueprint and add_point."""

    def test_save_and_get(self, memory_store) -> None:
        """A saved blueprint reads back with its points in order."""
        memory_store.save_blueprint(
            Blueprint.create("nuevoAutor", "nuevoPlano", _pts((0, 0), (5, 5)))
        )
        retrieved = memory_store.get_blueprint("nuevoAutor", "nuevoPlano")
        assert retrieved.author == "nuevoAutor"
        assert retrieved.points == tuple(_pts((0, 0), (5, 5)))

    def test_duplicate_save_fails(self, memory_store) -> None:
        """Saving an existing (author, name) again raises."""
        with pytest.raises(BlueprintPersistenceError) as exc_info:
            memory_store.save_blueprint(Blueprint.create("john", "house"))
        assert exc_info.value.message == "Blueprint already exists: john:house"

    def test_duplicate_save_keeps_original_points(self, memory_store) -> None:
        """A rejected duplicate must not overwrite the stored points."""
        before = memory_store.get_blueprint("john", "house").points
        with pytest.raises(BlueprintPersistenceError):
            memory_store.save_blueprint(Blueprint.create("john", "house", _pts((1, 1))))
        assert memory_store.get_blueprint("john", "house").points == before

    def test_add_point_appends_one(self, memory_store) -> None:
        """add_point grows the sequence by exactly one point at the end."""
        before = memory_store.get_blueprint("jane", "garden").points
        memory_store.add_point("jane", "garden", 99, -1)
        after = memory_store.get_blueprint("jane", "garden").points
        assert len(after) == len(before) + 1
        assert after[-1] == Point(x=99, y=-1)
        assert after[:-1] == before

    def test_add_point_unknown_blueprint(self, memory_store) -> None:
        with pytest.raises(BlueprintNotFoundError):
            memory_store.add_point("nobody", "nothing", 1, 1)

    def test_add_point_out_of_range_rejected(self, memory_store) -> None:
        """A coordinate outside signed 64-bit is refused and nothing is stored."""
        before = memory_store.get_blueprint("jane", "garden").points
        with pytest.raises(ValidationError):
            memory_store.add_point("jane", "garden", 2**70, 0)
        assert memory_store.get_blueprint("jane", "garden").points == before


# =============================================================================
# Tests: Snapshots
# =============================================================================
class TestSnapshots:
    """Stored blueprints never escape the store."""

    def test_saved_blueprint_not_aliased(self, empty_memory_store) -> None:
        """Appending to the caller's object after save leaves storage alone."""
        bp = Blueprint.create("a", "b")
        empty_memory_store.save_blueprint(bp)
        bp.add_point(Point(x=1, y=1))
        assert empty_memory_store.get_blueprint("a", "b").points == ()

    def test_returned_blueprint_not_aliased(self, memory_store) -> None:
        """Appending to a returned blueprint leaves storage alone."""
        bp = memory_store.get_blueprint("john", "house")
        size = len(bp.points)
        bp.add_point(Point(x=1, y=1))
        assert len(memory_store.get_blueprint("john", "house").points) == size


# =============================================================================
# Tests: Concurrency
# =============================================================================
class TestConcurrency:
    """Concurrent callers must not lose writes."""

    def test_concurrent_add_point(self, empty_memory_store) -> None:
        """200 appends from 8 threads all land."""
        empty_memory_store.save_blueprint(Blueprint.create("a", "b"))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda i: empty_memory_store.add_point("a", "b", i, i), range(200)))

        points = empty_memory_store.get_blueprint("a", "b").points
        assert len(points) == 200
        assert {p.x for p in points} == set(range(200))

    def test_concurrent_duplicate_saves_one_wins(self, empty_memory_store) -> None:
        """Racing saves of one identity: exactly one succeeds."""
        def attempt(_):
            try:
                empty_memory_store.save_blueprint(Blueprint.create("a", "race"))
                return True
            except BlueprintPersistenceError:
                return False

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(attempt, range(50)))

        assert results.count(True) == 1
