"""
blueprints.persistence.relational - SQLite Blueprint Store
============================================================

Stores blueprints in two relational tables:

    blueprints                         blueprint_points
    ┌────────────────────────┐         ┌─────────────────────────────┐
    │ id      INTEGER PK     │ 1     N │ blueprint_id  FK → id       │
    │ author  TEXT NOT NULL  │ ──────→ │ point_order   INTEGER       │
    │ name    TEXT NOT NULL  │         │ x, y          INTEGER       │
    │ UNIQUE (author, name)  │         │ PK (blueprint_id, order)    │
    └────────────────────────┘         └─────────────────────────────┘

point_order preserves insertion order, so a blueprint reads back with its
points in exactly the order they were written.

Transactions:
    Writes run inside ``BEGIN IMMEDIATE`` ... ``COMMIT``. The unique
    constraint on (author, name) is what rejects duplicates, so there is no
    separate existence check to race against. add_point looks the blueprint
    up and appends within the same transaction.

    One connection is shared by the store and its use is serialized with a
    lock, since a sqlite3 connection must not be used by two threads at the
    same time.

Connectivity and other sqlite3 errors propagate unchanged.
"""

from __future__ import annotations

import sqlite3
import threading
from contextlib import contextmanager
from itertools import groupby
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

import structlog

from blueprints.core.exceptions import BlueprintNotFoundError, BlueprintPersistenceError
from blueprints.core.models import Blueprint, Point
from blueprints.persistence.base import BlueprintPersistence

logger = structlog.get_logger()

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS blueprints (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    author TEXT NOT NULL,
    name TEXT NOT NULL,
    UNIQUE (author, name)
);

CREATE INDEX IF NOT EXISTS idx_blueprints_author ON blueprints(author);

CREATE TABLE IF NOT EXISTS blueprint_points (
    blueprint_id INTEGER NOT NULL,
    point_order INTEGER NOT NULL,
    x INTEGER NOT NULL,
    y INTEGER NOT NULL,
    PRIMARY KEY (blueprint_id, point_order),

    FOREIGN KEY (blueprint_id) REFERENCES blueprints(id) ON DELETE CASCADE
);
"""

_SELECT_WITH_POINTS = """
SELECT b.id AS id, b.author AS author, b.name AS name, p.x AS x, p.y AS y
FROM blueprints b
LEFT JOIN blueprint_points p ON p.blueprint_id = b.id
{where}
ORDER BY b.id, p.point_order
"""


class SQLiteBlueprintPersistence(BlueprintPersistence):
    """Relational blueprint store backed by SQLite.

    Args:
        database_path: Path to the SQLite file, created if missing.
            ":memory:" gives a private in-memory database.
        timeout: Seconds to wait on a locked database before failing.

    Example:
        >>> store = SQLiteBlueprintPersistence("blueprints.db")
        >>> store.save_blueprint(Blueprint.create("john", "shed"))
        >>> store.close()
    """

    def __init__(
        self,
        database_path: Union[str, Path] = "blueprints.db",
        timeout: float = 5.0,
    ) -> None:
        self.database_path = str(database_path)
        if self.database_path != ":memory:":
            Path(self.database_path).parent.mkdir(parents=True, exist_ok=True)

        # isolation_level=None: transactions are opened explicitly below
        self._conn = sqlite3.connect(
            self.database_path,
            timeout=timeout,
            isolation_level=None,
            check_same_thread=False,
        )
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA foreign_keys = ON")
        self._lock = threading.RLock()
        self._logger = logger.bind(
            component="sqlite_blueprint_persistence",
            database=self.database_path,
        )

        with self._transaction() as conn:
            self._init_schema(conn)

        self._logger.info("sqlite_persistence_ready")

    # -------------------------------------------------------------------------
    # Connection handling
    # -------------------------------------------------------------------------
    @staticmethod
    def _init_schema(conn: sqlite3.Connection) -> None:
        for statement in SCHEMA_SQL.split(";"):
            if statement.strip():
                conn.execute(statement)

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """Run the enclosed statements as one write transaction.

        Commits on success, rolls back on any exception and re-raises it.
        """
        with self._lock:
            self._conn.execute("BEGIN IMMEDIATE")
            try:
                yield self._conn
            except Exception:
                self._conn.execute("ROLLBACK")
                raise
            self._conn.execute("COMMIT")

    def _query(self, where: str = "", params: tuple = ()) -> list[Blueprint]:
        with self._lock:
            rows = self._conn.execute(
                _SELECT_WITH_POINTS.format(where=where), params
            ).fetchall()
        return list(self._assemble(rows))

    @staticmethod
    def _assemble(rows: Iterable[sqlite3.Row]) -> Iterator[Blueprint]:
        for _, grouped in groupby(rows, key=lambda row: row["id"]):
            group = list(grouped)
            points = [
                Point(x=row["x"], y=row["y"]) for row in group if row["x"] is not None
            ]
            yield Blueprint.create(group[0]["author"], group[0]["name"], points)

    @staticmethod
    def _find_id(conn: sqlite3.Connection, author: str, name: str) -> Optional[int]:
        row = conn.execute(
            "SELECT id FROM blueprints WHERE author = ? AND name = ?",
            (author, name),
        ).fetchone()
        return row["id"] if row else None

    def close(self) -> None:
        with self._lock:
            self._conn.close()
        self._logger.info("sqlite_persistence_closed")

    # -------------------------------------------------------------------------
    # BlueprintPersistence
    # -------------------------------------------------------------------------
    def save_blueprint(self, bp: Blueprint) -> None:
        try:
            with self._transaction() as conn:
                cursor = conn.execute(
                    "INSERT INTO blueprints (author, name) VALUES (?, ?)",
                    (bp.author, bp.name),
                )
                conn.executemany(
                    "INSERT INTO blueprint_points (blueprint_id, point_order, x, y) "
                    "VALUES (?, ?, ?, ?)",
                    [
                        (cursor.lastrowid, order, point.x, point.y)
                        for order, point in enumerate(bp.points)
                    ],
                )
        except sqlite3.IntegrityError as e:
            raise BlueprintPersistenceError(
                message=f"Blueprint already exists: {bp.author}:{bp.name}",
                author=bp.author,
                name=bp.name,
            ) from e

        self._logger.debug(
            "blueprint_saved",
            author=bp.author,
            name=bp.name,
            points=len(bp.points),
        )

    def get_blueprint(self, author: str, name: str) -> Blueprint:
        found = self._query("WHERE b.author = ? AND b.name = ?", (author, name))
        if not found:
            raise BlueprintNotFoundError(
                message=f"Blueprint not found: {author}/{name}",
                author=author,
                name=name,
            )
        return found[0]

    def get_blueprints_by_author(self, author: str) -> set[Blueprint]:
        found = self._query("WHERE b.author = ?", (author,))
        if not found:
            raise BlueprintNotFoundError(
                message=f"No blueprints for author: {author}",
                author=author,
            )
        return set(found)

    def get_all_blueprints(self) -> set[Blueprint]:
        return set(self._query())

    def add_point(self, author: str, name: str, x: int, y: int) -> None:
        point = Point(x=x, y=y)
        with self._transaction() as conn:
            blueprint_id = self._find_id(conn, author, name)
            if blueprint_id is None:
                raise BlueprintNotFoundError(
                    message=f"Blueprint not found: {author}/{name}",
                    author=author,
                    name=name,
                )
            conn.execute(
                "INSERT INTO blueprint_points (blueprint_id, point_order, x, y) "
                "SELECT ?, COALESCE(MAX(point_order) + 1, 0), ?, ? "
                "FROM blueprint_points WHERE blueprint_id = ?",
                (blueprint_id, point.x, point.y, blueprint_id),
            )

        self._logger.debug("point_added", author=author, name=name, x=x, y=y)
