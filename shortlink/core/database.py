"""Database module for the shortlink service.

This module handles the SQLite link store. Rows are keyed by an
auto-assigned integer id; the short code column starts out NULL and is
filled in by a second write once the id is known.
"""

import sqlite3
import logging
from typing import Optional

from .exceptions import StorageError

logger = logging.getLogger(__name__)


class Database:
    """Database class for managing SQLite connections and link records."""

    def __init__(self, db_path: str):
        """Initialize database connection.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for in-memory database.
        """
        self.db_path = db_path
        self._connection: Optional[sqlite3.Connection] = None

    def _get_connection(self) -> sqlite3.Connection:
        """Create or return the database connection.

        For in-memory databases (":memory:"), allows access from multiple threads.

        Returns:
            SQLite connection.
        """
        if self._connection is None:
            try:
                if self.db_path == ":memory:":
                    self._connection = sqlite3.connect(
                        self.db_path,
                        check_same_thread=False
                    )
                else:
                    self._connection = sqlite3.connect(self.db_path)
            except sqlite3.Error as e:
                logger.error(f"Could not open database {self.db_path}: {e}")
                raise StorageError("Could not open the link store") from e
            self._connection.row_factory = sqlite3.Row
        return self._connection

    def close(self) -> None:
        """Close database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def init_db(self) -> None:
        """Initialize database tables."""
        # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again.
        create_table_sql = """
        CREATE TABLE IF NOT EXISTS links (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            long_url TEXT NOT NULL,
            title TEXT,
            short_url TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
        """
        conn = self._get_connection()
        try:
            conn.execute(create_table_sql)
            conn.commit()
            logger.info("Database initialized successfully")
        except sqlite3.Error as e:
            logger.error(f"Database initialization failed: {e}")
            raise StorageError("Could not initialize the link store") from e

    def execute(
        self, query: str, params: tuple = (), fetch: bool = False
    ) -> Optional[list[dict]]:
        """Execute a SQL query.

        Args:
            query: SQL query string.
            params: Query parameters.
            fetch: Whether to fetch results.

        Returns:
            Query results if fetch=True, None otherwise.

        Raises:
            StorageError: If SQLite rejects the query.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(query, params)
            if fetch:
                results = cursor.fetchall()
                return [dict(row) for row in results]
            conn.commit()
            return None
        except sqlite3.Error as e:
            logger.error(f"Query execution failed: {e}")
            raise StorageError("Link store query failed") from e

    def insert_link(self, long_url: str, title: Optional[str] = None) -> int:
        """Insert a new link with no short code yet.

        Args:
            long_url: The long URL to store.
            title: Optional descriptive title.

        Returns:
            The id assigned to the new row.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO links (long_url, title) VALUES (?, ?)",
                (long_url, title),
            )
            conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Insert failed: {e}")
            raise StorageError("Could not save the link") from e
        link_id = cursor.lastrowid
        if not link_id:
            raise StorageError("Link store did not return an id")
        logger.info(f"Inserted link {link_id}")
        return link_id

    def set_short_code(self, link_id: int, short_code: str) -> bool:
        """Attach the short code to an existing link.

        Args:
            link_id: The link id.
            short_code: The encoded short code.

        Returns:
            True if the row was updated, False if no such id exists.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE links SET short_url = ? WHERE id = ?",
                (short_code, link_id),
            )
            conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Short code update failed for link {link_id}: {e}")
            raise StorageError("Could not save the short code") from e
        return cursor.rowcount > 0

    def get_long_url_by_id(self, link_id: int) -> Optional[str]:
        """Get the long URL for a link id.

        Args:
            link_id: The link id.

        Returns:
            The long URL or None if not found.
        """
        results = self.execute(
            "SELECT long_url FROM links WHERE id = ?", (link_id,), fetch=True
        )
        return results[0]["long_url"] if results else None

    def get_link_by_id(self, link_id: int) -> Optional[dict]:
        """Get the full link record by id.

        Inspection helper; the redirect path uses get_long_url_by_id.

        Args:
            link_id: The link id.

        Returns:
            Link record or None if not found.
        """
        results = self.execute("SELECT * FROM links WHERE id = ?", (link_id,), fetch=True)
        return results[0] if results else None

    def get_links_missing_code(self, limit: int = 100) -> list[dict]:
        """Get links whose short code was never written.

        Args:
            limit: Maximum number of rows to return.

        Returns:
            List of link records, oldest first.
        """
        query = "SELECT * FROM links WHERE short_url IS NULL ORDER BY id LIMIT ?"
        return self.execute(query, (limit,), fetch=True) or []

    def count_links(self) -> int:
        """Count stored links (inspection helper)."""
        results = self.execute("SELECT COUNT(*) AS total FROM links", fetch=True)
        return results[0]["total"] if results else 0


def get_test_db() -> Database:
    """Get a fresh in-memory database for testing.

    Returns:
        In-memory Database instance.
    """
    test_db = Database(":memory:")
    test_db.init_db()
    return test_db
