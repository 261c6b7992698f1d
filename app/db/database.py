import logging
import os
import sqlite3
from datetime import datetime
from typing import Any, Callable

from app.settings import settings


DB_VERSION = 1

logger = logging.getLogger(__name__)


class DatabaseNotInitializedError(Exception):
    """Raised when database operations are attempted before initialization"""
    pass


def register_schema_sql(func: Callable[[], str]) -> Callable[[], str]:
    """Decorator to register SQL returned by a function for schema initialization

    This decorator should be used on functions that return SQL statements
    for table creation, indexes, etc. The function is called immediately
    and its return value is registered for execution during database initialization.

    Example:
        @register_schema_sql
        def _create_assistants_table() -> str:
            return "CREATE TABLE IF NOT EXISTS assistants (...)"
    """
    sql = func()
    Database._schema_registry.append(sql)
    return func


class Database:
    """SQLite database connection manager with schema registration"""

    _schema_registry: list[str] = []

    def __init__(self, db_path: str | None = None) -> None:
        self.db_path = db_path if db_path is not None else settings.db_path
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def _initialize_schema(self) -> None:
        """Initialize database schema by executing all registered SQL

        This must be called before using the database. It executes all
        SQL statements that have been registered via register_schema_sql().
        """
        if self._initialized:
            return

        with self.get_connection() as conn:
            cursor = conn.cursor()
            self._set_db_version(cursor)

            for sql in self._schema_registry:
                cursor.execute(sql)

            conn.commit()

        self._initialized = True
        logger.info("Database ready at %s (version %d)", self.db_path, DB_VERSION)

    def _set_db_version(self, cursor: sqlite3.Cursor) -> None:
        cursor.execute("CREATE TABLE IF NOT EXISTS db_version (version INTEGER NOT NULL)")
        cursor.execute("DELETE FROM db_version")
        cursor.execute("INSERT INTO db_version (version) VALUES (?)", (DB_VERSION,))

    def _get_db_version(self) -> int | None:
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name='db_version'"
            )
            if cursor.fetchone() is None:
                return None

            cursor.execute("SELECT version FROM db_version LIMIT 1")
            result = cursor.fetchone()
            return result[0] if result else None

    def _handle_version_mismatch(self) -> None:
        """Handle database version mismatch by deleting or renaming the old db file"""
        if not os.path.exists(self.db_path):
            return

        if settings.preserve_old_db:
            self._backup_db()
        else:
            os.remove(self.db_path)
            logger.warning("Old database deleted: %s", self.db_path)

    def _backup_db(self) -> None:
        backup_path = self._backup_path()
        os.rename(self.db_path, backup_path)
        logger.warning("Old database renamed to: %s", backup_path)

    def _backup_path(self) -> str:
        """Timestamped sibling of db_path that does not exist yet, keeping the file extension"""
        root, ext = os.path.splitext(self.db_path)
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        candidate = f"{root}-{timestamp}{ext}"
        suffix = 1
        while os.path.exists(candidate):
            candidate = f"{root}-{timestamp}-{suffix}{ext}"
            suffix += 1
        return candidate

    def _check_and_handle_version(self) -> None:
        """Check database version and handle mismatch if necessary"""
        if not os.path.exists(self.db_path):
            return

        current_version = self._get_db_version()
        if current_version != DB_VERSION:
            logger.warning(
                "Database is not up to date (db version: %s, schema version: %d)",
                current_version,
                DB_VERSION,
            )
            self._handle_version_mismatch()

    def setup(self) -> None:
        """Check database version and initialize schema"""
        directory = os.path.dirname(self.db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        self._check_and_handle_version()
        self._initialize_schema()

    def _check_initialized(self) -> None:
        """Check if database has been initialized, raise error if not"""
        if not self._initialized:
            raise DatabaseNotInitializedError(
                "Database has not been initialized. Call setup() first."
            )

    def get_connection(self) -> sqlite3.Connection:
        """Get a database connection"""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row  # Access columns by name
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def execute_query(self, query: str, params: tuple[Any, ...] = ()) -> list[sqlite3.Row]:
        """Execute a SELECT query and return results"""
        self._check_initialized()
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            return cursor.fetchall()

    def execute_update(self, query: str, params: tuple[Any, ...] = ()) -> int:
        """Execute an INSERT/UPDATE/DELETE query and return affected rows"""
        self._check_initialized()
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            conn.commit()
            return cursor.rowcount

    def execute_transaction(self, statements: list[tuple[str, tuple[Any, ...]]]) -> list[int]:
        """Execute several INSERT/UPDATE/DELETE statements atomically and return affected rows of each"""
        self._check_initialized()
        conn = self.get_connection()
        try:
            with conn:  # commits on success, rolls back if any statement fails
                cursor = conn.cursor()
                affected = []
                for query, params in statements:
                    cursor.execute(query, params)
                    affected.append(cursor.rowcount)
                return affected
        finally:
            conn.close()
