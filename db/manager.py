"""Database manager for SQLite connections and schema setup."""

import sqlite3
from contextlib import contextmanager
from config import Config, get_schema_dir
from logger import get_logger

logger = get_logger()


class DatabaseManager:
    """Manages database connections and paths.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

    @contextmanager
    def connect(self):
        """Get a database connection with automatic cleanup.

        Yields:
            sqlite3.Connection: Database connection.
        """
        db_path = self.config.db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(db_path)
        try:
            yield conn
        finally:
            conn.close()

    def init_schema(self) -> None:
        """Create the schema if it does not exist yet.

        Every schema file uses IF NOT EXISTS, so this is safe to run on each start.
        """
        schema_files = sorted(self.get_schema_dir().glob("*.sql"))
        with self.connect() as conn:
            for schema_file in schema_files:
                conn.executescript(schema_file.read_text())
                logger.debug(f"Applied schema file: {schema_file.name}")
            conn.commit()

    def get_db_path(self):
        """Get the current database path.

        Returns:
            Path: Path to the database file.
        """
        return self.config.db_path

    def get_schema_dir(self):
        """Get the schema directory path.

        Returns:
            Path: Path to the directory holding the .sql schema files.
        """
        return get_schema_dir()
