"""Helper utilities for tests."""

from pathlib import Path
import sqlite3


def apply_schema(conn: sqlite3.Connection, schema_dir: Path) -> None:
    """Run all SQL schema files in order.

    Args:
        conn: SQLite connection to run the schema against.
        schema_dir: Path to directory containing .sql schema files.
    """
    for schema_file in sorted(schema_dir.glob("*.sql")):
        with open(schema_file, "r") as f:
            conn.executescript(f.read())

    conn.commit()
