"""SQLite storage helpers: connecting, migrations and test databases."""

from __future__ import annotations

import contextlib
import os
import sqlite3
import tempfile
from typing import Iterator

from casheer.models import ExpenseInvalidEntryKeyError


class MigrationError(Exception):
    """Setting up or migrating the database failed."""


def connect_sqlite(dbfile: str) -> sqlite3.Connection:
    """Open a connection to the SQLite database at dbfile."""
    try:
        return sqlite3.connect(dbfile)
    except sqlite3.Error as exc:
        raise sqlite3.OperationalError(f"could not open database file: {exc}") from exc


def run_sql(conn: sqlite3.Connection, path: str) -> None:
    """Run the SQL script stored in the file at path."""
    try:
        with open(path, encoding="utf-8") as sqlfile:
            query = sqlfile.read()
    except FileNotFoundError as exc:
        raise MigrationError(f"opening sql file: {exc}") from exc
    except OSError as exc:
        raise MigrationError(f"reading sql file: {exc}") from exc
    try:
        conn.executescript(query)
    except sqlite3.Error as exc:
        raise MigrationError(f"executing sql query: {exc}") from exc


def _walk_files(root: str) -> Iterator[str]:
    for name in sorted(os.listdir(root)):
        path = os.path.join(root, name)
        if os.path.isdir(path):
            yield from _walk_files(path)
        else:
            yield path


def run_migrations(conn: sqlite3.Connection, migration_dir: str) -> None:
    """Run every non-rollback SQL file under migration_dir, in lexical order."""
    try:
        is_dir = os.path.isdir(migration_dir)
        os.stat(migration_dir)
    except OSError as exc:
        raise MigrationError(
            f"reading migrations directory {migration_dir}: {exc}"
        ) from exc
    if not is_dir:
        raise MigrationError(f"{migration_dir} is not a directory")

    try:
        for path in _walk_files(migration_dir):
            if path.endswith(".down.sql"):
                continue
            try:
                run_sql(conn, path)
            except MigrationError as exc:
                raise MigrationError(f"running sql script {path}: {exc}") from exc
    except (MigrationError, OSError) as exc:
        raise MigrationError(
            f"going through the sql migration files: {exc}"
        ) from exc


def ensure_database_file_is_initialized(
    conn: sqlite3.Connection, dbfile: str, sqlpath: str
) -> None:
    """Create and migrate the database file if it is missing or empty."""
    should_run_migrations = False
    try:
        stat = os.stat(dbfile)
    except FileNotFoundError:
        try:
            with open(dbfile, "wb"):
                pass
        except OSError as exc:
            raise MigrationError(
                f"database file {dbfile} doesn't exist and could not create a new one: "
                f"could not create db file: {exc}"
            ) from exc
        should_run_migrations = True
    except OSError as exc:
        raise MigrationError(f"retrieving stats for {dbfile}: {exc}") from exc
    else:
        should_run_migrations = stat.st_size == 0

    if should_run_migrations:
        print("Database was not found, initializing database tables...")
        try:
            run_migrations(conn, sqlpath)
        except MigrationError as exc:
            with contextlib.suppress(OSError):
                os.remove(dbfile)
            raise MigrationError(f"running sql migrations: {exc}") from exc


def delete_all_data(conn: sqlite3.Connection) -> None:
    """Remove every debt, expense and entry from the database."""
    for table in ("debts", "expenses", "entries"):
        with contextlib.suppress(sqlite3.Error):
            conn.execute(f"DELETE FROM {table}")
    conn.commit()


def require_entry(conn: sqlite3.Connection, entry_id: int) -> int:
    """Return entry_id if such an entry exists; raise ExpenseInvalidEntryKeyError otherwise."""
    row = conn.execute(
        "SELECT id FROM entries WHERE id = ? AND deleted_at IS NULL", (entry_id,)
    ).fetchone()
    if row is None:
        raise ExpenseInvalidEntryKeyError(entry_id)
    return entry_id


@contextlib.contextmanager
def temporary_database(migrations_dir: str) -> Iterator[tuple[sqlite3.Connection, str]]:
    """Yield a connection to a fresh migrated database file, removed afterwards."""
    fd, dbname = tempfile.mkstemp(suffix=".testdb", dir=".")
    os.close(fd)
    conn = None
    try:
        conn = connect_sqlite(dbname)
        try:
            run_migrations(conn, migrations_dir)
        except MigrationError as exc:
            raise MigrationError(f"initializing database: {exc}") from exc
        yield conn, dbname
    finally:
        if conn is not None:
            with contextlib.suppress(sqlite3.Error):
                conn.close()
        with contextlib.suppress(FileNotFoundError):
            os.remove(dbname)