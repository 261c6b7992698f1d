import os
import sqlite3
from datetime import datetime

import pytest

from app.db import database as database_module
from app.db.database import DB_VERSION, Database, DatabaseNotInitializedError
from app.settings import settings


class _FrozenDatetime(datetime):
    @classmethod
    def now(cls, tz=None):
        return cls(2026, 1, 1, 12, 0, 0, tzinfo=tz)


def _write_old_database(path: str) -> None:
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE db_version (version INTEGER NOT NULL)")
    conn.execute("INSERT INTO db_version (version) VALUES (?)", (DB_VERSION + 41,))
    conn.execute("CREATE TABLE legacy (id TEXT)")
    conn.commit()
    conn.close()


def _table_names(db: Database) -> set[str]:
    rows = db.execute_query("SELECT name FROM sqlite_master WHERE type='table'")
    return {row["name"] for row in rows}


def test_queries_before_setup_are_rejected(tmp_path):
    db = Database(str(tmp_path / "app.db"))

    with pytest.raises(DatabaseNotInitializedError):
        db.execute_query("SELECT 1")


def test_setup_creates_schema_and_parent_directory(tmp_path):
    db = Database(str(tmp_path / "nested" / "dir" / "app.db"))

    db.setup()

    assert db.is_initialized
    assert {"assistants", "chats", "messages", "db_version"} <= _table_names(db)
    assert db.execute_query("SELECT version FROM db_version")[0]["version"] == DB_VERSION


def test_outdated_database_is_replaced(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "preserve_old_db", False)
    path = str(tmp_path / "app.db")
    _write_old_database(path)

    db = Database(path)
    db.setup()

    assert "legacy" not in _table_names(db)
    assert os.listdir(tmp_path) == ["app.db"]


def test_outdated_database_is_backed_up_when_preserving(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "preserve_old_db", True)
    path = str(tmp_path / "app.db")
    _write_old_database(path)

    db = Database(path)
    db.setup()

    backups = [name for name in os.listdir(tmp_path) if name.startswith("app-")]
    assert len(backups) == 1
    assert "legacy" not in _table_names(db)


def test_backup_keeps_non_db_extension(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "preserve_old_db", True)
    path = str(tmp_path / "chat.sqlite3")
    _write_old_database(path)

    Database(path).setup()

    names = sorted(os.listdir(tmp_path))
    assert len(names) == 2
    assert "chat.sqlite3" in names
    backup = next(name for name in names if name != "chat.sqlite3")
    assert backup.startswith("chat-") and backup.endswith(".sqlite3")

    conn = sqlite3.connect(str(tmp_path / backup))
    tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    conn.close()
    assert "legacy" in tables


def test_backup_never_overwrites_existing_backup(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "preserve_old_db", True)
    monkeypatch.setattr(database_module, "datetime", _FrozenDatetime)
    path = str(tmp_path / "app.db")
    (tmp_path / "app-20260101120000.db").write_text("earlier backup")
    _write_old_database(path)

    Database(path).setup()

    assert (tmp_path / "app-20260101120000.db").read_text() == "earlier backup"
    assert (tmp_path / "app-20260101120000-1.db").exists()
    assert (tmp_path / "app.db").exists()


def test_current_database_is_kept(tmp_path):
    path = str(tmp_path / "app.db")
    first = Database(path)
    first.setup()
    first.execute_update("CREATE TABLE keep_me (id TEXT)")

    second = Database(path)
    second.setup()

    assert "keep_me" in _table_names(second)


def test_transaction_commits_all_statements(database):
    affected = database.execute_transaction([
        ("CREATE TABLE notes (id TEXT PRIMARY KEY)", ()),
        ("INSERT INTO notes (id) VALUES (?)", ("a",)),
        ("INSERT INTO notes (id) VALUES (?)", ("b",)),
    ])

    assert affected[1:] == [1, 1]
    assert [row["id"] for row in database.execute_query("SELECT id FROM notes ORDER BY id")] == ["a", "b"]


def test_transaction_rolls_back_when_a_statement_fails(database):
    database.execute_update("CREATE TABLE notes (id TEXT PRIMARY KEY)")

    with pytest.raises(sqlite3.IntegrityError):
        database.execute_transaction([
            ("INSERT INTO notes (id) VALUES (?)", ("a",)),
            ("INSERT INTO notes (id) VALUES (?)", ("a",)),
        ])

    assert database.execute_query("SELECT id FROM notes") == []
