import sqlite3

import pytest

from campussync.db import get_conn, get_db_path, transaction


def test_db_path_follows_env(data_dir):
    assert get_db_path() == str(data_dir / "campussync_test.db")


def test_connection_is_shared(data_dir):
    with get_conn() as a:
        pass
    with get_conn() as b:
        assert a is b
        assert b.execute("PRAGMA foreign_keys").fetchone()[0] == 1


def test_transaction_rolls_back_on_error(data_dir):
    with get_conn() as conn:
        with pytest.raises(sqlite3.IntegrityError):
            with transaction(conn):
                conn.execute("INSERT INTO academic_years(academic_year) VALUES('2030-31')")
                conn.execute("INSERT INTO academic_years(academic_year) VALUES('2030-31')")
        n = conn.execute("SELECT COUNT(1) FROM academic_years").fetchone()[0]
    assert n == 0


def test_migrations_are_idempotent(data_dir):
    from campussync.migrations import ensure_schema
    ensure_schema()
    ensure_schema()
    with get_conn() as conn:
        names = {r["name"] for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    for t in ("academic_years", "classes", "staff", "schools", "enquiries", "notes", "followups",
              "students", "operation_log"):
        assert t in names
