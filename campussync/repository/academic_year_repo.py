from __future__ import annotations

from sqlite3 import Connection

COLUMNS = "id, academic_year, status, created_at, updated_at"


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS academic_years (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            academic_year TEXT NOT NULL UNIQUE,
            status TEXT DEFAULT 'inactive',
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """
    )


def find_id_by_label(conn: Connection, label: str) -> int | None:
    row = conn.execute("SELECT id FROM academic_years WHERE academic_year=?", (label,)).fetchone()
    return int(row["id"]) if row else None


def insert(conn: Connection, label: str, status: str) -> int:
    cur = conn.execute(
        "INSERT INTO academic_years(academic_year, status) VALUES(?, ?)",
        (label, status),
    )
    return int(cur.lastrowid)


def touch(conn: Connection, year_id: int):
    conn.execute("UPDATE academic_years SET updated_at=CURRENT_TIMESTAMP WHERE id=?", (year_id,))


def deactivate_all(conn: Connection):
    conn.execute("UPDATE academic_years SET status='inactive'")


def activate(conn: Connection, year_id: int) -> int:
    cur = conn.execute(
        "UPDATE academic_years SET status='active', updated_at=CURRENT_TIMESTAMP WHERE id=?",
        (year_id,),
    )
    return cur.rowcount


def get_one(conn: Connection, year_id: int):
    return conn.execute(f"SELECT {COLUMNS} FROM academic_years WHERE id=?", (year_id,)).fetchone()


def get_current(conn: Connection):
    return conn.execute(
        f"SELECT {COLUMNS} FROM academic_years WHERE status='active' "
        "ORDER BY created_at DESC, id DESC LIMIT 1"
    ).fetchone()


def list_all(conn: Connection):
    return conn.execute(
        f"SELECT {COLUMNS} FROM academic_years ORDER BY created_at DESC, id DESC"
    ).fetchall()


def delete(conn: Connection, year_id: int) -> int:
    return conn.execute("DELETE FROM academic_years WHERE id=?", (year_id,)).rowcount
