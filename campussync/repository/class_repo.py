from __future__ import annotations

from sqlite3 import Connection
from typing import Optional

COLUMNS = "id, class_name, academic_year, status, created_at, updated_at"


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS classes (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            class_name TEXT NOT NULL,
            academic_year TEXT NOT NULL,
            status TEXT DEFAULT 'active',
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """
    )


def insert(conn: Connection, class_name: str, academic_year: str, status: str) -> int:
    cur = conn.execute(
        "INSERT INTO classes(class_name, academic_year, status) VALUES(?,?,?)",
        (class_name, academic_year, status),
    )
    return int(cur.lastrowid)


def get_one(conn: Connection, class_id: int):
    return conn.execute(f"SELECT {COLUMNS} FROM classes WHERE id=?", (class_id,)).fetchone()


def exists(conn: Connection, class_id) -> bool:
    row = conn.execute("SELECT 1 FROM classes WHERE id=?", (class_id,)).fetchone()
    return row is not None


def list_all(conn: Connection, academic_year: Optional[str] = None):
    sql = f"SELECT {COLUMNS} FROM classes"
    params: list = []
    if academic_year:
        sql += " WHERE academic_year=?"
        params.append(academic_year)
    sql += " ORDER BY created_at DESC, id DESC"
    return conn.execute(sql, params).fetchall()


def update(conn: Connection, class_id: int, class_name: str, academic_year: str, status: str) -> int:
    cur = conn.execute(
        "UPDATE classes SET class_name=?, academic_year=?, status=?, updated_at=CURRENT_TIMESTAMP "
        "WHERE id=?",
        (class_name, academic_year, status, class_id),
    )
    return cur.rowcount


def delete(conn: Connection, class_id: int) -> int:
    return conn.execute("DELETE FROM classes WHERE id=?", (class_id,)).rowcount
