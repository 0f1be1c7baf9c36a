from __future__ import annotations

from sqlite3 import Connection
from typing import Optional

ENQUIRY_FIELDS = ["student_name", "parent_name", "phone", "email", "source", "status"]
ENQUIRY_COLUMNS = "id, " + ", ".join(ENQUIRY_FIELDS) + ", created_at, updated_at"


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS enquiries (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            student_name TEXT NOT NULL,
            parent_name TEXT NOT NULL,
            phone TEXT NOT NULL,
            email TEXT,
            source TEXT NOT NULL,
            status TEXT DEFAULT 'new',
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """
    )
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS notes (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            enquiry_id INTEGER NOT NULL,
            notes TEXT NOT NULL,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (enquiry_id) REFERENCES enquiries(id) ON DELETE CASCADE
        )
        """
    )
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS followups (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            enquiry_id INTEGER NOT NULL,
            notes TEXT NOT NULL,
            status TEXT NOT NULL,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            follow_up_date TEXT,
            FOREIGN KEY (enquiry_id) REFERENCES enquiries(id) ON DELETE CASCADE
        )
        """
    )


# ===== enquiries =====
def insert(conn: Connection, data: dict) -> int:
    cur = conn.execute(
        "INSERT INTO enquiries({}) VALUES({})".format(
            ", ".join(ENQUIRY_FIELDS), ",".join(["?"] * len(ENQUIRY_FIELDS))
        ),
        [data.get(f) for f in ENQUIRY_FIELDS],
    )
    return int(cur.lastrowid)


def get_one(conn: Connection, enquiry_id: int):
    return conn.execute(f"SELECT {ENQUIRY_COLUMNS} FROM enquiries WHERE id=?", (enquiry_id,)).fetchone()


def exists(conn: Connection, enquiry_id: int) -> bool:
    return conn.execute("SELECT 1 FROM enquiries WHERE id=?", (enquiry_id,)).fetchone() is not None


def list_all(conn: Connection, status: Optional[str] = None):
    sql = f"SELECT {ENQUIRY_COLUMNS} FROM enquiries"
    params: list = []
    if status:
        sql += " WHERE status=?"
        params.append(status)
    sql += " ORDER BY created_at DESC, id DESC"
    return conn.execute(sql, params).fetchall()


def update(conn: Connection, enquiry_id: int, data: dict) -> int:
    sets = ", ".join(f"{f}=?" for f in ENQUIRY_FIELDS)
    cur = conn.execute(
        f"UPDATE enquiries SET {sets}, updated_at=CURRENT_TIMESTAMP WHERE id=?",
        [data.get(f) for f in ENQUIRY_FIELDS] + [enquiry_id],
    )
    return cur.rowcount


def update_status(conn: Connection, enquiry_id: int, status: str) -> int:
    cur = conn.execute(
        "UPDATE enquiries SET status=?, updated_at=CURRENT_TIMESTAMP WHERE id=?",
        (status, enquiry_id),
    )
    return cur.rowcount


def delete(conn: Connection, enquiry_id: int) -> int:
    return conn.execute("DELETE FROM enquiries WHERE id=?", (enquiry_id,)).rowcount


# ===== notes =====
def insert_note(conn: Connection, enquiry_id: int, notes: str) -> int:
    cur = conn.execute("INSERT INTO notes(enquiry_id, notes) VALUES(?, ?)", (enquiry_id, notes))
    return int(cur.lastrowid)


def list_notes(conn: Connection, enquiry_id: int):
    return conn.execute(
        "SELECT id, enquiry_id, notes, created_at FROM notes "
        "WHERE enquiry_id=? ORDER BY created_at DESC, id DESC",
        (enquiry_id,),
    ).fetchall()


# ===== follow-ups =====
def insert_follow_up(
    conn: Connection, enquiry_id: int, notes: str, status: str, follow_up_date: Optional[str]
) -> int:
    cur = conn.execute(
        "INSERT INTO followups(enquiry_id, notes, status, follow_up_date) VALUES(?,?,?,?)",
        (enquiry_id, notes, status, follow_up_date),
    )
    return int(cur.lastrowid)


def list_follow_ups(conn: Connection, enquiry_id: int):
    return conn.execute(
        "SELECT id, enquiry_id, notes, status, created_at, follow_up_date FROM followups "
        "WHERE enquiry_id=? ORDER BY created_at DESC, id DESC",
        (enquiry_id,),
    ).fetchall()
