from __future__ import annotations

from sqlite3 import Connection

FIELDS = [
    "name", "gender", "dob", "phone", "alt_phone", "email", "qualification",
    "designation", "department", "joining_date", "employment_type", "photo_url", "status",
]
COLUMNS = "id, " + ", ".join(FIELDS) + ", created_at, updated_at"


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS staff (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            gender TEXT NOT NULL,
            dob TEXT NOT NULL,
            phone TEXT NOT NULL,
            alt_phone TEXT,
            email TEXT NOT NULL,
            qualification TEXT NOT NULL,
            designation TEXT NOT NULL,
            department TEXT NOT NULL,
            joining_date TEXT NOT NULL,
            employment_type TEXT NOT NULL,
            photo_url TEXT,
            status TEXT DEFAULT 'active',
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """
    )


def insert(conn: Connection, data: dict) -> int:
    cur = conn.execute(
        "INSERT INTO staff({}) VALUES({})".format(", ".join(FIELDS), ",".join(["?"] * len(FIELDS))),
        [data.get(f) for f in FIELDS],
    )
    return int(cur.lastrowid)


def get_one(conn: Connection, staff_id: int):
    return conn.execute(f"SELECT {COLUMNS} FROM staff WHERE id=?", (staff_id,)).fetchone()


def list_all(conn: Connection):
    return conn.execute(f"SELECT {COLUMNS} FROM staff ORDER BY created_at DESC, id DESC").fetchall()


def update(conn: Connection, staff_id: int, data: dict) -> int:
    sets = ", ".join(f"{f}=?" for f in FIELDS)
    cur = conn.execute(
        f"UPDATE staff SET {sets}, updated_at=CURRENT_TIMESTAMP WHERE id=?",
        [data.get(f) for f in FIELDS] + [staff_id],
    )
    return cur.rowcount


def delete(conn: Connection, staff_id: int) -> int:
    return conn.execute("DELETE FROM staff WHERE id=?", (staff_id,)).rowcount
