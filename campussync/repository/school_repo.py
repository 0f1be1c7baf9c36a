from __future__ import annotations

from sqlite3 import Connection

FIELDS = [
    "school_name", "school_board", "school_medium", "principal_name", "contact_number",
    "alternate_contact_number", "school_email", "address", "city", "state", "pincode",
    "website", "school_image",
]
COLUMNS = "id, " + ", ".join(FIELDS) + ", is_active, created_at, updated_at"


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS schools (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            school_name TEXT NOT NULL,
            school_board TEXT NOT NULL,
            school_medium TEXT NOT NULL,
            principal_name TEXT NOT NULL,
            contact_number TEXT NOT NULL,
            alternate_contact_number TEXT DEFAULT NULL,
            school_email TEXT NOT NULL UNIQUE,
            address TEXT NOT NULL,
            city TEXT NOT NULL,
            state TEXT NOT NULL,
            pincode TEXT NOT NULL,
            website TEXT DEFAULT NULL,
            school_image TEXT DEFAULT NULL,
            is_active BOOLEAN NOT NULL DEFAULT 1,
            created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
        """
    )


def get_first(conn: Connection):
    """The school profile is a single row; the oldest one wins if several exist."""
    return conn.execute(f"SELECT {COLUMNS} FROM schools ORDER BY id LIMIT 1").fetchone()


def insert(conn: Connection, data: dict) -> int:
    cur = conn.execute(
        "INSERT INTO schools({}) VALUES({})".format(", ".join(FIELDS), ",".join(["?"] * len(FIELDS))),
        [data.get(f) for f in FIELDS],
    )
    return int(cur.lastrowid)


def update(conn: Connection, school_id: int, data: dict) -> int:
    sets = ", ".join(f"{f}=?" for f in FIELDS)
    cur = conn.execute(
        f"UPDATE schools SET {sets}, updated_at=CURRENT_TIMESTAMP WHERE id=?",
        [data.get(f) for f in FIELDS] + [school_id],
    )
    return cur.rowcount
