from __future__ import annotations

from sqlite3 import Connection

# Column groups, one per step of the admission form.
CORE_FIELDS = [
    "gr_number", "roll_number", "full_name", "dob", "gender",
    "mother_name", "father_name", "father_occupation", "mother_occupation", "annual_income",
    "nationality", "profile_image", "class_id", "section", "academic_year",
]
CONTACT_FIELDS = [
    "email", "mobile_number", "alternate_contact_number", "address", "city",
    "state", "country", "postal_code", "guardian_contact_info",
]
HEALTH_FIELDS = [
    "blood_group", "status", "admission_date", "weight_kg", "height_cm", "hb_range",
    "medical_conditions", "emergency_contact_person", "emergency_contact",
]
DOC_FIELDS = [
    "birth_certificate", "transfer_certificate", "previous_academic_records",
    "address_proof", "id_proof", "passport_photo", "medical_certificate",
    "vaccination_certificate", "other_documents",
]
ALL_FIELDS = CORE_FIELDS + CONTACT_FIELDS + HEALTH_FIELDS + DOC_FIELDS

IDCARD_FIELDS = CORE_FIELDS + [
    "email", "mobile_number", "address", "city", "state", "country", "postal_code",
    "blood_group", "status", "admission_date",
]


def ensure_schema(conn: Connection):
    row = conn.execute(
        "SELECT COUNT(*) AS c FROM sqlite_master WHERE type='table' AND name='students'"
    ).fetchone()
    if row["c"]:
        return
    conn.execute(
        """
        CREATE TABLE students (
            -- General Information
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            gr_number TEXT NOT NULL,
            roll_number TEXT,
            full_name TEXT NOT NULL,
            dob TEXT,
            gender TEXT NOT NULL,
            mother_name TEXT NOT NULL,
            father_name TEXT NOT NULL,
            father_occupation TEXT,
            mother_occupation TEXT,
            annual_income REAL,
            nationality TEXT,
            profile_image TEXT,
            class_id INTEGER NOT NULL,
            section TEXT,
            academic_year TEXT,

            -- Contact Information
            email TEXT,
            mobile_number TEXT,
            alternate_contact_number TEXT,
            address TEXT,
            city TEXT,
            state TEXT,
            country TEXT,
            postal_code TEXT,
            guardian_contact_info TEXT,

            -- Health & Admission Information
            blood_group TEXT,
            status TEXT,
            admission_date TEXT,
            weight_kg REAL,
            height_cm REAL,
            hb_range TEXT,
            medical_conditions TEXT,
            emergency_contact_person TEXT,
            emergency_contact TEXT,

            -- Documents Information
            birth_certificate TEXT,
            transfer_certificate TEXT,
            previous_academic_records TEXT,
            address_proof TEXT,
            id_proof TEXT,
            passport_photo TEXT,
            medical_certificate TEXT,
            vaccination_certificate TEXT,
            other_documents TEXT,

            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,

            FOREIGN KEY(class_id) REFERENCES classes(id)
        )
        """
    )


def _insert(conn: Connection, fields: list[str], data: dict) -> int:
    cur = conn.execute(
        "INSERT INTO students({}) VALUES({})".format(", ".join(fields), ",".join(["?"] * len(fields))),
        [data.get(f) for f in fields],
    )
    return int(cur.lastrowid)


def insert_core(conn: Connection, data: dict) -> int:
    return _insert(conn, CORE_FIELDS, data)


def insert_full(conn: Connection, data: dict) -> int:
    return _insert(conn, ALL_FIELDS, data)


def update_fields(conn: Connection, student_id: int, fields: list[str], data: dict) -> int:
    """Overwrite one column group of a student row; returns the affected row count."""
    sets = ", ".join(f"{f}=?" for f in fields)
    cur = conn.execute(
        f"UPDATE students SET {sets}, updated_at=CURRENT_TIMESTAMP WHERE id=?",
        [data.get(f) for f in fields] + [student_id],
    )
    return cur.rowcount


def gr_number_taken(conn: Connection, gr_number: str, exclude_id: int | None = None) -> bool:
    sql = "SELECT 1 FROM students WHERE gr_number=?"
    params: list = [gr_number]
    if exclude_id is not None:
        sql += " AND id != ?"
        params.append(exclude_id)
    return conn.execute(sql, params).fetchone() is not None


def list_with_class(conn: Connection, student_id: int | None = None):
    cols = ", ".join(f"s.{f}" for f in ALL_FIELDS)
    sql = (
        f"SELECT s.id, {cols}, s.created_at, s.updated_at, c.class_name "
        "FROM students s LEFT JOIN classes c ON s.class_id = c.id"
    )
    if student_id is not None:
        return conn.execute(sql + " WHERE s.id=?", (student_id,)).fetchall()
    return conn.execute(sql + " ORDER BY s.id").fetchall()


def list_for_idcards(conn: Connection):
    cols = ", ".join(f"s.{f}" for f in IDCARD_FIELDS)
    return conn.execute(
        f"SELECT s.id, {cols}, c.class_name "
        "FROM students s LEFT JOIN classes c ON s.class_id = c.id ORDER BY s.id"
    ).fetchall()


def get_documents(conn: Connection, student_id: int):
    return conn.execute(
        "SELECT {} FROM students WHERE id=?".format(", ".join(DOC_FIELDS)), (student_id,)
    ).fetchone()


def delete(conn: Connection, student_id: int) -> int:
    return conn.execute("DELETE FROM students WHERE id=?", (student_id,)).rowcount


def count_for_class(conn: Connection, class_id: int) -> int:
    return int(conn.execute("SELECT COUNT(1) AS c FROM students WHERE class_id=?", (class_id,)).fetchone()["c"])
