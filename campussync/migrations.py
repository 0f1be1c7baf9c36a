"""
Startup migrations: create every table the backend needs.
"""
from __future__ import annotations

import logging
from sqlite3 import Connection

from .db import get_conn
from .logs import ensure_log_schema
from .repository import (
    academic_year_repo,
    class_repo,
    enquiry_repo,
    school_repo,
    staff_repo,
    student_repo,
)

logger = logging.getLogger(__name__)

# Order matters only for readability; foreign keys are checked at write time.
MIGRATIONS = [
    ("enquiry", enquiry_repo.ensure_schema),
    ("school", school_repo.ensure_schema),
    ("class", class_repo.ensure_schema),
    ("staff", staff_repo.ensure_schema),
    ("student", student_repo.ensure_schema),
    ("academic_year", academic_year_repo.ensure_schema),
    ("operation_log", ensure_log_schema),
]


def run_migrations(conn: Connection):
    conn.execute("PRAGMA foreign_keys = ON;")
    for name, step in MIGRATIONS:
        try:
            step(conn)
        except Exception:
            logger.exception("migration %s failed", name)
            raise
    logger.info("migrations applied: %s", ", ".join(n for n, _ in MIGRATIONS))


def ensure_schema():
    with get_conn() as conn:
        run_migrations(conn)
