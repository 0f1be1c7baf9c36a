from __future__ import annotations

from ..db import get_conn, transaction
from ..logs import LogContext
from ..repository import academic_year_repo
from .utils import NotFoundError, row_to_dict, rows_to_dicts


def upsert_academic_year(year: str, set_as_current: bool, log: LogContext | None = None) -> int:
    """
    Insert the year label if new (otherwise just touch updated_at).
    With set_as_current, it becomes the single active year.
    """
    year = year.strip()
    if not year:
        raise ValueError("academic_year is required")
    with get_conn() as conn, transaction(conn):
        year_id = academic_year_repo.find_id_by_label(conn, year)
        if year_id is not None:
            academic_year_repo.touch(conn, year_id)
        else:
            year_id = academic_year_repo.insert(conn, year, "active" if set_as_current else "inactive")
        if set_as_current:
            academic_year_repo.deactivate_all(conn)
            academic_year_repo.activate(conn, year_id)
        after = row_to_dict(academic_year_repo.get_one(conn, year_id))
    if log:
        log.set_entity("ACADEMIC_YEAR", year_id)
        log.set_after(after)
    return year_id


def get_current_academic_year() -> dict | None:
    with get_conn() as conn:
        return row_to_dict(academic_year_repo.get_current(conn))


def get_all_academic_years() -> list[dict]:
    with get_conn() as conn:
        return rows_to_dicts(academic_year_repo.list_all(conn))


def set_current_academic_year(year_id: int, log: LogContext | None = None):
    with get_conn() as conn, transaction(conn):
        before = row_to_dict(academic_year_repo.get_current(conn))
        if academic_year_repo.get_one(conn, year_id) is None:
            raise NotFoundError("academic_year_not_found")
        academic_year_repo.deactivate_all(conn)
        academic_year_repo.activate(conn, year_id)
    if log:
        log.set_entity("ACADEMIC_YEAR", year_id)
        log.set_before(before)


def delete_academic_year(year_id: int, log: LogContext | None = None):
    with get_conn() as conn:
        before = row_to_dict(academic_year_repo.get_one(conn, year_id))
        academic_year_repo.delete(conn, year_id)
    if log:
        log.set_entity("ACADEMIC_YEAR", year_id)
        log.set_before(before)
