from __future__ import annotations

from ..db import get_conn
from ..logs import LogContext
from ..repository import staff_repo
from .utils import NotFoundError, row_to_dict, rows_to_dicts


def create_staff(data: dict, log: LogContext | None = None) -> int:
    data = {**data, "status": data.get("status") or "active"}
    with get_conn() as conn:
        new_id = staff_repo.insert(conn, data)
    if log:
        log.set_entity("STAFF", new_id)
        log.set_after({"id": new_id, **data})
    return new_id


def get_staff(staff_id: int) -> dict:
    with get_conn() as conn:
        row = staff_repo.get_one(conn, staff_id)
    if row is None:
        raise NotFoundError("staff_not_found")
    return dict(row)


def get_all_staffs() -> list[dict]:
    with get_conn() as conn:
        return rows_to_dicts(staff_repo.list_all(conn))


def update_staff(staff_id: int, data: dict, log: LogContext | None = None) -> dict:
    data = {**data, "status": data.get("status") or "active"}
    with get_conn() as conn:
        before = row_to_dict(staff_repo.get_one(conn, staff_id))
        if before is None:
            raise NotFoundError("staff_not_found")
        staff_repo.update(conn, staff_id, data)
        after = row_to_dict(staff_repo.get_one(conn, staff_id))
    if log:
        log.set_entity("STAFF", staff_id)
        log.set_before(before)
        log.set_after(after)
    return after


def delete_staff(staff_id: int, log: LogContext | None = None):
    with get_conn() as conn:
        before = row_to_dict(staff_repo.get_one(conn, staff_id))
        staff_repo.delete(conn, staff_id)
    if log:
        log.set_entity("STAFF", staff_id)
        log.set_before(before)
