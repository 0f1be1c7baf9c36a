from __future__ import annotations

from ..db import get_conn
from ..logs import LogContext
from ..repository import enquiry_repo
from .utils import NotFoundError, row_to_dict, rows_to_dicts


def create_enquiry(data: dict, log: LogContext | None = None) -> int:
    data = {**data, "status": data.get("status") or "new"}
    with get_conn() as conn:
        new_id = enquiry_repo.insert(conn, data)
    if log:
        log.set_entity("ENQUIRY", new_id)
        log.set_after({"id": new_id, **data})
    return new_id


def get_enquiry(enquiry_id: int) -> dict:
    with get_conn() as conn:
        row = enquiry_repo.get_one(conn, enquiry_id)
    if row is None:
        raise NotFoundError("enquiry_not_found")
    return dict(row)


def get_all_enquiries(status: str | None = None) -> list[dict]:
    with get_conn() as conn:
        return rows_to_dicts(enquiry_repo.list_all(conn, status))


def update_enquiry(enquiry_id: int, data: dict, log: LogContext | None = None) -> dict:
    with get_conn() as conn:
        before = row_to_dict(enquiry_repo.get_one(conn, enquiry_id))
        if before is None:
            raise NotFoundError("enquiry_not_found")
        # status omitted => keep the current one
        data = {**data, "status": data.get("status") or before["status"]}
        enquiry_repo.update(conn, enquiry_id, data)
        after = row_to_dict(enquiry_repo.get_one(conn, enquiry_id))
    if log:
        log.set_entity("ENQUIRY", enquiry_id)
        log.set_before(before)
        log.set_after(after)
    return after


def update_enquiry_status(enquiry_id: int, status: str, log: LogContext | None = None):
    if not status:
        raise ValueError("status is required")
    with get_conn() as conn:
        if enquiry_repo.update_status(conn, enquiry_id, status) == 0:
            raise NotFoundError("enquiry_not_found")
    if log:
        log.set_entity("ENQUIRY", enquiry_id)
        log.set_after({"status": status})


def delete_enquiry(enquiry_id: int, log: LogContext | None = None):
    """Notes and follow-ups go with the enquiry (ON DELETE CASCADE)."""
    with get_conn() as conn:
        before = row_to_dict(enquiry_repo.get_one(conn, enquiry_id))
        enquiry_repo.delete(conn, enquiry_id)
    if log:
        log.set_entity("ENQUIRY", enquiry_id)
        log.set_before(before)


def add_enquiry_follow_up(enquiry_id: int, notes: str, status: str, follow_up_date: str | None = None,
                          log: LogContext | None = None) -> int:
    with get_conn() as conn:
        if not enquiry_repo.exists(conn, enquiry_id):
            raise NotFoundError("enquiry_not_found")
        new_id = enquiry_repo.insert_follow_up(conn, enquiry_id, notes, status, follow_up_date)
    if log:
        log.set_entity("FOLLOW_UP", new_id)
        log.set_after({"id": new_id, "enquiry_id": enquiry_id, "status": status, "follow_up_date": follow_up_date})
    return new_id


def get_enquiry_follow_ups(enquiry_id: int) -> list[dict]:
    with get_conn() as conn:
        return rows_to_dicts(enquiry_repo.list_follow_ups(conn, enquiry_id))


def create_note(enquiry_id: int, notes: str, log: LogContext | None = None) -> int:
    with get_conn() as conn:
        if not enquiry_repo.exists(conn, enquiry_id):
            raise NotFoundError("enquiry_not_found")
        new_id = enquiry_repo.insert_note(conn, enquiry_id, notes)
    if log:
        log.set_entity("NOTE", new_id)
        log.set_after({"id": new_id, "enquiry_id": enquiry_id})
    return new_id


# the enquiry screen calls it by this name
add_enquiry_note = create_note


def get_enquiry_notes(enquiry_id: int) -> list[dict]:
    with get_conn() as conn:
        return rows_to_dicts(enquiry_repo.list_notes(conn, enquiry_id))
