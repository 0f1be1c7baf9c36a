from __future__ import annotations

from fastapi import APIRouter, Query

from ..logs import LogContext
from ..schemas import EnquiryIn, EnquiryStatus, FollowUpIn, NoteIn
from ..services.enquiry_svc import (
    add_enquiry_follow_up,
    create_enquiry,
    create_note,
    delete_enquiry,
    get_all_enquiries,
    get_enquiry,
    get_enquiry_follow_ups,
    get_enquiry_notes,
    update_enquiry,
    update_enquiry_status,
)
from .base import http_error

router = APIRouter()


@router.get("/api/enquiry/list")
def api_enquiry_list(status: str | None = Query(None)):
    return get_all_enquiries(status)


@router.get("/api/enquiry/{enquiry_id}")
def api_enquiry_get(enquiry_id: int):
    try:
        return get_enquiry(enquiry_id)
    except Exception as e:
        raise http_error(e)


@router.post("/api/enquiry/create", status_code=201)
def api_enquiry_create(body: EnquiryIn):
    log = LogContext("CREATE_ENQUIRY")
    log.set_payload(body.model_dump())
    try:
        new_id = create_enquiry(body.model_dump(), log)
        log.write("OK")
        return {"message": "ok", "id": new_id}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/enquiry/{enquiry_id}/update")
def api_enquiry_update(enquiry_id: int, body: EnquiryIn):
    log = LogContext("UPDATE_ENQUIRY")
    log.set_payload(body.model_dump())
    try:
        item = update_enquiry(enquiry_id, body.model_dump(), log)
        log.write("OK")
        return {"message": "ok", "item": item}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/enquiry/{enquiry_id}/status")
def api_enquiry_status(enquiry_id: int, body: EnquiryStatus):
    log = LogContext("UPDATE_ENQUIRY_STATUS")
    log.set_payload(body.model_dump())
    try:
        update_enquiry_status(enquiry_id, body.status, log)
        log.write("OK")
        return {"message": "ok"}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/enquiry/{enquiry_id}/delete")
def api_enquiry_delete(enquiry_id: int):
    log = LogContext("DELETE_ENQUIRY")
    try:
        delete_enquiry(enquiry_id, log)
        log.write("OK")
        return {"message": "ok"}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.get("/api/enquiry/{enquiry_id}/follow-ups")
def api_enquiry_follow_ups(enquiry_id: int):
    return get_enquiry_follow_ups(enquiry_id)


@router.post("/api/enquiry/follow-up", status_code=201)
def api_enquiry_add_follow_up(body: FollowUpIn):
    log = LogContext("ADD_FOLLOW_UP")
    log.set_payload(body.model_dump())
    try:
        new_id = add_enquiry_follow_up(body.enquiry_id, body.notes, body.status, body.follow_up_date, log)
        log.write("OK")
        return {"message": "ok", "id": new_id}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.get("/api/enquiry/{enquiry_id}/notes")
def api_enquiry_notes(enquiry_id: int):
    return get_enquiry_notes(enquiry_id)


@router.post("/api/enquiry/note", status_code=201)
def api_enquiry_add_note(body: NoteIn):
    log = LogContext("ADD_NOTE")
    log.set_payload(body.model_dump())
    try:
        new_id = create_note(body.enquiry_id, body.notes, log)
        log.write("OK")
        return {"message": "ok", "id": new_id}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)
