from __future__ import annotations

from fastapi import APIRouter

from ..logs import LogContext
from ..schemas import StaffIn
from ..services.staff_svc import create_staff, delete_staff, get_all_staffs, get_staff, update_staff
from .base import http_error

router = APIRouter()


@router.get("/api/staff/list")
def api_staff_list():
    return get_all_staffs()


@router.get("/api/staff/{staff_id}")
def api_staff_get(staff_id: int):
    try:
        return get_staff(staff_id)
    except Exception as e:
        raise http_error(e)


@router.post("/api/staff/create", status_code=201)
def api_staff_create(body: StaffIn):
    log = LogContext("CREATE_STAFF")
    log.set_payload(body.model_dump())
    try:
        new_id = create_staff(body.model_dump(), log)
        log.write("OK")
        return {"message": "ok", "id": new_id}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/staff/{staff_id}/update")
def api_staff_update(staff_id: int, body: StaffIn):
    log = LogContext("UPDATE_STAFF")
    log.set_payload(body.model_dump())
    try:
        item = update_staff(staff_id, body.model_dump(), log)
        log.write("OK")
        return {"message": "ok", "item": item}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/staff/{staff_id}/delete")
def api_staff_delete(staff_id: int):
    log = LogContext("DELETE_STAFF")
    try:
        delete_staff(staff_id, log)
        log.write("OK")
        return {"message": "ok"}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)
