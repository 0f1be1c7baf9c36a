from __future__ import annotations

from fastapi import APIRouter, Query

from ..logs import LogContext
from ..schemas import ClassIn
from ..services.class_svc import create_class, delete_class, get_all_classes, get_class, update_class
from .base import http_error

router = APIRouter()


@router.get("/api/class/list")
def api_class_list(academic_year: str | None = Query(None)):
    return get_all_classes(academic_year)


@router.get("/api/class/{class_id}")
def api_class_get(class_id: int):
    try:
        return get_class(class_id)
    except Exception as e:
        raise http_error(e)


@router.post("/api/class/create", status_code=201)
def api_class_create(body: ClassIn):
    log = LogContext("CREATE_CLASS")
    log.set_payload(body.model_dump())
    try:
        new_id = create_class(body.class_name, body.academic_year, body.status, log)
        log.write("OK")
        return {"message": "ok", "id": new_id}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/class/{class_id}/update")
def api_class_update(class_id: int, body: ClassIn):
    log = LogContext("UPDATE_CLASS")
    log.set_payload(body.model_dump())
    try:
        item = update_class(class_id, body.class_name, body.academic_year, body.status, log)
        log.write("OK")
        return {"message": "ok", "item": item}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/class/{class_id}/delete")
def api_class_delete(class_id: int):
    log = LogContext("DELETE_CLASS")
    try:
        delete_class(class_id, log)
        log.write("OK")
        return {"message": "ok"}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)
