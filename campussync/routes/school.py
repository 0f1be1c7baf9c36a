from __future__ import annotations

from fastapi import APIRouter

from ..logs import LogContext
from ..schemas import SchoolIn
from ..services.school_svc import get_school_details, upsert_school_details
from .base import http_error

router = APIRouter()


@router.get("/api/school")
def api_school_get():
    return {"item": get_school_details()}


@router.post("/api/school/upsert")
def api_school_upsert(body: SchoolIn):
    log = LogContext("UPSERT_SCHOOL")
    log.set_payload(body.model_dump())
    try:
        school_id = upsert_school_details(body.model_dump(), log)
        log.write("OK")
        return {"message": "ok", "id": school_id}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)
