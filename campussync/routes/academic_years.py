from __future__ import annotations

from fastapi import APIRouter, Body

from ..logs import LogContext
from ..schemas import AcademicYearUpsert
from ..services.academic_year_svc import (
    delete_academic_year,
    get_all_academic_years,
    get_current_academic_year,
    set_current_academic_year,
    upsert_academic_year,
)
from .base import http_error

router = APIRouter()


@router.get("/api/academic-year/list")
def api_academic_year_list():
    return get_all_academic_years()


@router.get("/api/academic-year/current")
def api_academic_year_current():
    return {"item": get_current_academic_year()}


@router.post("/api/academic-year/upsert")
def api_academic_year_upsert(body: AcademicYearUpsert):
    log = LogContext("UPSERT_ACADEMIC_YEAR")
    log.set_payload(body.model_dump())
    try:
        year_id = upsert_academic_year(body.year, body.set_as_current, log)
        log.write("OK")
        return {"message": "ok", "id": year_id}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/academic-year/set-current")
def api_academic_year_set_current(id: int = Body(..., embed=True)):
    log = LogContext("SET_CURRENT_ACADEMIC_YEAR")
    log.set_payload({"id": id})
    try:
        set_current_academic_year(id, log)
        log.write("OK")
        return {"message": "ok"}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/academic-year/delete")
def api_academic_year_delete(id: int = Body(..., embed=True)):
    log = LogContext("DELETE_ACADEMIC_YEAR")
    log.set_payload({"id": id})
    try:
        delete_academic_year(id, log)
        log.write("OK")
        return {"message": "ok"}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)
