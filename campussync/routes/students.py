from __future__ import annotations

from fastapi import APIRouter, Query

from ..logs import LogContext
from ..schemas import StudentBulk, StudentContact, StudentCore, StudentDocs, StudentFileUpload, StudentHealth
from ..services import student_svc
from .base import http_error

router = APIRouter()


@router.get("/api/student/list")
def api_student_list():
    return student_svc.get_students()


@router.get("/api/student/idcards")
def api_student_idcards():
    return student_svc.get_all_students_for_idcards()


@router.get("/api/student/document/path")
def api_student_document_path(file_name: str = Query(..., min_length=1)):
    try:
        return {"path": student_svc.get_student_document_path(file_name)}
    except Exception as e:
        raise http_error(e)


@router.get("/api/student/document/base64")
def api_student_document_base64(file_name: str = Query(..., min_length=1)):
    try:
        return {"data_url": student_svc.get_student_document_base64(file_name)}
    except Exception as e:
        raise http_error(e)


@router.get("/api/student/{student_id}")
def api_student_get(student_id: int):
    try:
        return student_svc.get_students(student_id)[0]
    except Exception as e:
        raise http_error(e)


@router.post("/api/student/step1")
def api_student_step1(body: StudentCore):
    log = LogContext("STUDENT_STEP1")
    log.set_payload(body.model_dump())
    try:
        student_id = student_svc.create_student1(body.model_dump(), log)
        log.write("OK")
        return {"message": "ok", "id": student_id}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


def _run_step(action: str, step, student_id: int, payload: dict):
    log = LogContext(action)
    log.set_payload(payload)
    try:
        step(payload, student_id, log)
        log.write("OK")
        return {"message": "ok", "id": student_id}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/student/{student_id}/step2")
def api_student_step2(student_id: int, body: StudentContact):
    return _run_step("STUDENT_STEP2", student_svc.create_student2, student_id, body.model_dump())


@router.post("/api/student/{student_id}/step3")
def api_student_step3(student_id: int, body: StudentHealth):
    return _run_step("STUDENT_STEP3", student_svc.create_student3, student_id, body.model_dump())


@router.post("/api/student/{student_id}/step4")
def api_student_step4(student_id: int, body: StudentDocs):
    return _run_step("STUDENT_STEP4", student_svc.create_student4, student_id, body.model_dump())


@router.post("/api/student/bulk", status_code=201)
def api_student_bulk(body: StudentBulk):
    log = LogContext("STUDENT_BULK_INSERT")
    log.set_payload({"count": len(body.students)})
    try:
        ids = student_svc.excel_bulk_insert([s.model_dump() for s in body.students], log)
        log.write("OK")
        return {"message": "ok", "ids": ids}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/student/{student_id}/delete")
def api_student_delete(student_id: int):
    log = LogContext("DELETE_STUDENT")
    try:
        removed = student_svc.delete_student(student_id, log)
        log.write("OK")
        return {"message": "ok", "removed_files": removed}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/student/upload")
def api_student_upload(body: StudentFileUpload):
    log = LogContext("UPLOAD_STUDENT_FILE")
    log.set_payload({"id": body.id, "file_name": body.file_name, "size": len(body.file_bytes)})
    try:
        path = student_svc.upload_student_file(body.id, body.file_name, bytes(body.file_bytes))
        log.set_entity("STUDENT", body.id)
        log.write("OK")
        return {"message": "ok", "path": path}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)
