"""
Student records and their documents.

A student row is built by the four-step admission form:

1. ``create_student1`` - core/general columns (insert, or update when ``id`` is given)
2. ``create_student2`` - contact columns
3. ``create_student3`` - health & admission columns
4. ``create_student4`` - document references

Each step is its own call and commits on its own. Document files live in
``<data_dir>/Students_Documents`` and are named ``{id}_{doc_type}.{ext}``.
"""
from __future__ import annotations

import base64
import logging
from pathlib import Path
from typing import Any, Iterable

from ..db import get_conn, transaction
from ..logs import LogContext
from ..repository import class_repo, student_repo
from ..storage import documents_dir, read_file_content, remove_if_exists, write_bytes
from .utils import NotFoundError, row_to_dict, rows_to_dicts

logger = logging.getLogger(__name__)

MIME_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "pdf": "application/pdf",
}
DEFAULT_MIME = "application/octet-stream"


def _check_class(conn, class_id) -> None:
    if not class_repo.exists(conn, class_id):
        raise ValueError(f"Class with id {class_id} does not exist")


def _check_gr_number(conn, gr_number: str, exclude_id: int | None = None) -> None:
    if student_repo.gr_number_taken(conn, gr_number, exclude_id):
        raise ValueError(f"Student with GR number {gr_number} already exists")


# ===== admission form steps =====
def create_student1(core: dict, log: LogContext | None = None) -> int:
    student_id = core.get("id")
    with get_conn() as conn:
        _check_class(conn, core.get("class_id"))
        _check_gr_number(conn, core["gr_number"], student_id)
        if student_id is not None:
            if student_repo.update_fields(conn, student_id, student_repo.CORE_FIELDS, core) == 0:
                raise NotFoundError("student_not_found")
        else:
            student_id = student_repo.insert_core(conn, core)
    if log:
        log.set_entity("STUDENT", student_id)
        log.set_after({"step": 1, **{k: core.get(k) for k in ("gr_number", "full_name", "class_id")}})
    return student_id


def _update_step(student_id: int, fields: list[str], data: dict, step: int, log: LogContext | None):
    with get_conn() as conn:
        if student_repo.update_fields(conn, student_id, fields, data) == 0:
            raise NotFoundError("student_not_found")
    if log:
        log.set_entity("STUDENT", student_id)
        log.set_after({"step": step, **{f: data.get(f) for f in fields}})


def create_student2(contact: dict, student_id: int, log: LogContext | None = None):
    _update_step(student_id, student_repo.CONTACT_FIELDS, contact, 2, log)


def create_student3(health: dict, student_id: int, log: LogContext | None = None):
    _update_step(student_id, student_repo.HEALTH_FIELDS, health, 3, log)


def create_student4(docs: dict, student_id: int, log: LogContext | None = None):
    documents_dir()
    _update_step(student_id, student_repo.DOC_FIELDS, docs, 4, log)


# ===== reads =====
def get_students(student_id: int | None = None) -> list[dict[str, Any]]:
    with get_conn() as conn:
        rows = student_repo.list_with_class(conn, student_id)
    if student_id is not None and not rows:
        raise NotFoundError("student_not_found")
    return rows_to_dicts(rows)


def get_all_students_for_idcards() -> list[dict[str, Any]]:
    with get_conn() as conn:
        return rows_to_dicts(student_repo.list_for_idcards(conn))


# ===== bulk import =====
def excel_bulk_insert(students: Iterable[dict], log: LogContext | None = None) -> list[int]:
    """Insert a batch of full student records; any invalid row rolls back the whole batch."""
    ids: list[int] = []
    with get_conn() as conn, transaction(conn):
        for s in students:
            _check_class(conn, s.get("class_id"))
            _check_gr_number(conn, s["gr_number"])
            ids.append(student_repo.insert_full(conn, s))
    logger.info("bulk imported %d students", len(ids))
    if log:
        log.set_entity("STUDENT", ",".join(str(i) for i in ids))
        log.set_after({"count": len(ids), "ids": ids})
    return ids


# ===== delete =====
def delete_student(student_id: int, log: LogContext | None = None) -> list[str]:
    """Delete the row, then every referenced document that exists on disk. Returns removed file names."""
    logger.info("Deleting student %s", student_id)
    with get_conn() as conn:
        docs = row_to_dict(student_repo.get_documents(conn, student_id))
        student_repo.delete(conn, student_id)

    removed: list[str] = []
    if docs:
        docs_dir = documents_dir()
        for field in student_repo.DOC_FIELDS:
            ref = docs.get(field)
            if ref and remove_if_exists(docs_dir / ref):
                removed.append(ref)
    if log:
        log.set_entity("STUDENT", student_id)
        log.set_before(docs)
        log.set_after({"removed_files": removed})
    return removed


# ===== documents =====
def upload_student_file(student_id: int, file_name: str, file_bytes: bytes) -> str:
    """Store an uploaded document as ``{id}_{doc_type}.{ext}``; returns the full path."""
    p = Path(file_name)
    ext = p.suffix[1:] if p.suffix else "pdf"
    doc_type = p.stem or "unknown"
    dest = documents_dir() / f"{student_id}_{doc_type}.{ext}"
    write_bytes(dest, file_bytes)
    return str(dest)


def get_student_document_path(file_name: str) -> str:
    return str(documents_dir() / file_name)


def get_student_document_base64(file_name: str) -> str:
    """Read a stored document and return it as a ``data:`` URL."""
    path = get_student_document_path(file_name)
    if not Path(path).is_file():
        raise NotFoundError(f"Document not found: {file_name}")
    content = read_file_content(path)
    mime_type = MIME_TYPES.get(Path(file_name).suffix[1:].lower(), DEFAULT_MIME)
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
