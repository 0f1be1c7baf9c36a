from __future__ import annotations

import logging

from ..db import get_conn
from ..logs import LogContext
from ..repository import class_repo, student_repo
from ..storage import class_folder
from .utils import NotFoundError, row_to_dict, rows_to_dicts

logger = logging.getLogger(__name__)


def create_class(class_name: str, academic_year: str, status: str | None = None, log: LogContext | None = None) -> int:
    status = status or "active"
    with get_conn() as conn:
        class_id = class_repo.insert(conn, class_name, academic_year, status)
        try:
            class_folder(class_name)
        except Exception:
            # 文件夹创建失败则回滚插入
            class_repo.delete(conn, class_id)
            raise
    if log:
        log.set_entity("CLASS", class_id)
        log.set_after({"id": class_id, "class_name": class_name, "academic_year": academic_year, "status": status})
    return class_id


def get_class(class_id: int) -> dict:
    with get_conn() as conn:
        row = class_repo.get_one(conn, class_id)
    if row is None:
        raise NotFoundError("class_not_found")
    return dict(row)


def get_all_classes(academic_year: str | None = None) -> list[dict]:
    with get_conn() as conn:
        return rows_to_dicts(class_repo.list_all(conn, academic_year))


def update_class(class_id: int, class_name: str, academic_year: str, status: str | None = None,
                 log: LogContext | None = None) -> dict:
    with get_conn() as conn:
        before = row_to_dict(class_repo.get_one(conn, class_id))
        if before is None:
            raise NotFoundError("class_not_found")
        class_repo.update(conn, class_id, class_name, academic_year, status or "active")
        after = row_to_dict(class_repo.get_one(conn, class_id))
    if log:
        log.set_entity("CLASS", class_id)
        log.set_before(before)
        log.set_after(after)
    return after


def delete_class(class_id: int, log: LogContext | None = None):
    """
    Delete the class row. The documents folder of the class is kept on disk.
    A class still referenced by students cannot be deleted.
    """
    with get_conn() as conn:
        before = row_to_dict(class_repo.get_one(conn, class_id))
        if before is None:
            raise NotFoundError("class_not_found")
        n = student_repo.count_for_class(conn, class_id)
        if n:
            raise ValueError(f"class has {n} student(s); move or delete them first")
        class_repo.delete(conn, class_id)
    logger.info("deleted class %s (%s)", class_id, before["class_name"])
    if log:
        log.set_entity("CLASS", class_id)
        log.set_before(before)
