from __future__ import annotations

import logging

from ..db import get_conn
from ..logs import LogContext
from ..repository import school_repo
from ..storage import FileStorageError
from .image_svc import delete_image
from .utils import row_to_dict

logger = logging.getLogger(__name__)


def get_school_details() -> dict | None:
    with get_conn() as conn:
        school = row_to_dict(school_repo.get_first(conn))
    if school is not None:
        school["is_active"] = bool(school["is_active"])
    return school


def _image_name(ref: str) -> str:
    return ref.split("/")[-1]


def upsert_school_details(data: dict, log: LogContext | None = None) -> int:
    """
    Keep exactly one school profile: update the existing row, or insert the first.
    A replaced school image is removed from the images directory.
    """
    with get_conn() as conn:
        existing = row_to_dict(school_repo.get_first(conn))
        if existing is None:
            school_id = school_repo.insert(conn, data)
        else:
            school_id = existing["id"]
            old_image, new_image = existing.get("school_image"), data.get("school_image")
            if old_image and new_image and old_image != new_image:
                try:
                    delete_image(_image_name(old_image))
                except (FileStorageError, ValueError) as e:
                    # stale image is left behind; the profile update still goes through
                    logger.warning("could not remove old school image %s: %s", old_image, e)
            school_repo.update(conn, school_id, data)
        after = row_to_dict(school_repo.get_first(conn))
    if log:
        log.set_entity("SCHOOL", school_id)
        log.set_before(existing)
        log.set_after(after)
    return school_id
