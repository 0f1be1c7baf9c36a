from __future__ import annotations

from fastapi import APIRouter, Body, Query
from fastapi.responses import FileResponse, Response

from ..logs import LogContext
from ..schemas import ImageUpload
from ..services.image_svc import delete_image, get_image_path, save_image
from ..storage import read_file_content
from .base import http_error

router = APIRouter()


@router.post("/api/image/save")
def api_image_save(body: ImageUpload):
    log = LogContext("SAVE_IMAGE")
    log.set_payload({"filename": body.filename, "size": len(body.data)})
    try:
        name = save_image(body.filename, bytes(body.data))
        log.set_entity("IMAGE", name)
        log.write("OK")
        return {"message": "ok", "filename": name}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.get("/api/image/path")
def api_image_path(filename: str = Query(..., min_length=1)):
    try:
        return {"path": get_image_path(filename)}
    except Exception as e:
        raise http_error(e)


@router.get("/api/image/file/{filename}")
def api_image_file(filename: str):
    try:
        return FileResponse(get_image_path(filename))
    except Exception as e:
        raise http_error(e)


@router.post("/api/image/delete")
def api_image_delete(filename: str = Body(..., embed=True)):
    log = LogContext("DELETE_IMAGE")
    log.set_entity("IMAGE", filename)
    try:
        removed = delete_image(filename)
        log.write("OK")
        return {"message": "ok", "removed": removed}
    except Exception as e:
        log.write("ERROR", str(e))
        raise http_error(e)


@router.post("/api/file/read")
def api_file_read(path: str = Body(..., embed=True)):
    try:
        return Response(content=read_file_content(path), media_type="application/octet-stream")
    except Exception as e:
        raise http_error(e)
