from __future__ import annotations

import sqlite3

from fastapi import APIRouter, HTTPException

from .. import __version__
from ..services.utils import NotFoundError

router = APIRouter()

APP_NAME = "campussync-api"


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/version")
def version():
    return {"app": APP_NAME, "version": __version__}


def http_error(e: Exception) -> HTTPException:
    """Map a service exception to an HTTP error whose detail is the error string."""
    if isinstance(e, HTTPException):
        return e
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, (ValueError, sqlite3.IntegrityError)):
        return HTTPException(status_code=400, detail=str(e))
    return HTTPException(status_code=500, detail=str(e))
