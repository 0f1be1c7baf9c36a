from __future__ import annotations

import logging

from fastapi import APIRouter, Body

from ..commands import COMMANDS, dispatch
from ..services.utils import NotFoundError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/invoke")
def api_invoke_list():
    return sorted(COMMANDS)


@router.post("/invoke/{command}")
def api_invoke(command: str, args: dict | None = Body(None)):
    """Run one registered command; failures come back as ``{"ok": false, "error": "..."}``."""
    try:
        return {"ok": True, "data": dispatch(command, args)}
    except (ValueError, NotFoundError) as e:
        return {"ok": False, "error": str(e)}
    except Exception as e:
        logger.exception("command %s failed", command)
        return {"ok": False, "error": str(e)}
