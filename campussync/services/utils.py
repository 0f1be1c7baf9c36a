from __future__ import annotations

# campussync/services/utils.py
from sqlite3 import Row
from typing import Any, Iterable, Optional


class NotFoundError(LookupError):
    """A record addressed by id does not exist."""


def row_to_dict(row: Optional[Row]) -> Optional[dict[str, Any]]:
    return dict(row) if row is not None else None


def rows_to_dicts(rows: Iterable[Row]) -> list[dict[str, Any]]:
    return [dict(r) for r in rows]
