"""File-storage helpers under the application data directory.

Layout::

    <data_dir>/
        campussync.db
        Students_Documents/           uploaded student documents
            <class_name>/             one folder per class
        images/                       school / staff / profile images
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from .db import get_data_dir

logger = logging.getLogger(__name__)

DOCUMENTS_DIRNAME = "Students_Documents"
IMAGES_DIRNAME = "images"


class FileStorageError(OSError):
    """Filesystem failure carrying a readable message."""


def _ensure_dir(path: Path, what: str) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileStorageError(f"Failed to create {what} dir: {e}") from e
    return path


def documents_dir() -> Path:
    return _ensure_dir(Path(get_data_dir()) / DOCUMENTS_DIRNAME, "docs")


def images_dir() -> Path:
    return _ensure_dir(Path(get_data_dir()) / IMAGES_DIRNAME, "images")


def class_folder(class_name: str) -> Path:
    """Create (if missing) the documents folder of one class."""
    # one path segment under the documents dir, nothing else
    if (not class_name or class_name in (".", "..") or "\\" in class_name
            or Path(class_name).name != class_name):
        raise FileStorageError(f"Failed to create class folder: invalid class name {class_name!r}")
    folder = Path(get_data_dir()) / DOCUMENTS_DIRNAME / class_name
    try:
        if not folder.exists():
            folder.mkdir(parents=True)
    except (OSError, ValueError) as e:
        # ValueError: embedded NUL byte
        raise FileStorageError(f"Failed to create class folder: {e}") from e
    return folder


def write_bytes(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as e:
        raise FileStorageError(f"Failed to write file: {e}") from e


def read_file_content(path: str | os.PathLike) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileStorageError(f"Failed to read file: {e}") from e


def remove_if_exists(path: Path) -> bool:
    if not path.exists():
        return False
    try:
        path.unlink()
    except OSError as e:
        raise FileStorageError(f"Failed to delete {path.name}: {e}") from e
    logger.info("removed %s", path)
    return True
