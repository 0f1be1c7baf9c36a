from __future__ import annotations

# campussync/services/image_svc.py
from pathlib import Path

from ..storage import images_dir, remove_if_exists, write_bytes
from .utils import NotFoundError


def _image_path(filename: str) -> Path:
    # bare file names only; no directory parts
    if not filename or Path(filename).name != filename or "\\" in filename:
        raise ValueError("invalid image filename")
    return images_dir() / filename


def save_image(filename: str, data: bytes) -> str:
    """Store an image under <data_dir>/images and return the stored file name."""
    safe_filename = filename.replace(" ", "_")
    write_bytes(_image_path(safe_filename), data)
    return safe_filename


def get_image_path(filename: str) -> str:
    path = _image_path(filename)
    if not path.exists():
        raise NotFoundError("Image not found")
    return str(path)


def delete_image(filename: str) -> bool:
    return remove_if_exists(_image_path(filename))
