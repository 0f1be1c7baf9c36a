from __future__ import annotations

# campussync/db.py
import os
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator

import yaml

# 路径解析顺序：
# 1) 环境变量 CAMPUSSYNC_DB_PATH / CAMPUSSYNC_DATA_DIR（最高优先级）
# 2) config.yaml 的 test_db_path（当检测到测试环境时）
# 3) config.yaml 的 db_path / data_dir
# 4) 兜底：项目根 data/campussync.db
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
_DEFAULT_DATA_DIR = os.path.join(_PROJECT_ROOT, "data")
DB_FILENAME = "campussync.db"

# One connection shared by every caller, serialized by this lock.
_lock = threading.RLock()
_conn: sqlite3.Connection | None = None
_conn_path: str | None = None


def _read_config_yaml() -> dict:
    cfg_path = os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    out = {}
    for k in ("db_path", "test_db_path", "data_dir"):
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    return out


def _is_test_env() -> bool:
    return (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)


def get_data_dir() -> str:
    """Application data directory: holds the database, documents and images."""
    path = os.environ.get("CAMPUSSYNC_DATA_DIR") or _read_config_yaml().get("data_dir") or _DEFAULT_DATA_DIR
    os.makedirs(path, exist_ok=True)
    return path


def get_db_path() -> str:
    env_path = os.environ.get("CAMPUSSYNC_DB_PATH")
    cfg = _read_config_yaml()
    cfg_db = cfg.get("db_path")
    cfg_test = cfg.get("test_db_path")

    if env_path:
        path = env_path
    elif _is_test_env() and cfg_test:
        path = cfg_test
    elif cfg_db:
        path = cfg_db
    else:
        path = os.path.join(get_data_dir(), DB_FILENAME)

    # 确保目录存在
    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


def _open(path: str) -> sqlite3.Connection:
    conn = sqlite3.connect(path, check_same_thread=False, isolation_level=None)
    conn.execute("PRAGMA foreign_keys = ON;")
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """
    Hold the shared SQLite connection for the duration of the block.

    The connection is opened lazily and reopened when the resolved path
    changes (tests point CAMPUSSYNC_DB_PATH at a temp file). It runs in
    autocommit mode; use ``transaction()`` for multi-statement atomic work.
    """
    global _conn, _conn_path
    path = db_path or get_db_path()
    with _lock:
        if _conn is None or _conn_path != path:
            if _conn is not None:
                _conn.close()
            _conn = _open(path)
            _conn_path = path
        yield _conn


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    conn.execute("BEGIN")
    try:
        yield conn
    except BaseException:
        conn.execute("ROLLBACK")
        raise
    else:
        conn.execute("COMMIT")


def close_conn() -> None:
    global _conn, _conn_path
    with _lock:
        if _conn is not None:
            _conn.close()
        _conn = None
        _conn_path = None
