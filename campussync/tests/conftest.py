import os
import sys
import shutil
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

# child tables first so foreign keys never block the wipe
TABLES = [
    "notes",
    "followups",
    "students",
    "classes",
    "enquiries",
    "staff",
    "schools",
    "academic_years",
    "operation_log",
]


@pytest.fixture(scope="session")
def data_dir(tmp_path_factory):
    path = tmp_path_factory.mktemp("campussync")
    # Point the backend at this temp dir / DB
    os.environ["CAMPUSSYNC_DATA_DIR"] = str(path)
    os.environ["CAMPUSSYNC_DB_PATH"] = str(path / "campussync_test.db")
    from campussync.migrations import ensure_schema
    ensure_schema()
    yield path
    from campussync.db import close_conn
    close_conn()


@pytest.fixture()
def client(data_dir):
    from campussync.api import app
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clean_db(data_dir):
    # Safety: only ever wipe the temp DB, never a real one
    assert os.environ.get("CAMPUSSYNC_DB_PATH", "").startswith(str(data_dir)), "Refusing to clean non-temp DB"
    from campussync.db import get_conn
    with get_conn() as conn:
        for t in TABLES:
            conn.execute(f"DELETE FROM {t}")
    for sub in ("Students_Documents", "images"):
        p = data_dir / sub
        if p.is_dir():
            shutil.rmtree(p)
        elif p.exists():
            p.unlink()
    yield


@pytest.fixture()
def class_id(data_dir):
    from campussync.services.class_svc import create_class
    return create_class("Grade 5", "2024-2025")


@pytest.fixture()
def core_payload():
    """Builder for a valid step-1 (core) payload."""
    def build(class_id, **overrides):
        core = {
            "gr_number": "GR-001",
            "roll_number": "12",
            "full_name": "Asha Patil",
            "dob": "2014-06-01",
            "gender": "F",
            "mother_name": "Meera Patil",
            "father_name": "Ravi Patil",
            "annual_income": 450000.0,
            "nationality": "Indian",
            "class_id": class_id,
            "section": "A",
            "academic_year": "2024-2025",
        }
        core.update(overrides)
        return core
    return build
