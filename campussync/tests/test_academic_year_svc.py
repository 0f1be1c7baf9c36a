import pytest

from campussync.services.academic_year_svc import (
    delete_academic_year,
    get_all_academic_years,
    get_current_academic_year,
    set_current_academic_year,
    upsert_academic_year,
)
from campussync.services.utils import NotFoundError


def test_upsert_inserts_then_reuses_label():
    first = upsert_academic_year("2024-2025", set_as_current=False)
    again = upsert_academic_year("2024-2025", set_as_current=False)
    assert first == again
    years = get_all_academic_years()
    assert len(years) == 1
    assert years[0]["status"] == "inactive"


def test_only_one_year_is_active():
    y1 = upsert_academic_year("2023-2024", set_as_current=True)
    y2 = upsert_academic_year("2024-2025", set_as_current=True)
    statuses = {y["id"]: y["status"] for y in get_all_academic_years()}
    assert statuses == {y1: "inactive", y2: "active"}
    assert get_current_academic_year()["academic_year"] == "2024-2025"

    set_current_academic_year(y1)
    statuses = {y["id"]: y["status"] for y in get_all_academic_years()}
    assert statuses == {y1: "active", y2: "inactive"}


def test_existing_year_can_be_made_current_by_upsert():
    y1 = upsert_academic_year("2023-2024", set_as_current=False)
    upsert_academic_year("2023-2024", set_as_current=True)
    assert get_current_academic_year()["id"] == y1


def test_no_current_year():
    assert get_current_academic_year() is None


def test_set_current_unknown_id_keeps_state():
    y1 = upsert_academic_year("2024-2025", set_as_current=True)
    with pytest.raises(NotFoundError):
        set_current_academic_year(y1 + 100)
    assert get_current_academic_year()["id"] == y1


def test_blank_label_rejected():
    with pytest.raises(ValueError):
        upsert_academic_year("  ", set_as_current=False)


def test_delete_academic_year():
    y1 = upsert_academic_year("2024-2025", set_as_current=False)
    delete_academic_year(y1)
    assert get_all_academic_years() == []
