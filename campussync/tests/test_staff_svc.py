"""
教职工服务测试：CRUD + 路由
"""
import pytest

from campussync.services import staff_svc
from campussync.services.utils import NotFoundError


def _staff(**overrides):
    data = {
        "name": "Neha Joshi",
        "gender": "F",
        "dob": "1988-03-14",
        "phone": "9800000001",
        "alt_phone": None,
        "email": "neha@sunrise.example",
        "qualification": "M.Sc, B.Ed",
        "designation": "Teacher",
        "department": "Science",
        "joining_date": "2019-06-10",
        "employment_type": "full_time",
        "photo_url": None,
        "status": None,
    }
    data.update(overrides)
    return data


def test_create_and_get_defaults_status():
    sid = staff_svc.create_staff(_staff())
    s = staff_svc.get_staff(sid)
    assert s["name"] == "Neha Joshi"
    assert s["department"] == "Science"
    assert s["status"] == "active"


def test_list_is_newest_first():
    first = staff_svc.create_staff(_staff(name="A"))
    second = staff_svc.create_staff(_staff(name="B"))
    assert [s["id"] for s in staff_svc.get_all_staffs()] == [second, first]


def test_update_resets_missing_status_to_active():
    sid = staff_svc.create_staff(_staff(status="on_leave"))
    assert staff_svc.get_staff(sid)["status"] == "on_leave"
    after = staff_svc.update_staff(sid, _staff(designation="Head of Science"))
    assert after["designation"] == "Head of Science"
    assert after["status"] == "active"


def test_delete_staff():
    sid = staff_svc.create_staff(_staff())
    staff_svc.delete_staff(sid)
    assert staff_svc.get_all_staffs() == []
    # deleting again is not an error
    staff_svc.delete_staff(sid)


def test_unknown_staff_id():
    with pytest.raises(NotFoundError) as ei:
        staff_svc.get_staff(999)
    assert str(ei.value) == "staff_not_found"
    with pytest.raises(NotFoundError):
        staff_svc.update_staff(999, _staff())


def test_staff_routes(client):
    res = client.post("/api/staff/create", json=_staff())
    assert res.status_code == 201
    sid = res.json()["id"]

    assert client.get(f"/api/staff/{sid}").json()["email"] == "neha@sunrise.example"
    assert [s["id"] for s in client.get("/api/staff/list").json()] == [sid]

    res = client.post(f"/api/staff/{sid}/update", json=_staff(phone="9800000002"))
    assert res.status_code == 200
    assert res.json()["item"]["phone"] == "9800000002"

    assert client.post(f"/api/staff/{sid}/delete").status_code == 200
    assert client.get(f"/api/staff/{sid}").status_code == 404
