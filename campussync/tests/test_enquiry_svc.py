import pytest

from campussync.db import get_conn
from campussync.services import enquiry_svc
from campussync.services.utils import NotFoundError


def _enquiry(**overrides):
    data = {
        "student_name": "Kabir Shah",
        "parent_name": "Nisha Shah",
        "phone": "9876543210",
        "email": None,
        "source": "walk-in",
        "status": None,
    }
    data.update(overrides)
    return data


class TestEnquiry:

    def test_create_defaults_status_new(self):
        eid = enquiry_svc.create_enquiry(_enquiry())
        e = enquiry_svc.get_enquiry(eid)
        assert e["status"] == "new"
        assert e["created_at"] and e["updated_at"]

    def test_list_newest_first_and_filter(self):
        a = enquiry_svc.create_enquiry(_enquiry(student_name="A"))
        b = enquiry_svc.create_enquiry(_enquiry(student_name="B", status="converted"))
        assert [e["id"] for e in enquiry_svc.get_all_enquiries()] == [b, a]
        assert [e["id"] for e in enquiry_svc.get_all_enquiries("converted")] == [b]

    def test_update_keeps_status_when_omitted(self):
        eid = enquiry_svc.create_enquiry(_enquiry(status="contacted"))
        after = enquiry_svc.update_enquiry(eid, _enquiry(phone="111"))
        assert after["phone"] == "111"
        assert after["status"] == "contacted"

    def test_update_status(self):
        eid = enquiry_svc.create_enquiry(_enquiry())
        enquiry_svc.update_enquiry_status(eid, "closed")
        assert enquiry_svc.get_enquiry(eid)["status"] == "closed"
        with pytest.raises(NotFoundError):
            enquiry_svc.update_enquiry_status(eid + 1, "closed")

    def test_missing_enquiry(self):
        with pytest.raises(NotFoundError):
            enquiry_svc.get_enquiry(42)
        with pytest.raises(NotFoundError):
            enquiry_svc.create_note(42, "hello")


class TestNotesAndFollowUps:

    def test_notes_newest_first(self):
        eid = enquiry_svc.create_enquiry(_enquiry())
        n1 = enquiry_svc.create_note(eid, "called parent")
        n2 = enquiry_svc.add_enquiry_note(eid, "visit booked")
        notes = enquiry_svc.get_enquiry_notes(eid)
        assert [n["id"] for n in notes] == [n2, n1]
        assert notes[0]["notes"] == "visit booked"

    def test_follow_ups(self):
        eid = enquiry_svc.create_enquiry(_enquiry())
        fid = enquiry_svc.add_enquiry_follow_up(eid, "call back", "pending", "2025-01-10")
        items = enquiry_svc.get_enquiry_follow_ups(eid)
        assert len(items) == 1
        assert items[0]["id"] == fid
        assert items[0]["follow_up_date"] == "2025-01-10"

    def test_delete_cascades(self):
        eid = enquiry_svc.create_enquiry(_enquiry())
        enquiry_svc.create_note(eid, "n")
        enquiry_svc.add_enquiry_follow_up(eid, "f", "pending")
        enquiry_svc.delete_enquiry(eid)
        with get_conn() as conn:
            assert conn.execute("SELECT COUNT(1) FROM notes").fetchone()[0] == 0
            assert conn.execute("SELECT COUNT(1) FROM followups").fetchone()[0] == 0
