"""
学生服务测试：四步录入、批量导入、文档上传/删除
"""
import base64
from pathlib import Path

import pytest

from campussync.services import student_svc
from campussync.services.utils import NotFoundError


def test_four_step_flow_builds_one_row(class_id, core_payload):
    sid = student_svc.create_student1(core_payload(class_id))
    student_svc.create_student2({"email": "asha@example.com", "mobile_number": "9000000001", "city": "Pune"}, sid)
    student_svc.create_student3({"blood_group": "B+", "status": "active", "weight_kg": 31.5}, sid)
    student_svc.create_student4({"birth_certificate": f"{sid}_birth_certificate.pdf"}, sid)

    [s] = student_svc.get_students(sid)
    assert s["full_name"] == "Asha Patil"
    assert s["class_name"] == "Grade 5"
    assert s["city"] == "Pune"
    assert s["blood_group"] == "B+"
    assert s["weight_kg"] == 31.5
    assert s["birth_certificate"] == f"{sid}_birth_certificate.pdf"
    # untouched column groups stay NULL
    assert s["transfer_certificate"] is None


def test_step1_with_id_updates_core(class_id, core_payload):
    sid = student_svc.create_student1(core_payload(class_id))
    again = student_svc.create_student1(core_payload(class_id, id=sid, full_name="Asha P."))
    assert again == sid
    rows = student_svc.get_students()
    assert len(rows) == 1
    assert rows[0]["full_name"] == "Asha P."


def test_step1_rejects_unknown_class(core_payload):
    with pytest.raises(ValueError) as ei:
        student_svc.create_student1(core_payload(777))
    assert str(ei.value) == "Class with id 777 does not exist"


def test_step1_rejects_duplicate_gr_number(class_id, core_payload):
    student_svc.create_student1(core_payload(class_id))
    with pytest.raises(ValueError) as ei:
        student_svc.create_student1(core_payload(class_id, full_name="Other"))
    assert "GR number GR-001 already exists" in str(ei.value)


def test_later_steps_need_existing_row():
    with pytest.raises(NotFoundError):
        student_svc.create_student2({"email": "x@example.com"}, 999)
    with pytest.raises(NotFoundError):
        student_svc.get_students(999)


def test_bulk_insert_is_all_or_nothing(class_id, core_payload):
    rows = [core_payload(class_id, gr_number="GR-10"), core_payload(class_id, gr_number="GR-11")]
    ids = student_svc.excel_bulk_insert(rows)
    assert len(ids) == 2

    bad = [core_payload(class_id, gr_number="GR-12"), core_payload(class_id, gr_number="GR-12")]
    with pytest.raises(ValueError):
        student_svc.excel_bulk_insert(bad)
    assert {s["gr_number"] for s in student_svc.get_students()} == {"GR-10", "GR-11"}


def test_idcard_listing(class_id, core_payload):
    student_svc.create_student1(core_payload(class_id))
    [card] = student_svc.get_all_students_for_idcards()
    assert card["class_name"] == "Grade 5"
    assert "medical_conditions" not in card


def test_upload_names_file_by_id_and_type(data_dir):
    path = student_svc.upload_student_file(7, "birth_certificate.png", b"\x89PNG")
    assert path == str(data_dir / "Students_Documents" / "7_birth_certificate.png")
    no_ext = student_svc.upload_student_file(7, "aadhaar", b"%PDF")
    assert no_ext.endswith("7_aadhaar.pdf")


def test_document_base64_data_url():
    student_svc.upload_student_file(3, "photo.jpg", b"abc")
    url = student_svc.get_student_document_base64("3_photo.jpg")
    assert url == "data:image/jpeg;base64," + base64.b64encode(b"abc").decode()

    student_svc.upload_student_file(3, "notes.docx", b"x")
    assert student_svc.get_student_document_base64("3_notes.docx").startswith("data:application/octet-stream;base64,")

    with pytest.raises(NotFoundError):
        student_svc.get_student_document_base64("missing.pdf")


def test_delete_student_removes_documents(class_id, core_payload, data_dir):
    sid = student_svc.create_student1(core_payload(class_id))
    kept = student_svc.upload_student_file(100000, "id_proof.pdf", b"keep")
    student_svc.upload_student_file(sid, "birth_certificate.pdf", b"1")
    student_svc.upload_student_file(sid, "id_proof.pdf", b"2")
    student_svc.create_student4({
        "birth_certificate": f"{sid}_birth_certificate.pdf",
        "id_proof": f"{sid}_id_proof.pdf",
        "other_documents": f"{sid}_never_uploaded.pdf",
    }, sid)

    removed = student_svc.delete_student(sid)

    assert sorted(removed) == sorted([f"{sid}_birth_certificate.pdf", f"{sid}_id_proof.pdf"])
    assert student_svc.get_students() == []
    docs = data_dir / "Students_Documents"
    assert not (docs / f"{sid}_birth_certificate.pdf").exists()
    assert (docs / "100000_id_proof.pdf").exists()
    assert kept.endswith("100000_id_proof.pdf")


def test_bulk_insert_rolls_back_on_unknown_class(class_id, core_payload):
    rows = [core_payload(class_id, gr_number="GR-20"), core_payload(9999, gr_number="GR-21")]
    with pytest.raises(ValueError) as ei:
        student_svc.excel_bulk_insert(rows)
    assert str(ei.value) == "Class with id 9999 does not exist"
    assert student_svc.get_students() == []


def test_delete_student_removes_document_stored_as_full_path(class_id, core_payload):
    sid = student_svc.create_student1(core_payload(class_id))
    p = student_svc.upload_student_file(sid, "transfer_certificate.pdf", b"tc")
    student_svc.create_student4({"transfer_certificate": p}, sid)

    assert student_svc.delete_student(sid) == [p]
    assert not Path(p).exists()
