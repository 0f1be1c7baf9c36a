"""
Command registry for the desktop shell.

The UI calls the backend by command name with a JSON object of arguments
(camelCase keys, as the shell sends them), e.g.::

    POST /invoke/get_enquiry_notes   {"enquiryId": 3}

``dispatch`` validates the arguments against the command's model, runs the
service function and returns its result. Every failure surfaces as an
exception whose ``str()`` is the message shown to the user.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .logs import LogContext
from .schemas import (
    ClassIn,
    EnquiryIn,
    FollowUpIn,
    NoteIn,
    SchoolIn,
    StaffIn,
    Student,
    StudentContact,
    StudentCore,
    StudentDocs,
    StudentHealth,
)
from .services import (
    academic_year_svc,
    class_svc,
    enquiry_svc,
    image_svc,
    school_svc,
    staff_svc,
    student_svc,
)
from .services.utils import NotFoundError
from .storage import read_file_content

logger = logging.getLogger(__name__)

# keys never copied into the audit payload
_BULKY_KEYS = {"file_bytes", "data", "students"}


class Args(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NoArgs(Args):
    pass


class IdArgs(Args):
    id: int


class OptionalIdArgs(Args):
    id: Optional[int] = None


class EnquiryIdArgs(Args):
    enquiry_id: int


class UpsertYearArgs(Args):
    year: str
    set_as_current: bool = False


class ClassArgs(Args):
    class_: ClassIn = Field(alias="class")


class ClassUpdateArgs(IdArgs):
    class_: ClassIn = Field(alias="class")


class StaffArgs(Args):
    staff: StaffIn


class StaffUpdateArgs(IdArgs):
    staff: StaffIn


class SchoolArgs(Args):
    school_details: SchoolIn


class EnquiryArgs(Args):
    enquiry: EnquiryIn


class EnquiryUpdateArgs(IdArgs):
    enquiry: EnquiryIn


class EnquiryStatusArgs(IdArgs):
    status: str


class FollowUpArgs(Args):
    follow_up: FollowUpIn


class NoteArgs(Args):
    note: NoteIn


class FlatNoteArgs(Args):
    enquiry_id: int
    notes: str


class CoreArgs(Args):
    core: StudentCore


class ContactArgs(IdArgs):
    contact: StudentContact


class HealthArgs(IdArgs):
    health: StudentHealth


class DocsArgs(IdArgs):
    docs: StudentDocs


class BulkArgs(Args):
    students: list[Student]


class UploadArgs(IdArgs):
    file_name: str
    file_bytes: list[int]


class FileNameArgs(Args):
    file_name: str


class ImageNameArgs(Args):
    filename: str


class SaveImageArgs(Args):
    filename: str
    data: list[int]


class PathArgs(Args):
    path: str


@dataclass(frozen=True)
class Command:
    name: str
    handler: Callable[[Any, Optional[LogContext]], Any]
    args: type[Args]
    action: Optional[str] = None  # audit action; None for reads


COMMANDS: dict[str, Command] = {}


def command(name: str, args: type[Args] = NoArgs, action: str | None = None):
    def deco(fn):
        COMMANDS[name] = Command(name, fn, args, action)
        return fn
    return deco


def dispatch(name: str, payload: dict | None = None) -> Any:
    cmd = COMMANDS.get(name)
    if cmd is None:
        raise NotFoundError(f"unknown command: {name}")
    args = cmd.args.model_validate(payload or {})
    if cmd.action is None:
        return cmd.handler(args, None)

    log = LogContext(cmd.action)
    log.set_payload(args.model_dump(mode="json", exclude=_BULKY_KEYS))
    try:
        result = cmd.handler(args, log)
    except Exception as e:
        log.write("ERROR", str(e))
        raise
    log.write("OK")
    return result


# ===== files =====
@command("read_file_content", PathArgs)
def _read_file_content(a: PathArgs, log):
    return list(read_file_content(a.path))


# ===== academic years =====
@command("upsert_academic_year", UpsertYearArgs, "UPSERT_ACADEMIC_YEAR")
def _upsert_academic_year(a: UpsertYearArgs, log):
    return academic_year_svc.upsert_academic_year(a.year, a.set_as_current, log)


@command("get_current_academic_year")
def _get_current_academic_year(a, log):
    return academic_year_svc.get_current_academic_year()


@command("get_all_academic_years")
def _get_all_academic_years(a, log):
    return academic_year_svc.get_all_academic_years()


@command("set_current_academic_year", IdArgs, "SET_CURRENT_ACADEMIC_YEAR")
def _set_current_academic_year(a: IdArgs, log):
    academic_year_svc.set_current_academic_year(a.id, log)


@command("delete_academic_year", IdArgs, "DELETE_ACADEMIC_YEAR")
def _delete_academic_year(a: IdArgs, log):
    academic_year_svc.delete_academic_year(a.id, log)


# ===== school =====
@command("get_school_details")
def _get_school_details(a, log):
    return school_svc.get_school_details()


@command("upsert_school_details", SchoolArgs, "UPSERT_SCHOOL")
def _upsert_school_details(a: SchoolArgs, log):
    return school_svc.upsert_school_details(a.school_details.model_dump(), log)


# ===== classes =====
@command("create_class", ClassArgs, "CREATE_CLASS")
def _create_class(a: ClassArgs, log):
    c = a.class_
    return class_svc.create_class(c.class_name, c.academic_year, c.status, log)


@command("get_class", IdArgs)
def _get_class(a: IdArgs, log):
    return class_svc.get_class(a.id)


@command("get_all_classes")
def _get_all_classes(a, log):
    return class_svc.get_all_classes()


@command("update_class", ClassUpdateArgs, "UPDATE_CLASS")
def _update_class(a: ClassUpdateArgs, log):
    c = a.class_
    class_svc.update_class(a.id, c.class_name, c.academic_year, c.status, log)


@command("delete_class", IdArgs, "DELETE_CLASS")
def _delete_class(a: IdArgs, log):
    class_svc.delete_class(a.id, log)


# ===== staff =====
@command("create_staff", StaffArgs, "CREATE_STAFF")
def _create_staff(a: StaffArgs, log):
    return staff_svc.create_staff(a.staff.model_dump(), log)


@command("get_staff", IdArgs)
def _get_staff(a: IdArgs, log):
    return staff_svc.get_staff(a.id)


@command("get_all_staffs")
def _get_all_staffs(a, log):
    return staff_svc.get_all_staffs()


@command("update_staff", StaffUpdateArgs, "UPDATE_STAFF")
def _update_staff(a: StaffUpdateArgs, log):
    staff_svc.update_staff(a.id, a.staff.model_dump(), log)


@command("delete_staff", IdArgs, "DELETE_STAFF")
def _delete_staff(a: IdArgs, log):
    staff_svc.delete_staff(a.id, log)


# ===== enquiries =====
@command("create_enquiry", EnquiryArgs, "CREATE_ENQUIRY")
def _create_enquiry(a: EnquiryArgs, log):
    return enquiry_svc.create_enquiry(a.enquiry.model_dump(), log)


@command("get_enquiry", IdArgs)
def _get_enquiry(a: IdArgs, log):
    return enquiry_svc.get_enquiry(a.id)


@command("get_all_enquiries")
def _get_all_enquiries(a, log):
    return enquiry_svc.get_all_enquiries()


@command("update_enquiry", EnquiryUpdateArgs, "UPDATE_ENQUIRY")
def _update_enquiry(a: EnquiryUpdateArgs, log):
    enquiry_svc.update_enquiry(a.id, a.enquiry.model_dump(), log)


@command("delete_enquiry", IdArgs, "DELETE_ENQUIRY")
def _delete_enquiry(a: IdArgs, log):
    enquiry_svc.delete_enquiry(a.id, log)


@command("update_enquiry_status", EnquiryStatusArgs, "UPDATE_ENQUIRY_STATUS")
def _update_enquiry_status(a: EnquiryStatusArgs, log):
    enquiry_svc.update_enquiry_status(a.id, a.status, log)


@command("add_enquiry_follow_up", FollowUpArgs, "ADD_FOLLOW_UP")
def _add_enquiry_follow_up(a: FollowUpArgs, log):
    f = a.follow_up
    return enquiry_svc.add_enquiry_follow_up(f.enquiry_id, f.notes, f.status, f.follow_up_date, log)


@command("get_enquiry_follow_ups", EnquiryIdArgs)
def _get_enquiry_follow_ups(a: EnquiryIdArgs, log):
    return enquiry_svc.get_enquiry_follow_ups(a.enquiry_id)


@command("create_note", NoteArgs, "ADD_NOTE")
def _create_note(a: NoteArgs, log):
    return enquiry_svc.create_note(a.note.enquiry_id, a.note.notes, log)


@command("add_enquiry_note", FlatNoteArgs, "ADD_NOTE")
def _add_enquiry_note(a: FlatNoteArgs, log):
    return enquiry_svc.add_enquiry_note(a.enquiry_id, a.notes, log)


@command("get_enquiry_notes", EnquiryIdArgs)
def _get_enquiry_notes(a: EnquiryIdArgs, log):
    return enquiry_svc.get_enquiry_notes(a.enquiry_id)


# ===== students =====
@command("create_student1", CoreArgs, "STUDENT_STEP1")
def _create_student1(a: CoreArgs, log):
    return student_svc.create_student1(a.core.model_dump(), log)


@command("create_student2", ContactArgs, "STUDENT_STEP2")
def _create_student2(a: ContactArgs, log):
    student_svc.create_student2(a.contact.model_dump(), a.id, log)


@command("create_student3", HealthArgs, "STUDENT_STEP3")
def _create_student3(a: HealthArgs, log):
    student_svc.create_student3(a.health.model_dump(), a.id, log)


@command("create_student4", DocsArgs, "STUDENT_STEP4")
def _create_student4(a: DocsArgs, log):
    student_svc.create_student4(a.docs.model_dump(), a.id, log)


@command("get_students", OptionalIdArgs)
def _get_students(a: OptionalIdArgs, log):
    return student_svc.get_students(a.id)


@command("get_all_students_for_idcards")
def _get_all_students_for_idcards(a, log):
    return student_svc.get_all_students_for_idcards()


@command("excel_bulk_insert", BulkArgs, "STUDENT_BULK_INSERT")
def _excel_bulk_insert(a: BulkArgs, log):
    return student_svc.excel_bulk_insert([s.model_dump() for s in a.students], log)


@command("delete_student", IdArgs, "DELETE_STUDENT")
def _delete_student(a: IdArgs, log):
    student_svc.delete_student(a.id, log)


@command("upload_student_file", UploadArgs, "UPLOAD_STUDENT_FILE")
def _upload_student_file(a: UploadArgs, log):
    log.set_entity("STUDENT", a.id)
    return student_svc.upload_student_file(a.id, a.file_name, bytes(a.file_bytes))


@command("get_student_document_path", FileNameArgs)
def _get_student_document_path(a: FileNameArgs, log):
    return student_svc.get_student_document_path(a.file_name)


@command("get_student_document_base64", FileNameArgs)
def _get_student_document_base64(a: FileNameArgs, log):
    return student_svc.get_student_document_base64(a.file_name)


# ===== images =====
@command("save_image", SaveImageArgs, "SAVE_IMAGE")
def _save_image(a: SaveImageArgs, log):
    name = image_svc.save_image(a.filename, bytes(a.data))
    log.set_entity("IMAGE", name)
    return name


@command("get_image_path", ImageNameArgs)
def _get_image_path(a: ImageNameArgs, log):
    return image_svc.get_image_path(a.filename)


@command("delete_image", ImageNameArgs, "DELETE_IMAGE")
def _delete_image(a: ImageNameArgs, log):
    log.set_entity("IMAGE", a.filename)
    image_svc.delete_image(a.filename)
