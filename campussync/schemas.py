# campussync/schemas.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ===== academic year =====
class AcademicYearUpsert(BaseModel):
    year: str = Field(..., min_length=1, description="label, e.g. 2024-25")
    set_as_current: bool = False


# ===== class =====
class ClassIn(BaseModel):
    class_name: str = Field(..., min_length=1)
    academic_year: str
    status: Optional[str] = None


# ===== staff =====
class StaffIn(BaseModel):
    name: str
    gender: str
    dob: str
    phone: str
    alt_phone: Optional[str] = None
    email: str
    qualification: str
    designation: str
    department: str
    joining_date: str
    employment_type: str
    photo_url: Optional[str] = None
    status: Optional[str] = None


# ===== school =====
class SchoolIn(BaseModel):
    school_name: str
    school_board: str
    school_medium: str
    principal_name: str
    contact_number: str
    alternate_contact_number: Optional[str] = None
    school_email: str
    address: str
    city: str
    state: str
    pincode: str
    website: Optional[str] = None
    school_image: Optional[str] = None


# ===== enquiry =====
class EnquiryIn(BaseModel):
    student_name: str
    parent_name: str
    phone: str
    email: Optional[str] = None
    source: str
    status: Optional[str] = None


class EnquiryStatus(BaseModel):
    status: str


class NoteIn(BaseModel):
    enquiry_id: int
    notes: str


class FollowUpIn(BaseModel):
    enquiry_id: int
    notes: str
    status: str
    follow_up_date: Optional[str] = None  # YYYY-MM-DD


# ===== student: one model per admission-form step =====
class StudentCore(BaseModel):
    id: Optional[int] = None  # present => update the core columns of that row
    gr_number: str
    roll_number: Optional[str] = None
    full_name: str
    dob: Optional[str] = None
    gender: str
    mother_name: str
    father_name: str
    father_occupation: Optional[str] = None
    mother_occupation: Optional[str] = None
    annual_income: Optional[float] = None
    nationality: Optional[str] = None
    profile_image: Optional[str] = None
    class_id: int
    section: Optional[str] = None
    academic_year: Optional[str] = None


class StudentContact(BaseModel):
    email: Optional[str] = None
    mobile_number: Optional[str] = None
    alternate_contact_number: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    guardian_contact_info: Optional[str] = None


class StudentHealth(BaseModel):
    blood_group: Optional[str] = None
    status: Optional[str] = None
    admission_date: Optional[str] = None
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    hb_range: Optional[str] = None
    medical_conditions: Optional[str] = None
    emergency_contact_person: Optional[str] = None
    emergency_contact: Optional[str] = None


class StudentDocs(BaseModel):
    birth_certificate: Optional[str] = None
    transfer_certificate: Optional[str] = None
    previous_academic_records: Optional[str] = None
    address_proof: Optional[str] = None
    id_proof: Optional[str] = None
    passport_photo: Optional[str] = None
    medical_certificate: Optional[str] = None
    vaccination_certificate: Optional[str] = None
    other_documents: Optional[str] = None


class Student(StudentCore, StudentContact, StudentHealth, StudentDocs):
    """All four views flattened into one record (bulk import rows)."""


class StudentBulk(BaseModel):
    students: list[Student]


class StudentFileUpload(BaseModel):
    id: int
    file_name: str
    file_bytes: list[int]  # raw bytes as sent by the desktop shell


class ImageUpload(BaseModel):
    filename: str
    data: list[int]
