"""Pydantic schemas for students, registration and login."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ..models import YearOfStudy

StudentNumber = Field(..., pattern=r"^[0-9]{9}$", description="Nine digit student number.")


class StudentSummary(BaseModel):
    """Lightweight projection of student details."""

    model_config = ConfigDict(from_attributes=True)

    student_number: str
    name: str
    surname: str
    email: str


class StudentRead(StudentSummary):
    """Full student profile without credentials."""

    course_id: Optional[int] = None
    year_of_study: YearOfStudy
    faculty_id: Optional[int] = None
    campus_id: Optional[int] = None
    phone_number: Optional[str] = None
    course_name: Optional[str] = None
    faculty_name: Optional[str] = None
    campus_name: Optional[str] = None


class StudentRegister(BaseModel):
    """Request body for self-registration."""

    student_number: str = StudentNumber
    name: str = Field(..., min_length=1, max_length=100)
    surname: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)
    course_id: Optional[int] = None
    year_of_study: YearOfStudy = YearOfStudy.FIRST_YEAR
    faculty_id: Optional[int] = None
    campus_id: Optional[int] = None
    phone_number: Optional[str] = Field(None, max_length=20)


class StudentUpdate(BaseModel):
    """Self-service profile changes; omitted fields are left untouched."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    surname: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(None, max_length=20)
    year_of_study: Optional[YearOfStudy] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class StudentEnvelope(BaseModel):
    message: str
    student: StudentRead


class StudentProfile(BaseModel):
    student: StudentRead


class StudentList(BaseModel):
    students: List[StudentRead]


class StudentLoginResponse(BaseModel):
    message: str
    sessionId: str
    student: StudentSummary


class AdminSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    admin_id: int
    name: str
    surname: str
    email: str


class AdminLoginResponse(BaseModel):
    message: str
    sessionId: str
    admin: AdminSummary
