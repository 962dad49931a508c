"""Pydantic schemas for campuses, faculties, courses and modules."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CampusCreate(BaseModel):
    campus_name: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=200)
    campus_size: Optional[Decimal] = Field(None, ge=0)


class CampusUpdate(BaseModel):
    campus_name: Optional[str] = Field(None, min_length=1, max_length=100)
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    campus_size: Optional[Decimal] = Field(None, ge=0)


class CampusRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    campus_name: str
    location: str
    campus_size: Optional[float] = None


class CampusEnvelope(BaseModel):
    message: str
    campus: CampusRead


class CampusList(BaseModel):
    campuses: List[CampusRead]


class FacultyCreate(BaseModel):
    faculty_name: str = Field(..., min_length=1, max_length=150)
    office_address: Optional[str] = None
    description: Optional[str] = None


class FacultyRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    faculty_name: str
    office_address: Optional[str] = None
    description: Optional[str] = None


class FacultyEnvelope(BaseModel):
    message: str
    faculty: FacultyRead


class FacultyList(BaseModel):
    faculties: List[FacultyRead]


class CourseCreate(BaseModel):
    faculty_id: Optional[int] = None
    course_name: str = Field(..., min_length=1, max_length=200)
    credits: int = Field(..., gt=0)
    number_of_modules: int = Field(..., gt=0)
    course_code: str = Field(..., min_length=1, max_length=20)


class CourseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    faculty_id: Optional[int] = None
    course_name: str
    credits: int
    number_of_modules: int
    course_code: str
    faculty_name: Optional[str] = None


class CourseEnvelope(BaseModel):
    message: str
    course: CourseRead


class CourseList(BaseModel):
    courses: List[CourseRead]


class ModuleCreate(BaseModel):
    module_name: str = Field(..., min_length=1, max_length=200)
    module_code: str = Field(..., min_length=1, max_length=20)
    credits: int = Field(..., gt=0)
    module_cost: Optional[Decimal] = Field(None, ge=0)


class ModuleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    module_name: str
    module_code: str
    credits: int
    module_cost: Optional[float] = None


class ModuleEnvelope(BaseModel):
    message: str
    module: ModuleRead


class ModuleList(BaseModel):
    modules: List[ModuleRead]
