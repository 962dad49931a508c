"""Pydantic schemas for classes, enrollments and badges."""

from datetime import date, datetime, time
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ClassCreate(BaseModel):
    class_name: str = Field(..., min_length=1, max_length=100)
    module_id: Optional[int] = None
    class_time: time
    class_date: date
    duration_minutes: int = Field(..., gt=0)
    location: str = Field(..., min_length=1, max_length=200)
    instructor: str = Field(..., min_length=1, max_length=100)


class ClassRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    class_name: str
    module_id: Optional[int] = None
    class_time: time
    class_date: date
    duration_minutes: int
    location: str
    instructor: str
    module_name: Optional[str] = None


class ClassEnvelope(BaseModel):
    # "class" is a keyword, so the attribute is aliased on the wire.
    model_config = ConfigDict(populate_by_name=True)

    message: str
    class_: ClassRead = Field(..., alias="class")


class ClassList(BaseModel):
    classes: List[ClassRead]


class BadgeCreate(BaseModel):
    badge_name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    student_number: str = Field(..., pattern=r"^[0-9]{9}$")


class BadgeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    badge_name: str
    description: Optional[str] = None
    student_number: str
    awarded_at: datetime


class BadgeEnvelope(BaseModel):
    message: str
    badge: BadgeRead


class BadgeList(BaseModel):
    badges: List[BadgeRead]
