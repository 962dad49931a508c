"""Pydantic schemas for notifications and ratings."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.sessions import PrincipalKind


class NotificationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    target_type: PrincipalKind
    target_student: Optional[str] = Field(None, pattern=r"^[0-9]{9}$")
    target_admin: Optional[int] = None


class NotificationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    target_type: PrincipalKind
    target_student: Optional[str] = None
    target_admin: Optional[int] = None
    created_at: datetime


class NotificationEnvelope(BaseModel):
    message: str
    notification: NotificationRead


class NotificationList(BaseModel):
    notifications: List[NotificationRead]


class RatingCreate(BaseModel):
    rating_value: int = Field(..., ge=0, le=5)
    rating_description: Optional[str] = None


class RatingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    rator_type: PrincipalKind
    rator_student: Optional[str] = None
    rator_admin: Optional[int] = None
    rating_date: datetime
    rating_value: int
    rating_description: Optional[str] = None
    student_name: Optional[str] = None
    student_surname: Optional[str] = None
    admin_name: Optional[str] = None
    admin_surname: Optional[str] = None


class RatingEnvelope(BaseModel):
    message: str
    rating: RatingRead


class RatingList(BaseModel):
    ratings: List[RatingRead]
