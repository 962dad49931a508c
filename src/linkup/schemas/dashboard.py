"""Dashboard response schemas."""

from typing import List

from pydantic import BaseModel, Field

from .post import PostRead
from .social import EventRead


class PlatformStats(BaseModel):
    students: int = Field(..., ge=0)
    courses: int = Field(..., ge=0)
    faculties: int = Field(..., ge=0)
    campuses: int = Field(..., ge=0)
    groups: int = Field(..., ge=0)
    events: int = Field(..., ge=0)
    links: int = Field(..., ge=0)
    posts: int = Field(..., ge=0)


class PlatformStatsResponse(BaseModel):
    stats: PlatformStats


class StudentStats(BaseModel):
    links: int = Field(0, ge=0)
    groups: int = Field(0, ge=0)
    events: int = Field(0, ge=0)
    classes: int = Field(0, ge=0)
    badges: int = Field(0, ge=0)
    posts: int = Field(0, ge=0)


class StudentDashboard(BaseModel):
    stats: StudentStats
    recentPosts: List[PostRead] = Field(default_factory=list)
    upcomingEvents: List[EventRead] = Field(default_factory=list)
