"""Pydantic schemas for groups, links and events."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GroupCreate(BaseModel):
    group_name: str = Field(..., min_length=1, max_length=100)
    group_description: Optional[str] = None
    max_size: int = Field(..., gt=0)


class GroupUpdate(BaseModel):
    group_name: Optional[str] = Field(None, min_length=1, max_length=100)
    group_description: Optional[str] = None
    max_size: Optional[int] = Field(None, gt=0)


class GroupRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    group_name: str
    group_description: Optional[str] = None
    group_size: int
    max_size: int
    created_by: str
    created_at: datetime
    creator_name: Optional[str] = None
    creator_surname: Optional[str] = None


class GroupEnvelope(BaseModel):
    message: str
    group: GroupRead


class GroupList(BaseModel):
    groups: List[GroupRead]


class LinkCreate(BaseModel):
    acceptor: str = Field(..., pattern=r"^[0-9]{9}$")


class LinkRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    connector: str
    acceptor: str
    created_at: datetime
    connector_name: Optional[str] = None
    connector_surname: Optional[str] = None
    acceptor_name: Optional[str] = None
    acceptor_surname: Optional[str] = None


class LinkEnvelope(BaseModel):
    message: str
    link: LinkRead


class LinkList(BaseModel):
    links: List[LinkRead]


class EventCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    location: str = Field(..., min_length=1, max_length=200)
    event_datetime: datetime


class EventUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    event_datetime: Optional[datetime] = None


class EventRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    location: str
    event_datetime: datetime
    created_by: str
    creator_name: Optional[str] = None
    creator_surname: Optional[str] = None


class EventEnvelope(BaseModel):
    message: str
    event: EventRead


class EventList(BaseModel):
    events: List[EventRead]
