"""Domain logic for student groups."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from ..core.errors import InvalidRequest, NotFound
from ..models import Group
from .common import ensure_owner, flush_or_raise


def _ensure_group(session: Session, group_id: int) -> Group:
    group = session.get(Group, group_id)
    if group is None:
        raise NotFound("Group not found")
    return group


def list_groups(session: Session) -> Sequence[Group]:
    stmt = select(Group).options(joinedload(Group.creator)).order_by(Group.created_at.desc(), Group.id.desc())
    return session.execute(stmt).scalars().all()


def create_group(
    session: Session,
    *,
    creator: str,
    group_name: str,
    max_size: int,
    group_description: Optional[str] = None,
) -> Group:
    group = Group(
        group_name=group_name,
        group_description=group_description,
        max_size=max_size,
        group_size=0,
        created_by=creator,
    )
    session.add(group)
    flush_or_raise(session, conflict="Group already exists", invalid="Invalid group data")
    return group


def update_group(session: Session, *, group_id: int, actor: str, changes: Dict[str, Any]) -> Group:
    """Apply creator-only changes, keeping ``group_size <= max_size``."""

    group = _ensure_group(session, group_id)
    ensure_owner(group.created_by, actor, "Only group creator can update the group")

    if "group_name" in changes and not changes["group_name"]:
        raise InvalidRequest("group_name cannot be empty")
    new_max = changes.get("max_size", group.max_size)
    if new_max is None or new_max < group.group_size:
        raise InvalidRequest(f"max_size cannot be lower than the current group size ({group.group_size})")

    for field_name, value in changes.items():
        setattr(group, field_name, value)
    flush_or_raise(session, conflict="Group already exists", invalid="Invalid group data")
    return group


def delete_group(session: Session, *, group_id: int, actor: str) -> None:
    group = _ensure_group(session, group_id)
    ensure_owner(group.created_by, actor, "Only group creator can delete the group")
    session.delete(group)
    session.flush()
