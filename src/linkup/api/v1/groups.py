"""Group endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.errors import ServiceError
from ...schemas import GroupCreate, GroupEnvelope, GroupList, GroupUpdate, MessageResponse
from ...services import group_service
from ..deps import Principal, require_student

router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("", response_model=GroupList, summary="List groups, newest first")
def list_groups(db: Session = Depends(get_db)) -> GroupList:
    return GroupList(groups=group_service.list_groups(db))


@router.post(
    "",
    response_model=GroupEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a group",
    responses={
        201: {
            "description": "Group created",
            "content": {
                "application/json": {
                    "example": {
                        "message": "Group created successfully",
                        "group": {
                            "id": 7,
                            "group_name": "Robotics Society",
                            "group_description": "Weekly build nights",
                            "group_size": 0,
                            "max_size": 30,
                            "created_by": "123456789",
                            "created_at": "2025-03-02T18:00:00",
                            "creator_name": "Thandi",
                            "creator_surname": "Mokoena",
                        },
                    }
                }
            },
        },
        401: {"description": "Missing or invalid session"},
    },
)
def create_group(
    payload: GroupCreate,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> GroupEnvelope:
    """Create a group owned by the caller.

    Example request body::

        {
            "group_name": "Robotics Society",
            "group_description": "Weekly build nights",
            "max_size": 30
        }
    """

    try:
        group = group_service.create_group(db, creator=student["student_number"], **payload.model_dump())
        db.commit()
        db.refresh(group)
        return GroupEnvelope(message="Group created successfully", group=group)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.put(
    "/{group_id}",
    response_model=GroupEnvelope,
    summary="Update a group (creator only)",
    responses={
        400: {"description": "max_size below current group size"},
        403: {"description": "Caller is not the creator"},
        404: {"description": "Group not found"},
    },
)
def update_group(
    group_id: int,
    payload: GroupUpdate,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> GroupEnvelope:
    try:
        group = group_service.update_group(
            db,
            group_id=group_id,
            actor=student["student_number"],
            changes=payload.model_dump(exclude_unset=True),
        )
        db.commit()
        db.refresh(group)
        return GroupEnvelope(message="Group updated successfully", group=group)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.delete(
    "/{group_id}",
    response_model=MessageResponse,
    summary="Delete a group (creator only)",
    responses={403: {"description": "Caller is not the creator"}, 404: {"description": "Group not found"}},
)
def delete_group(
    group_id: int,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> MessageResponse:
    try:
        group_service.delete_group(db, group_id=group_id, actor=student["student_number"])
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return MessageResponse(message="Group deleted successfully")
