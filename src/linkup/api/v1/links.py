"""Student link endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.errors import ServiceError
from ...schemas import LinkCreate, LinkEnvelope, LinkList, MessageResponse
from ...services import link_service
from ..deps import Principal, require_student

router = APIRouter(prefix="/links", tags=["links"])


@router.get("", response_model=LinkList, summary="Caller's links")
def list_links(
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> LinkList:
    return LinkList(links=link_service.list_links(db, student_number=student["student_number"]))


@router.post(
    "",
    response_model=LinkEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Link with another student",
    responses={
        400: {"description": "Cannot link with yourself"},
        404: {"description": "Student not found"},
        409: {"description": "Link already exists"},
    },
)
def create_link(
    payload: LinkCreate,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> LinkEnvelope:
    """Create an undirected link between the caller and ``acceptor``.

    Example request body::

        {"acceptor": "987654321"}
    """

    try:
        link = link_service.create_link(db, connector=student["student_number"], acceptor=payload.acceptor)
        db.commit()
        db.refresh(link)
        return LinkEnvelope(message="Link created successfully", link=link)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.delete(
    "/{link_id}",
    response_model=MessageResponse,
    summary="Remove a link (either participant)",
    responses={403: {"description": "Caller is not a participant"}, 404: {"description": "Link not found"}},
)
def delete_link(
    link_id: int,
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> MessageResponse:
    try:
        link_service.delete_link(db, link_id=link_id, actor=student["student_number"])
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return MessageResponse(message="Link deleted successfully")
