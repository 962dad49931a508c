"""Campus, faculty, course and module endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.errors import ServiceError
from ...schemas import (
    CampusCreate,
    CampusEnvelope,
    CampusList,
    CampusUpdate,
    CourseCreate,
    CourseEnvelope,
    CourseList,
    FacultyCreate,
    FacultyEnvelope,
    FacultyList,
    MessageResponse,
    ModuleCreate,
    ModuleEnvelope,
    ModuleList,
)
from ...services import catalog_service
from ..deps import Principal, require_admin

router = APIRouter(tags=["catalog"])


@router.get("/campuses", response_model=CampusList, summary="List campuses")
def list_campuses(db: Session = Depends(get_db)) -> CampusList:
    return CampusList(campuses=catalog_service.list_campuses(db))


@router.post(
    "/campuses",
    response_model=CampusEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a campus (admin)",
)
def create_campus(
    payload: CampusCreate,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> CampusEnvelope:
    try:
        campus = catalog_service.create_campus(db, **payload.model_dump())
        db.commit()
        db.refresh(campus)
        return CampusEnvelope(message="Campus created", campus=campus)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.put(
    "/campuses/{campus_id}",
    response_model=CampusEnvelope,
    summary="Update a campus (admin)",
    responses={404: {"description": "Campus not found"}},
)
def update_campus(
    campus_id: int,
    payload: CampusUpdate,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> CampusEnvelope:
    try:
        campus = catalog_service.update_campus(db, campus_id=campus_id, changes=payload.model_dump(exclude_unset=True))
        db.commit()
        db.refresh(campus)
        return CampusEnvelope(message="Campus updated", campus=campus)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.delete(
    "/campuses/{campus_id}",
    response_model=MessageResponse,
    summary="Delete a campus (admin)",
    responses={404: {"description": "Campus not found"}, 409: {"description": "Campus still referenced"}},
)
def delete_campus(
    campus_id: int,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> MessageResponse:
    try:
        catalog_service.delete_campus(db, campus_id=campus_id)
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return MessageResponse(message="Campus deleted")


@router.get("/faculties", response_model=FacultyList, summary="List faculties")
def list_faculties(db: Session = Depends(get_db)) -> FacultyList:
    return FacultyList(faculties=catalog_service.list_faculties(db))


@router.post(
    "/faculties",
    response_model=FacultyEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a faculty (admin)",
    responses={409: {"description": "Faculty name already exists"}},
)
def create_faculty(
    payload: FacultyCreate,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> FacultyEnvelope:
    try:
        faculty = catalog_service.create_faculty(db, **payload.model_dump())
        db.commit()
        db.refresh(faculty)
        return FacultyEnvelope(message="Faculty created", faculty=faculty)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.get(
    "/faculties/{faculty_id}/courses",
    response_model=CourseList,
    summary="Courses offered by a faculty",
    responses={404: {"description": "Faculty not found"}},
)
def list_faculty_courses(faculty_id: int, db: Session = Depends(get_db)) -> CourseList:
    try:
        return CourseList(courses=catalog_service.list_courses(db, faculty_id=faculty_id))
    except ServiceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.get("/courses", response_model=CourseList, summary="List courses")
def list_courses(db: Session = Depends(get_db)) -> CourseList:
    return CourseList(courses=catalog_service.list_courses(db))


@router.post(
    "/courses",
    response_model=CourseEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a course (admin)",
    responses={404: {"description": "Faculty not found"}, 409: {"description": "Course code already exists"}},
)
def create_course(
    payload: CourseCreate,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> CourseEnvelope:
    try:
        course = catalog_service.create_course(db, **payload.model_dump())
        db.commit()
        db.refresh(course)
        return CourseEnvelope(message="Course created", course=course)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.get("/modules", response_model=ModuleList, summary="List modules")
def list_modules(db: Session = Depends(get_db)) -> ModuleList:
    return ModuleList(modules=catalog_service.list_modules(db))


@router.post(
    "/modules",
    response_model=ModuleEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a module (admin)",
    responses={409: {"description": "Module code already exists"}},
)
def create_module(
    payload: ModuleCreate,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> ModuleEnvelope:
    try:
        module = catalog_service.create_module(db, **payload.model_dump())
        db.commit()
        db.refresh(module)
        return ModuleEnvelope(message="Module created", module=module)
    except ServiceError as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
