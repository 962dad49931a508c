"""Dashboard endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...schemas import PlatformStatsResponse, StudentDashboard
from ...services import dashboard_service
from ..deps import Principal, require_admin, require_student
from .posts import post_read

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard/stats", response_model=PlatformStatsResponse, summary="Platform-wide counts (admin)")
def platform_stats(
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> PlatformStatsResponse:
    return PlatformStatsResponse(stats=dashboard_service.platform_stats(db))


@router.get("/student/dashboard", response_model=StudentDashboard, summary="Caller's dashboard")
def student_dashboard(
    student: Principal = Depends(require_student),
    db: Session = Depends(get_db),
) -> StudentDashboard:
    data = dashboard_service.student_dashboard(db, student_number=student["student_number"])
    return StudentDashboard(
        stats=data["stats"],
        recentPosts=[post_read(row) for row in data["recent_posts"]],
        upcomingEvents=data["upcoming_events"],
    )
