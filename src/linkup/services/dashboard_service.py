"""Read-only dashboard aggregations."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..models import Badge, Campus, Course, Event, Faculty, Group, Link, Post, Student, StudentClass
from . import event_service, post_service
from .common import count_rows

RECENT_LIMIT = 5


def platform_stats(session: Session) -> Dict[str, int]:
    """Count every top-level entity; empty tables report 0."""

    return {
        "students": count_rows(session, Student),
        "courses": count_rows(session, Course),
        "faculties": count_rows(session, Faculty),
        "campuses": count_rows(session, Campus),
        "groups": count_rows(session, Group),
        "events": count_rows(session, Event),
        "links": count_rows(session, Link),
        "posts": count_rows(session, Post),
    }


def student_dashboard(
    session: Session,
    *,
    student_number: str,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Counts scoped to one student plus recent own posts and upcoming events."""

    stats = {
        "links": count_rows(
            session, Link, or_(Link.connector == student_number, Link.acceptor == student_number)
        ),
        "groups": count_rows(session, Group, Group.created_by == student_number),
        "events": count_rows(session, Event, Event.created_by == student_number),
        "classes": count_rows(session, StudentClass, StudentClass.student_number == student_number),
        "badges": count_rows(session, Badge, Badge.student_number == student_number),
        "posts": count_rows(session, Post, Post.created_by == student_number),
    }
    return {
        "stats": stats,
        "recent_posts": post_service.list_posts(session, created_by=student_number, limit=RECENT_LIMIT),
        "upcoming_events": event_service.upcoming_events(session, now=now, limit=RECENT_LIMIT),
    }
