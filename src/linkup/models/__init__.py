"""SQLAlchemy models for LinkUp."""

from .badge import Badge
from .campus import Campus, Course, Faculty, Module
from .class_ import Class, StudentClass
from .event import Event
from .feedback import Notification, Rating
from .group import Group
from .link import Link
from .post import Comment, Like, Post
from .student import Admin, Student, YearOfStudy

__all__ = [
    "Admin",
    "Badge",
    "Campus",
    "Class",
    "Comment",
    "Course",
    "Event",
    "Faculty",
    "Group",
    "Like",
    "Link",
    "Module",
    "Notification",
    "Post",
    "Rating",
    "Student",
    "StudentClass",
    "YearOfStudy",
]
