"""Service layer exports."""

from . import (
	auth_service,
	badge_service,
	bootstrap_service,
	catalog_service,
	class_service,
	comment_service,
	dashboard_service,
	event_service,
	group_service,
	link_service,
	notification_service,
	post_service,
	rating_service,
	session_purge_service,
	student_service,
)

__all__ = [
	"auth_service",
	"badge_service",
	"bootstrap_service",
	"catalog_service",
	"class_service",
	"comment_service",
	"dashboard_service",
	"event_service",
	"group_service",
	"link_service",
	"notification_service",
	"post_service",
	"rating_service",
	"session_purge_service",
	"student_service",
]
