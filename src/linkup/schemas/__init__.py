"""Public schema exports."""

from .academics import (
	BadgeCreate,
	BadgeEnvelope,
	BadgeList,
	BadgeRead,
	ClassCreate,
	ClassEnvelope,
	ClassList,
	ClassRead,
)
from .catalog import (
	CampusCreate,
	CampusEnvelope,
	CampusList,
	CampusRead,
	CampusUpdate,
	CourseCreate,
	CourseEnvelope,
	CourseList,
	CourseRead,
	FacultyCreate,
	FacultyEnvelope,
	FacultyList,
	FacultyRead,
	ModuleCreate,
	ModuleEnvelope,
	ModuleList,
	ModuleRead,
)
from .common import ErrorResponse, MessageResponse
from .dashboard import PlatformStats, PlatformStatsResponse, StudentDashboard, StudentStats
from .feedback import (
	NotificationCreate,
	NotificationEnvelope,
	NotificationList,
	NotificationRead,
	RatingCreate,
	RatingEnvelope,
	RatingList,
	RatingRead,
)
from .post import (
	CommentDeleted,
	CommentEnvelope,
	CommentList,
	CommentRead,
	CommentWrite,
	LikeResult,
	PostCreate,
	PostDetail,
	PostEnvelope,
	PostList,
	PostRead,
	PostUpdate,
)
from .social import (
	EventCreate,
	EventEnvelope,
	EventList,
	EventRead,
	EventUpdate,
	GroupCreate,
	GroupEnvelope,
	GroupList,
	GroupRead,
	GroupUpdate,
	LinkCreate,
	LinkEnvelope,
	LinkList,
	LinkRead,
)
from .student import (
	AdminLoginResponse,
	AdminSummary,
	LoginRequest,
	StudentEnvelope,
	StudentList,
	StudentLoginResponse,
	StudentProfile,
	StudentRead,
	StudentRegister,
	StudentSummary,
	StudentUpdate,
)

__all__ = [
	"AdminLoginResponse",
	"AdminSummary",
	"BadgeCreate",
	"BadgeEnvelope",
	"BadgeList",
	"BadgeRead",
	"CampusCreate",
	"CampusEnvelope",
	"CampusList",
	"CampusRead",
	"CampusUpdate",
	"ClassCreate",
	"ClassEnvelope",
	"ClassList",
	"ClassRead",
	"CommentDeleted",
	"CommentEnvelope",
	"CommentList",
	"CommentRead",
	"CommentWrite",
	"CourseCreate",
	"CourseEnvelope",
	"CourseList",
	"CourseRead",
	"ErrorResponse",
	"EventCreate",
	"EventEnvelope",
	"EventList",
	"EventRead",
	"EventUpdate",
	"FacultyCreate",
	"FacultyEnvelope",
	"FacultyList",
	"FacultyRead",
	"GroupCreate",
	"GroupEnvelope",
	"GroupList",
	"GroupRead",
	"GroupUpdate",
	"LikeResult",
	"LinkCreate",
	"LinkEnvelope",
	"LinkList",
	"LinkRead",
	"LoginRequest",
	"MessageResponse",
	"ModuleCreate",
	"ModuleEnvelope",
	"ModuleList",
	"ModuleRead",
	"NotificationCreate",
	"NotificationEnvelope",
	"NotificationList",
	"NotificationRead",
	"PlatformStats",
	"PlatformStatsResponse",
	"PostCreate",
	"PostDetail",
	"PostEnvelope",
	"PostList",
	"PostRead",
	"PostUpdate",
	"RatingCreate",
	"RatingEnvelope",
	"RatingList",
	"RatingRead",
	"StudentDashboard",
	"StudentEnvelope",
	"StudentList",
	"StudentLoginResponse",
	"StudentProfile",
	"StudentRead",
	"StudentRegister",
	"StudentStats",
	"StudentSummary",
	"StudentUpdate",
]
