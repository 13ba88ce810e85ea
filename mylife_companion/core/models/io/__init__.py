"""
I/O models for API requests and responses.

These Pydantic schemas define the contract between the REST API and its
clients. They are kept separate from the database entities so the two can
evolve independently.
"""

from .auth import (
    PasswordResetConfirm,
    PasswordResetRequest,
    RefreshTokenRequest,
    RefreshTokenResponse,
    SigninRequest,
    SigninResponse,
    SignupRequest,
    TokenVerifyResponse,
)
from .calendar import (
    CalendarCategoryCreate,
    CalendarCategoryEnvelope,
    CalendarCategoryRead,
    CalendarCategoryRef,
    CalendarCategoryUpdate,
    CalendarEventCreate,
    CalendarEventEnvelope,
    CalendarEventRead,
    CalendarEventUpdate,
)
from .common import MessageResponse, UTCDatetime, to_naive_utc
from .health import (
    AverageReading,
    HealthMetricCreate,
    HealthMetricEnvelope,
    HealthMetricPage,
    HealthMetricRead,
    HealthMetricUpdate,
    HealthRecordUpdate,
    HealthSummary,
    LatestReading,
    MetricStatPoint,
    MetricStats,
)
from .health_calendar import (
    HealthCalendarEventCreate,
    HealthCalendarEventRead,
    HealthCalendarEventUpdate,
)
from .support import (
    SupportExchange,
    SupportHistoryCleared,
    SupportMessageCreate,
    SupportMessageRead,
)
from .tasks import (
    PriorityCount,
    StatusCount,
    TaskCategoryCreate,
    TaskCategoryRead,
    TaskCategoryRef,
    TaskCategoryUpdate,
    TaskCreate,
    TaskRead,
    TaskStats,
    TaskUpdate,
)
from .users import (
    AppearanceSettings,
    AvatarUploadResponse,
    NotificationSettings,
    PrivacySettings,
    ProfileRead,
    ProfileUpdate,
    UserCreate,
    UserRead,
)

__all__ = [
    "AppearanceSettings",
    "AverageReading",
    "AvatarUploadResponse",
    "CalendarCategoryCreate",
    "CalendarCategoryEnvelope",
    "CalendarCategoryRead",
    "CalendarCategoryRef",
    "CalendarCategoryUpdate",
    "CalendarEventCreate",
    "CalendarEventEnvelope",
    "CalendarEventRead",
    "CalendarEventUpdate",
    "HealthCalendarEventCreate",
    "HealthCalendarEventRead",
    "HealthCalendarEventUpdate",
    "HealthMetricCreate",
    "HealthMetricEnvelope",
    "HealthMetricPage",
    "HealthMetricRead",
    "HealthMetricUpdate",
    "HealthRecordUpdate",
    "HealthSummary",
    "LatestReading",
    "MessageResponse",
    "MetricStatPoint",
    "MetricStats",
    "NotificationSettings",
    "PasswordResetConfirm",
    "PasswordResetRequest",
    "PriorityCount",
    "PrivacySettings",
    "ProfileRead",
    "ProfileUpdate",
    "RefreshTokenRequest",
    "RefreshTokenResponse",
    "SigninRequest",
    "SigninResponse",
    "SignupRequest",
    "StatusCount",
    "SupportExchange",
    "SupportHistoryCleared",
    "SupportMessageCreate",
    "SupportMessageRead",
    "TaskCategoryCreate",
    "TaskCategoryRead",
    "TaskCategoryRef",
    "TaskCategoryUpdate",
    "TaskCreate",
    "TaskRead",
    "TaskStats",
    "TaskUpdate",
    "TokenVerifyResponse",
    "UTCDatetime",
    "UserCreate",
    "UserRead",
    "to_naive_utc",
]
