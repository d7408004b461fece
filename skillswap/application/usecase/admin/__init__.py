"""Administration use cases."""

from .admin_login import AdminAuthResponse, AdminLoginRequest, AdminLoginUseCase
from .analytics import (
    AnalyticsResponse,
    GetAnalyticsRequest,
    GetAnalyticsUseCase,
    GetReportRequest,
    GetReportUseCase,
    ReportResponse,
)
from .broadcast import BroadcastRequest, BroadcastResponse, BroadcastUseCase
from .dashboard import AdminRequest, DashboardResponse, GetDashboardUseCase
from .manage_admins import (
    AdminListResponse,
    CreateAdminRequest,
    CreateAdminUseCase,
    DeleteAdminRequest,
    DeleteAdminUseCase,
    ListAdminsUseCase,
    UpdateAdminRequest,
    UpdateAdminUseCase,
)
from .manage_feedback import (
    FeedbackListResponse,
    ListAllFeedbackRequest,
    ListAllFeedbackUseCase,
    RemoveFeedbackRequest,
    RemoveFeedbackUseCase,
)
from .manage_swaps import (
    AdminDeleteSwapUseCase,
    AdminGetSwapUseCase,
    AdminSwapRequest,
    ListAllSwapsRequest,
    ListAllSwapsUseCase,
)
from .manage_users import (
    AdminUserRequest,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersRequest,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserDetailResponse,
    UserListResponse,
)

__all__ = [
    "AdminAuthResponse",
    "AdminDeleteSwapUseCase",
    "AdminGetSwapUseCase",
    "AdminListResponse",
    "AdminLoginRequest",
    "AdminLoginUseCase",
    "AdminRequest",
    "AdminSwapRequest",
    "AdminUserRequest",
    "AnalyticsResponse",
    "BroadcastRequest",
    "BroadcastResponse",
    "BroadcastUseCase",
    "CreateAdminRequest",
    "CreateAdminUseCase",
    "DashboardResponse",
    "DeleteAdminRequest",
    "DeleteAdminUseCase",
    "DeleteUserUseCase",
    "FeedbackListResponse",
    "GetAnalyticsRequest",
    "GetAnalyticsUseCase",
    "GetDashboardUseCase",
    "GetReportRequest",
    "GetReportUseCase",
    "GetUserUseCase",
    "ListAdminsUseCase",
    "ListAllFeedbackRequest",
    "ListAllFeedbackUseCase",
    "ListAllSwapsRequest",
    "ListAllSwapsUseCase",
    "ListUsersRequest",
    "ListUsersUseCase",
    "RemoveFeedbackRequest",
    "RemoveFeedbackUseCase",
    "ReportResponse",
    "UpdateAdminRequest",
    "UpdateAdminUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserDetailResponse",
    "UserListResponse",
]
