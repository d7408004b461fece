"""Application layer DI providers."""

from dishka import Scope, provide

from skillswap.application.usecase.account import (
    DeleteAccountUseCase,
    GetProfileUseCase,
    GetUserFeedbackUseCase,
    RemoveProfilePhotoUseCase,
    SearchAccountsUseCase,
    UpdateAvailabilityUseCase,
    UpdateProfileUseCase,
    UploadProfilePhotoUseCase,
)
from skillswap.application.usecase.admin import (
    AdminDeleteSwapUseCase,
    AdminGetSwapUseCase,
    AdminLoginUseCase,
    BroadcastUseCase,
    CreateAdminUseCase,
    DeleteAdminUseCase,
    DeleteUserUseCase,
    GetAnalyticsUseCase,
    GetDashboardUseCase,
    GetReportUseCase,
    GetUserUseCase,
    ListAdminsUseCase,
    ListAllFeedbackUseCase,
    ListAllSwapsUseCase,
    ListUsersUseCase,
    RemoveFeedbackUseCase,
    UpdateAdminUseCase,
    UpdateUserUseCase,
)
from skillswap.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from skillswap.application.usecase.feedback import (
    DeleteFeedbackUseCase,
    GetPendingFeedbackUseCase,
    GetSwapFeedbackUseCase,
    SubmitFeedbackUseCase,
    UpdateFeedbackUseCase,
)
from skillswap.application.usecase.notification import (
    DeleteNotificationsUseCase,
    DeleteNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkReadUseCase,
)
from skillswap.application.usecase.swap import (
    ChangeSwapStatusUseCase,
    CreateSwapUseCase,
    DeleteSwapUseCase,
    GetSwapStatsUseCase,
    GetSwapUseCase,
    ListInboxUseCase,
    ListSwapsUseCase,
)
from skillswap.config import MediaSettings
from skillswap.domain.service import AccountService, MediaStorage
from skillswap.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases are built from their constructor signatures; every dependency
    is a domain service, a port or a settings group provided elsewhere.
    """

    scope = Scope.REQUEST

    # Auth use cases
    register = provide(RegisterUseCase)
    login = provide(LoginUseCase)
    current_user = provide(GetCurrentUserUseCase)

    # Account use cases
    search_accounts = provide(SearchAccountsUseCase)
    get_profile = provide(GetProfileUseCase)
    update_profile = provide(UpdateProfileUseCase)
    update_availability = provide(UpdateAvailabilityUseCase)
    remove_profile_photo = provide(RemoveProfilePhotoUseCase)
    delete_account = provide(DeleteAccountUseCase)
    user_feedback = provide(GetUserFeedbackUseCase)

    @provide
    def get_upload_profile_photo_use_case(
        self,
        account_service: AccountService,
        media_storage: MediaStorage,
        media_settings: MediaSettings,
    ) -> UploadProfilePhotoUseCase:
        """Provide upload profile photo use case."""
        return UploadProfilePhotoUseCase(
            account_service=account_service,
            media_storage=media_storage,
            settings=media_settings,
        )

    # Swap use cases
    create_swap = provide(CreateSwapUseCase)
    list_swaps = provide(ListSwapsUseCase)
    list_inbox = provide(ListInboxUseCase)
    get_swap = provide(GetSwapUseCase)
    swap_stats = provide(GetSwapStatsUseCase)
    change_swap_status = provide(ChangeSwapStatusUseCase)
    delete_swap = provide(DeleteSwapUseCase)

    # Feedback use cases
    submit_feedback = provide(SubmitFeedbackUseCase)
    swap_feedback = provide(GetSwapFeedbackUseCase)
    pending_feedback = provide(GetPendingFeedbackUseCase)
    update_feedback = provide(UpdateFeedbackUseCase)
    delete_feedback = provide(DeleteFeedbackUseCase)

    # Notification use cases
    list_notifications = provide(ListNotificationsUseCase)
    unread_count = provide(GetUnreadCountUseCase)
    mark_read = provide(MarkReadUseCase)
    delete_notification = provide(DeleteNotificationUseCase)
    delete_notifications = provide(DeleteNotificationsUseCase)

    # Admin use cases
    admin_login = provide(AdminLoginUseCase)
    dashboard = provide(GetDashboardUseCase)
    list_users = provide(ListUsersUseCase)
    get_user = provide(GetUserUseCase)
    update_user = provide(UpdateUserUseCase)
    delete_user = provide(DeleteUserUseCase)
    list_all_swaps = provide(ListAllSwapsUseCase)
    admin_get_swap = provide(AdminGetSwapUseCase)
    admin_delete_swap = provide(AdminDeleteSwapUseCase)
    list_all_feedback = provide(ListAllFeedbackUseCase)
    remove_feedback = provide(RemoveFeedbackUseCase)
    broadcast = provide(BroadcastUseCase)
    analytics = provide(GetAnalyticsUseCase)
    report = provide(GetReportUseCase)
    list_admins = provide(ListAdminsUseCase)
    create_admin = provide(CreateAdminUseCase)
    update_admin = provide(UpdateAdminUseCase)
    delete_admin = provide(DeleteAdminUseCase)
