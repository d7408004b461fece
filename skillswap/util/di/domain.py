"""Domain layer DI providers."""

from dishka import Scope, provide

from skillswap.config import (
    AuthSettings,
    FeedbackSettings,
    NotificationSettings,
    Settings,
)
from skillswap.domain.repository import (
    AccountCredentialRepository,
    AccountRepository,
    AdminRepository,
    NotificationRepository,
    SwapRequestRepository,
)
from skillswap.domain.service import (
    AccountService,
    AdminService,
    AfterCommit,
    AnalyticsService,
    AuthService,
    EmailSender,
    FeedbackService,
    JWTService,
    MailDispatcher,
    MailService,
    NotificationService,
    PasswordHasher,
    SwapService,
)
from skillswap.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository/session
    lifecycle. The mail dispatcher is APP-scoped because its deliveries
    outlive the request that scheduled them.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_mail_dispatcher(self, email_sender: EmailSender) -> MailDispatcher:
        return MailDispatcher(email_sender=email_sender)

    @provide
    def get_mail_service(
        self,
        dispatcher: MailDispatcher,
        after_commit: AfterCommit,
        settings: Settings,
    ) -> MailService:
        return MailService(
            dispatcher=dispatcher,
            after_commit=after_commit,
            frontend_url=settings.api.frontend_url,
        )

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        settings: NotificationSettings,
    ) -> NotificationService:
        return NotificationService(
            notification_repository=notification_repository, settings=settings
        )

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        credential_repository: AccountCredentialRepository,
        swap_repository: SwapRequestRepository,
        notification_repository: NotificationRepository,
    ) -> AccountService:
        return AccountService(
            account_repository=account_repository,
            credential_repository=credential_repository,
            swap_repository=swap_repository,
            notification_repository=notification_repository,
        )

    @provide
    def get_auth_service(
        self,
        account_service: AccountService,
        credential_repository: AccountCredentialRepository,
        password_hasher: PasswordHasher,
        mail_service: MailService,
    ) -> AuthService:
        return AuthService(
            account_service=account_service,
            credential_repository=credential_repository,
            password_hasher=password_hasher,
            mail_service=mail_service,
        )

    @provide
    def get_swap_service(
        self,
        swap_repository: SwapRequestRepository,
        account_repository: AccountRepository,
        notification_service: NotificationService,
        mail_service: MailService,
    ) -> SwapService:
        return SwapService(
            swap_repository=swap_repository,
            account_repository=account_repository,
            notification_service=notification_service,
            mail_service=mail_service,
        )

    @provide
    def get_feedback_service(
        self,
        swap_repository: SwapRequestRepository,
        account_repository: AccountRepository,
        notification_service: NotificationService,
        mail_service: MailService,
        settings: FeedbackSettings,
    ) -> FeedbackService:
        return FeedbackService(
            swap_repository=swap_repository,
            account_repository=account_repository,
            notification_service=notification_service,
            mail_service=mail_service,
            settings=settings,
        )

    @provide
    def get_admin_service(
        self,
        admin_repository: AdminRepository,
        password_hasher: PasswordHasher,
        auth_settings: AuthSettings,
    ) -> AdminService:
        return AdminService(
            admin_repository=admin_repository,
            password_hasher=password_hasher,
            auth_settings=auth_settings,
        )

    @provide
    def get_analytics_service(
        self,
        account_repository: AccountRepository,
        swap_repository: SwapRequestRepository,
        notification_repository: NotificationRepository,
    ) -> AnalyticsService:
        return AnalyticsService(
            account_repository=account_repository,
            swap_repository=swap_repository,
            notification_repository=notification_repository,
        )
