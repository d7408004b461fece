"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from skillswap.config import (
    AuthSettings,
    FeedbackSettings,
    MediaSettings,
    NotificationSettings,
    Settings,
)
from skillswap.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings loaded from environment variables and ``.env``."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_feedback_settings(self, settings: Settings) -> FeedbackSettings:
        return settings.feedback

    @provide
    def provide_notification_settings(self, settings: Settings) -> NotificationSettings:
        return settings.notifications

    @provide
    def provide_media_settings(self, settings: Settings) -> MediaSettings:
        return settings.media
