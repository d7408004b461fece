"""Media storage infrastructure providers."""

from dishka import Scope, provide

from skillswap.adapter.media.cloudinary import CloudinaryMediaStorage
from skillswap.config import MediaSettings
from skillswap.domain.service.media import MediaStorage
from skillswap.util.di.base import ProviderBase
from skillswap.util.error import ConfigurationError


class MediaProvider(ProviderBase):
    """Media component base."""

    __mock_component__ = "media"


class ProdMediaProvider(MediaProvider):
    """Production media provider using Cloudinary."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_media_storage(self, media_settings: MediaSettings) -> MediaStorage:
        """Provide Cloudinary media storage.

        Raises:
            ConfigurationError: If Cloudinary credentials are not configured
        """
        if not (
            media_settings.cloud_name
            and media_settings.api_key
            and media_settings.api_secret
        ):
            raise ConfigurationError("Cloudinary credentials must be configured")

        return CloudinaryMediaStorage(
            cloud_name=media_settings.cloud_name,
            api_key=media_settings.api_key,
            api_secret=media_settings.api_secret,
            folder=media_settings.folder,
        )
