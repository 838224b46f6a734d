"""Media infrastructure providers."""

from dishka import Scope, provide

from eats.adapter.images import RealCloudinaryImageUploader
from eats.config import MediaSettings
from eats.domain.service import ImageUploader
from eats.util.di.base import ProviderBase
from eats.util.error import ConfigurationError


class MediaProvider(ProviderBase):
    """Media component base."""

    __mock_component__ = "media"


class ProdMediaProvider(MediaProvider):
    """Production media provider (Cloudinary)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_uploader(self, media_settings: MediaSettings) -> ImageUploader:
        """Provide the Cloudinary image uploader.

        Raises:
            ConfigurationError: If Cloudinary credentials are missing
        """
        if not (
            media_settings.cloud_name
            and media_settings.api_key
            and media_settings.api_secret
        ):
            raise ConfigurationError(
                "Cloudinary is not configured (MEDIA__CLOUD_NAME, "
                "MEDIA__API_KEY, MEDIA__API_SECRET)"
            )

        return RealCloudinaryImageUploader(
            cloud_name=media_settings.cloud_name,
            api_key=media_settings.api_key,
            api_secret=media_settings.api_secret,
        )
