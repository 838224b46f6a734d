"""Media domain service."""

import logfire

from eats.domain.error import ValidationError

from .base import Service


class ImageUploader:
    """Hosts an image with a third-party service."""

    async def upload(self, data: bytes, content_type: str) -> str:
        """Upload raw image bytes.

        Args:
            data: Image bytes
            content_type: MIME type, e.g. "image/png"

        Returns:
            Public URL of the hosted image

        Raises:
            MediaUploadError: If the image host rejects the upload
        """
        raise NotImplementedError


class MediaService(Service):
    """Domain service for image uploads."""

    def __init__(self, image_uploader: ImageUploader, max_image_bytes: int) -> None:
        """Initialize media service.

        Args:
            image_uploader: Image hosting client
            max_image_bytes: Largest accepted upload
        """
        self.image_uploader = image_uploader
        self.max_image_bytes = max_image_bytes

    async def upload_image(self, data: bytes, content_type: str | None) -> str:
        """Validate and upload an image.

        Args:
            data: Image bytes
            content_type: MIME type declared by the client

        Returns:
            Hosted image URL

        Raises:
            ValidationError: If the file is empty, too large or not an image
        """
        if not data:
            raise ValidationError("Image file is empty")
        if len(data) > self.max_image_bytes:
            raise ValidationError(
                f"Image file too large (max {self.max_image_bytes} bytes)"
            )
        if not content_type or not content_type.startswith("image/"):
            raise ValidationError("Image file must be an image")

        with logfire.span(
            "media_service.upload_image", size=len(data), content_type=content_type
        ):
            url = await self.image_uploader.upload(data, content_type)
            logfire.info("Image uploaded", url=url)
            return url
