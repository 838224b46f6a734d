"""Cloudinary image hosting client."""

import asyncio
import base64
import hashlib
import mimetypes

import cloudinary.exceptions
import cloudinary.uploader
import logfire

from eats.adapter.error import MediaUploadError
from eats.domain.service.media_service import ImageUploader


class CloudinaryImageUploader(ImageUploader):
    """Base class for Cloudinary uploaders.

    Provides type distinction for dependency injection.
    """

    pass


class RealCloudinaryImageUploader(CloudinaryImageUploader):
    """Uploads images to Cloudinary as base64 data URIs."""

    def __init__(self, cloud_name: str, api_key: str, api_secret: str) -> None:
        """Initialize Cloudinary uploader.

        Args:
            cloud_name: Cloudinary cloud name
            api_key: Cloudinary API key
            api_secret: Cloudinary API secret
        """
        # Passed per call instead of through the global cloudinary.config()
        self._credentials = {
            "cloud_name": cloud_name,
            "api_key": api_key,
            "api_secret": api_secret,
        }

    async def upload(self, data: bytes, content_type: str) -> str:
        """Upload an image to Cloudinary.

        Args:
            data: Image bytes
            content_type: MIME type

        Returns:
            URL of the hosted image

        Raises:
            MediaUploadError: If the upload fails
        """
        encoded = base64.b64encode(data).decode("ascii")
        data_uri = f"data:{content_type};base64,{encoded}"

        try:
            # The SDK is synchronous
            response = await asyncio.to_thread(
                cloudinary.uploader.upload,
                data_uri,
                resource_type="image",
                **self._credentials,
            )
        except cloudinary.exceptions.Error as e:
            logfire.error("Cloudinary upload failed", error=str(e))
            raise MediaUploadError(f"Image upload failed: {e}")

        url = response.get("url") or response.get("secure_url")
        if not url:
            logfire.error("Cloudinary response without url", response=str(response))
            raise MediaUploadError("Image upload returned no URL")

        logfire.info(
            "Cloudinary upload completed",
            public_id=response.get("public_id"),
            bytes=response.get("bytes"),
        )
        return url


class MockCloudinaryImageUploader(CloudinaryImageUploader):
    """Mock uploader for testing.

    Returns deterministic URLs derived from the image content and keeps the
    uploads in memory.
    """

    def __init__(self):
        """Initialize mock uploader without real Cloudinary configuration."""
        self.uploads: list[tuple[bytes, str]] = []

    async def upload(self, data: bytes, content_type: str) -> str:
        """Return a fake hosted URL for the image."""
        self.uploads.append((data, content_type))
        digest = hashlib.sha1(data).hexdigest()
        extension = mimetypes.guess_extension(content_type) or ""
        return f"http://res.cloudinary.com/mock/image/upload/{digest}{extension}"
