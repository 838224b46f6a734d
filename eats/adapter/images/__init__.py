"""Image hosting adapter (Cloudinary)."""

from .uploader import (
    CloudinaryImageUploader,
    MockCloudinaryImageUploader,
    RealCloudinaryImageUploader,
)

__all__ = [
    "CloudinaryImageUploader",
    "RealCloudinaryImageUploader",
    "MockCloudinaryImageUploader",
]
