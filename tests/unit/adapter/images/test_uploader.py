"""Unit tests for the Cloudinary image uploaders."""

import base64

import cloudinary.exceptions
import cloudinary.uploader
import pytest

from eats.adapter.error import MediaUploadError
from eats.adapter.images import MockCloudinaryImageUploader, RealCloudinaryImageUploader

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def uploader() -> RealCloudinaryImageUploader:
    return RealCloudinaryImageUploader(
        cloud_name="eats", api_key="key", api_secret="secret"
    )


class TestRealCloudinaryImageUploader:
    @pytest.mark.asyncio
    async def test_uploads_base64_data_uri(self, uploader, monkeypatch):
        # Arrange
        calls = []

        def fake_upload(file, **options):
            calls.append((file, options))
            return {
                "url": "http://res.cloudinary.com/eats/image/upload/v1/abc.png",
                "secure_url": "https://res.cloudinary.com/eats/image/upload/v1/abc.png",
                "public_id": "abc",
            }

        monkeypatch.setattr(cloudinary.uploader, "upload", fake_upload)

        # Act
        url = await uploader.upload(PNG_BYTES, "image/png")

        # Assert
        assert url == "http://res.cloudinary.com/eats/image/upload/v1/abc.png"
        file, options = calls[0]
        expected = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode()
        assert file == expected
        assert options["cloud_name"] == "eats"
        assert options["api_key"] == "key"
        assert options["api_secret"] == "secret"

    @pytest.mark.asyncio
    async def test_falls_back_to_secure_url(self, uploader, monkeypatch):
        monkeypatch.setattr(
            cloudinary.uploader,
            "upload",
            lambda file, **options: {"secure_url": "https://cdn.example/x.png"},
        )

        assert await uploader.upload(PNG_BYTES, "image/png") == "https://cdn.example/x.png"

    @pytest.mark.asyncio
    async def test_sdk_error_becomes_media_upload_error(self, uploader, monkeypatch):
        def failing_upload(file, **options):
            raise cloudinary.exceptions.Error("Invalid image file")

        monkeypatch.setattr(cloudinary.uploader, "upload", failing_upload)

        with pytest.raises(MediaUploadError):
            await uploader.upload(PNG_BYTES, "image/png")

    @pytest.mark.asyncio
    async def test_response_without_url_is_an_error(self, uploader, monkeypatch):
        monkeypatch.setattr(cloudinary.uploader, "upload", lambda file, **options: {})

        with pytest.raises(MediaUploadError):
            await uploader.upload(PNG_BYTES, "image/png")


class TestMockCloudinaryImageUploader:
    @pytest.mark.asyncio
    async def test_same_content_same_url(self):
        uploader = MockCloudinaryImageUploader()

        first = await uploader.upload(PNG_BYTES, "image/png")
        second = await uploader.upload(PNG_BYTES, "image/png")

        assert first == second
        assert len(uploader.uploads) == 2
