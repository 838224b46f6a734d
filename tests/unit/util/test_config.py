"""Unit tests for application settings."""

import pytest

from eats.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PORT", "API__FRONTEND_URL", "API__CORS_ORIGINS", "MEDIA__MAX_IMAGE_BYTES"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.port == 7000
        assert settings.auth.token_signing_alg == "RS256"
        assert settings.media.max_image_bytes == 5 * 1024 * 1024

    def test_nested_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("AUTH__AUDIENCE", "https://api.eats.example")
        monkeypatch.setenv("AUTH__ISSUER_BASE_URL", "https://eats.eu.auth0.com/")
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/eats")

        settings = Settings(_env_file=None)

        assert settings.auth.audience == "https://api.eats.example"
        assert settings.auth.issuer == "https://eats.eu.auth0.com/"
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/eats"

    def test_frontend_is_always_a_cors_origin(self, monkeypatch):
        monkeypatch.setenv("API__FRONTEND_URL", "https://eats.example")
        monkeypatch.setenv("API__CORS_ORIGINS", '["https://admin.eats.example"]')

        settings = Settings(_env_file=None)

        assert settings.api.cors_origins == [
            "https://eats.example",
            "https://admin.eats.example",
        ]
