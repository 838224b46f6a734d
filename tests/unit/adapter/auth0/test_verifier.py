"""Unit tests for the Auth0 token verifiers."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from jwt.exceptions import PyJWKClientError

from eats.adapter.auth0 import MockAuth0TokenVerifier, RealAuth0TokenVerifier
from eats.config import AuthSettings
from eats.util.jwt import JWTError
from tests.conftest import make_token

SETTINGS = AuthSettings(
    audience="https://api.eats.example",
    issuer_base_url="https://eats.eu.auth0.com",
)


@pytest.fixture(scope="module")
def signing_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def verifier(signing_key, monkeypatch):
    """Real verifier whose JWKS lookup returns the test public key."""
    instance = RealAuth0TokenVerifier(SETTINGS)
    monkeypatch.setattr(
        instance._jwks_client,
        "get_signing_key_from_jwt",
        lambda token: SimpleNamespace(key=signing_key.public_key()),
    )
    return instance


def sign(signing_key, **overrides) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        "sub": "auth0|abc",
        "aud": SETTINGS.audience,
        "iss": SETTINGS.issuer,
        "iat": now,
        "exp": now + timedelta(hours=1),
    }
    claims.update(overrides)
    return jwt.encode(claims, signing_key, algorithm="RS256", headers={"kid": "k1"})


class TestRealAuth0TokenVerifier:
    def test_settings_derive_issuer_and_jwks_url(self):
        assert SETTINGS.issuer == "https://eats.eu.auth0.com/"
        assert SETTINGS.jwks_url == "https://eats.eu.auth0.com/.well-known/jwks.json"

    @pytest.mark.asyncio
    async def test_accepts_token_for_configured_audience_and_issuer(
        self, verifier, signing_key
    ):
        await verifier.verify(sign(signing_key))

    @pytest.mark.asyncio
    async def test_rejects_expired_token(self, verifier, signing_key):
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        token = sign(signing_key, iat=past, exp=past + timedelta(hours=1))

        with pytest.raises(JWTError, match="expired"):
            await verifier.verify(token)

    @pytest.mark.asyncio
    async def test_rejects_other_audience(self, verifier, signing_key):
        with pytest.raises(JWTError):
            await verifier.verify(sign(signing_key, aud="https://other.example"))

    @pytest.mark.asyncio
    async def test_rejects_other_issuer(self, verifier, signing_key):
        with pytest.raises(JWTError):
            await verifier.verify(sign(signing_key, iss="https://evil.auth0.com/"))

    @pytest.mark.asyncio
    async def test_rejects_token_signed_with_other_key(self, verifier):
        other_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)

        with pytest.raises(JWTError):
            await verifier.verify(sign(other_key))

    @pytest.mark.asyncio
    async def test_rejects_hs256_token(self, verifier):
        """Only the configured algorithm is accepted."""
        with pytest.raises(JWTError):
            await verifier.verify(make_token("auth0|abc"))

    @pytest.mark.asyncio
    async def test_unknown_signing_key_raises_jwt_error(self, signing_key, monkeypatch):
        instance = RealAuth0TokenVerifier(SETTINGS)

        def _lookup(token):
            raise PyJWKClientError("Unable to find a signing key that matches: k1")

        monkeypatch.setattr(instance._jwks_client, "get_signing_key_from_jwt", _lookup)

        with pytest.raises(JWTError, match="signing key"):
            await instance.verify(sign(signing_key))


class TestMockAuth0TokenVerifier:
    @pytest.mark.asyncio
    async def test_accepts_any_token_with_subject(self):
        await MockAuth0TokenVerifier().verify(make_token("auth0|abc"))

    @pytest.mark.asyncio
    async def test_rejects_token_without_subject(self):
        with pytest.raises(JWTError):
            await MockAuth0TokenVerifier().verify(make_token(sub=None))

    @pytest.mark.asyncio
    async def test_rejects_garbage(self):
        with pytest.raises(JWTError):
            await MockAuth0TokenVerifier().verify("not-a-jwt")
