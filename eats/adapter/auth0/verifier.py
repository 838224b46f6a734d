"""Auth0 access token verification.

Access tokens are RS256 JWTs signed with keys published at the tenant's
JWKS endpoint. Verification checks signature, audience and issuer; reading
the subject is left to the auth service.
"""

import asyncio

import logfire
from jwt import PyJWKClient
from jwt.exceptions import DecodeError, PyJWKClientError

from eats.config import AuthSettings
from eats.domain.service.auth_service import TokenVerifier
from eats.util.jwt import JWTError, read_claims, verify_token


class Auth0TokenVerifier(TokenVerifier):
    """Base class for Auth0 token verifiers.

    Provides type distinction for dependency injection.
    """

    pass


class RealAuth0TokenVerifier(Auth0TokenVerifier):
    """Verifies tokens against the Auth0 tenant's signing keys."""

    def __init__(self, settings: AuthSettings) -> None:
        """Initialize verifier.

        Args:
            settings: Authentication settings (audience, issuer, algorithm)
        """
        self.settings = settings
        # Keys are cached by the client between requests
        self._jwks_client = PyJWKClient(settings.jwks_url, cache_keys=True)

    async def verify(self, token: str) -> None:
        """Verify a bearer token issued by Auth0.

        Args:
            token: Encoded JWT

        Raises:
            JWTError: If the token is malformed, signed with an unknown key,
                expired, or issued for another audience or issuer
        """
        try:
            # Key lookup may hit the network, keep it off the event loop
            signing_key = await asyncio.to_thread(
                self._jwks_client.get_signing_key_from_jwt, token
            )
        except DecodeError:
            raise JWTError("Malformed token")
        except PyJWKClientError as e:
            logfire.error("Signing key lookup failed", error=str(e))
            raise JWTError(f"Unable to find signing key: {e}")

        verify_token(token, signing_key.key, self.settings)


class MockAuth0TokenVerifier(Auth0TokenVerifier):
    """Mock verifier for testing.

    Accepts any structurally valid JWT that carries a subject, whatever it
    was signed with. Garbage tokens are still rejected.
    """

    def __init__(self):
        """Initialize mock verifier without real Auth0 configuration."""
        pass

    async def verify(self, token: str) -> None:
        """Check the token parses and has a subject.

        Raises:
            JWTError: If the token is not a JWT or has no subject
        """
        if not read_claims(token).get("sub"):
            raise JWTError("Token has no subject")
