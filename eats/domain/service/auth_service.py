"""Authentication domain service.

Turns the Authorization header of a request into a ResolvedIdentity in two
stages: the token verifier checks that the identity provider issued the
token, then the token subject is bound to an internal account.
"""

import logfire

from eats.domain.error import AuthenticationError
from eats.domain.repository import UserRepository
from eats.domain.value import ResolvedIdentity
from eats.util.jwt import decode_subject

from .base import Service

BEARER_PREFIX = "Bearer "


class TokenVerifier:
    """Checks signature, audience and issuer of a bearer token."""

    async def verify(self, token: str) -> None:
        """Verify a bearer token.

        Args:
            token: Encoded JWT

        Raises:
            JWTError: If the token was not issued by the trusted provider
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for request authentication.

    Every failure is reported as the same AuthenticationError, whether the
    header is missing, the signature is wrong, the store is down, or the
    token belongs to nobody we know.
    """

    def __init__(
        self, token_verifier: TokenVerifier, user_repository: UserRepository
    ) -> None:
        """Initialize auth service.

        Args:
            token_verifier: Verifier for tokens issued by the identity provider
            user_repository: User repository used to bind token subjects
        """
        self.token_verifier = token_verifier
        self.user_repository = user_repository

    @staticmethod
    def extract_bearer_token(authorization: str | None) -> str:
        """Pull the token out of an `Authorization: Bearer <token>` header.

        Args:
            authorization: Raw header value (None if absent)

        Returns:
            Encoded token

        Raises:
            AuthenticationError: If the header is absent or not a bearer token
        """
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise AuthenticationError("missing bearer token")

        token = authorization[len(BEARER_PREFIX) :].strip()
        if not token:
            raise AuthenticationError("missing bearer token")
        return token

    async def verify_token(self, authorization: str | None) -> str:
        """Check the header carries a token issued by the identity provider.

        Args:
            authorization: Raw Authorization header value

        Returns:
            The verified encoded token

        Raises:
            AuthenticationError: If the header or the token is invalid
        """
        token = self.extract_bearer_token(authorization)

        with logfire.span("auth_service.verify_token"):
            try:
                await self.token_verifier.verify(token)
            except Exception as e:
                logfire.warn("Token verification failed", error=str(e))
                raise AuthenticationError("invalid token") from e
            return token

    async def resolve_identity(self, token: str) -> ResolvedIdentity:
        """Bind a verified token to the account of its subject.

        Args:
            token: Token already accepted by `verify_token`

        Returns:
            Identity binding for the current request

        Raises:
            AuthenticationError: If the payload is unreadable, the lookup
                fails, or no account exists for the subject
        """
        with logfire.span("auth_service.resolve_identity"):
            try:
                auth0_id = decode_subject(token)
                user = await self.user_repository.find_by_auth0_id(auth0_id)
            except Exception as e:
                logfire.warn("Identity resolution failed", error=str(e))
                raise AuthenticationError("identity resolution failed") from e

            if not user:
                logfire.warn("No account for token subject", auth0_id=auth0_id)
                raise AuthenticationError("no account for token subject")

            logfire.info(
                "Identity resolved", auth0_id=auth0_id, user_id=str(user.id)
            )
            return ResolvedIdentity(auth0_id=auth0_id, user_id=user.id)

    async def authenticate(self, authorization: str | None) -> ResolvedIdentity:
        """Verify the bearer token and resolve the caller's account.

        Args:
            authorization: Raw Authorization header value

        Returns:
            Identity binding for the current request

        Raises:
            AuthenticationError: On any failure
        """
        token = await self.verify_token(authorization)
        return await self.resolve_identity(token)
