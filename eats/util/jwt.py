"""JWT token utilities."""

from typing import Any

import jwt

from eats.config import AuthSettings


class JWTError(Exception):
    """JWT-related error."""

    pass


def read_claims(token: str) -> dict[str, Any]:
    """Decode a token payload without checking its signature.

    Only call this on tokens that already went through `verify_token`.

    Args:
        token: Encoded JWT

    Returns:
        Claims dictionary

    Raises:
        JWTError: If the token cannot be decoded
    """
    try:
        return jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError:
        raise JWTError("Malformed token")


def decode_subject(token: str) -> str:
    """Extract the subject ("sub") claim from a token payload.

    Args:
        token: Encoded JWT

    Returns:
        Subject identifier issued by the identity provider

    Raises:
        JWTError: If the token is malformed or carries no subject
    """
    subject = read_claims(token).get("sub")
    if not isinstance(subject, str) or not subject:
        raise JWTError("Token has no subject")
    return subject


def verify_token(token: str, key: Any, settings: AuthSettings) -> dict[str, Any]:
    """Verify signature, audience and issuer of a token.

    Args:
        token: Encoded JWT
        key: Public key matching the token's "kid"
        settings: Authentication settings

    Returns:
        Verified claims

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        return jwt.decode(
            token,
            key,
            algorithms=[settings.token_signing_alg],
            audience=settings.audience,
            issuer=settings.issuer,
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
