"""Test configuration and fixtures."""

import os
from typing import Any

import jwt
import logfire
import pytest

# Settings read the environment; keep tests off any developer .env values
os.environ.setdefault("ENVIRONMENT", "test")

logfire.configure(send_to_logfire=False, console=False)


def make_token(sub: str | None = "auth0|abc", **claims: Any) -> str:
    """Build a bearer token for the mock verifier.

    The mock verifier does not check signatures, so any key works.
    """
    payload = dict(claims)
    if sub is not None:
        payload["sub"] = sub
    return jwt.encode(payload, "test-secret-key-with-enough-length!", algorithm="HS256")


def bearer(sub: str = "auth0|abc") -> dict[str, str]:
    """Authorization header for the given token subject."""
    return {"Authorization": f"Bearer {make_token(sub)}"}


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return bearer("auth0|abc")
