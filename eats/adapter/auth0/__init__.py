"""Auth0 adapter."""

from .verifier import (
    Auth0TokenVerifier,
    MockAuth0TokenVerifier,
    RealAuth0TokenVerifier,
)

__all__ = ["Auth0TokenVerifier", "RealAuth0TokenVerifier", "MockAuth0TokenVerifier"]
