"""Request authentication dependencies.

Routes declare who may call them by taking one of these as a parameter:

    @router.get("")
    async def get_thing(identity: CurrentIdentity, ...):
        identity.user_id  # account bound to the bearer token

Both dependencies resolve the AuthService from the request's DI container,
so the account lookup shares the request's database session.
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from eats.domain.service import AuthService
from eats.domain.value import ResolvedIdentity


async def _auth_service(request: Request) -> AuthService:
    return await request.state.dishka_container.get(AuthService)


async def require_identity(
    request: Request,
    authorization: str | None = Header(default=None),
) -> ResolvedIdentity:
    """Verify the bearer token and bind it to an existing account.

    Raises:
        AuthenticationError: Rendered as an empty 401 response
    """
    auth_service = await _auth_service(request)
    return await auth_service.authenticate(authorization)


async def require_verified_token(
    request: Request,
    authorization: str | None = Header(default=None),
) -> str:
    """Verify the bearer token only.

    Used where the caller may not have an account yet.

    Raises:
        AuthenticationError: Rendered as an empty 401 response
    """
    auth_service = await _auth_service(request)
    return await auth_service.verify_token(authorization)


CurrentIdentity = Annotated[ResolvedIdentity, Depends(require_identity)]
VerifiedToken = Annotated[str, Depends(require_verified_token)]
