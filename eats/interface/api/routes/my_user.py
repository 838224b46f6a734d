"""Current user routes.

The account of the caller is identified by the bearer token; there is no
way to address another user's account through these routes.
"""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status
from fastapi.responses import JSONResponse

from eats.application.usecase.user import (
    CreateCurrentUserUseCase,
    GetCurrentUserUseCase,
    UpdateCurrentUserUseCase,
)
from eats.application.usecase.user.common import UserResponse
from eats.application.usecase.user.create_current_user import CreateCurrentUserRequest
from eats.application.usecase.user.get_current_user import GetCurrentUserRequest
from eats.application.usecase.user.update_current_user import (
    UpdateCurrentUserForm,
    UpdateCurrentUserRequest,
)
from eats.domain.error import AuthenticationError, NotFoundError
from eats.interface.api.deps import CurrentIdentity, VerifiedToken
from eats.util.jwt import JWTError, decode_subject

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/my/user", tags=["my-user"], route_class=DishkaRoute)


@router.get("", response_model=UserResponse)
async def get_current_user(
    identity: CurrentIdentity,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> UserResponse:
    """Get the caller's account.

    Example:
        GET /api/my/user
        Authorization: Bearer <access token>

        Response:
        {
            "_id": "123e4567-e89b-12d3-a456-426614174000",
            "auth0Id": "auth0|abc",
            "email": "a@x.io",
            "name": "Ada",
            "addressLine1": "1 Main St",
            "city": "London",
            "country": "UK"
        }
    """
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=str(identity.user_id))
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    except Exception as e:
        logger.exception(f"Error fetching user {identity.user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching user",
        )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_200_OK: {"description": "Account already existed (empty body)"},
        status.HTTP_201_CREATED: {"model": UserResponse},
    },
)
async def create_current_user(
    request: CreateCurrentUserRequest,
    token: VerifiedToken,
    create_current_user_use_case: FromDishka[CreateCurrentUserUseCase],
) -> Response:
    """Provision the caller's account on first sign-in.

    Safe to call on every sign-in: when the account already exists nothing
    is written and an empty 200 is returned.

    The body's auth0Id must be the subject of the bearer token; a caller
    cannot provision an account for somebody else's identity.

    Example:
        POST /api/my/user
        Authorization: Bearer <access token>

        Request:
        {"auth0Id": "auth0|abc", "email": "a@x.io"}

        Response (201):
        {"_id": "...", "auth0Id": "auth0|abc", "email": "a@x.io", ...}
    """
    try:
        subject = decode_subject(token)
    except JWTError as e:
        raise AuthenticationError("token has no subject") from e
    if subject != request.auth0_id:
        logger.warning(
            f"Provisioning refused: token subject {subject} != {request.auth0_id}"
        )
        raise AuthenticationError("token subject does not match auth0Id")

    try:
        result = await create_current_user_use_case.execute(request)
    except Exception as e:
        logger.exception(f"Error creating user {request.auth0_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error creating user",
        )

    if not result.created:
        logger.info(f"User already provisioned: {request.auth0_id}")
        return Response(status_code=status.HTTP_200_OK)

    logger.info(f"User provisioned: {request.auth0_id} -> {result.user.id}")
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=result.user.model_dump(mode="json", by_alias=True),
    )


@router.put("", response_model=UserResponse)
async def update_current_user(
    request: UpdateCurrentUserForm,
    identity: CurrentIdentity,
    update_current_user_use_case: FromDishka[UpdateCurrentUserUseCase],
) -> UserResponse:
    """Overwrite the caller's profile.

    name, addressLine1, city and country are all replaced; a field left out
    of the request is cleared.
    """
    try:
        return await update_current_user_use_case.execute(
            UpdateCurrentUserRequest(user_id=str(identity.user_id), form=request)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    except Exception as e:
        logger.exception(f"Error updating user {identity.user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error updating user",
        )
