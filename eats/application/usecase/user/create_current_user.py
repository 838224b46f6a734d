"""Create current user use case."""

from pydantic import BaseModel, Field

from eats.application.usecase.base import ApiModel, BaseUseCase
from eats.application.usecase.user.common import UserResponse
from eats.domain.service import UserService
from eats.domain.value import UserProfile


class CreateCurrentUserRequest(ApiModel):
    """Create current user request (JSON body of POST /api/my/user)."""

    auth0_id: str = Field(min_length=1)
    email: str = Field(min_length=1)
    name: str | None = None
    address_line1: str | None = None
    city: str | None = None
    country: str | None = None


class CreateCurrentUserResponse(BaseModel):
    """Create current user response."""

    user: UserResponse
    created: bool  # False when the identity was already provisioned


class CreateCurrentUserUseCase(BaseUseCase):
    """Use case for provisioning an account on first sign-in.

    Calling it again for the same identity is a no-op.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize create current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: CreateCurrentUserRequest
    ) -> CreateCurrentUserResponse:
        """Execute provisioning flow.

        Args:
            request: Identity and initial account fields

        Returns:
            The account and whether it was created by this call
        """
        result = await self.user_service.provision(
            auth0_id=request.auth0_id,
            email=request.email,
            profile=UserProfile(
                name=request.name,
                address_line1=request.address_line1,
                city=request.city,
                country=request.country,
            ),
        )
        return CreateCurrentUserResponse(
            user=UserResponse.from_user(result.user),
            created=result.created,
        )
