"""Update current user use case."""

from uuid import UUID

from pydantic import BaseModel

from eats.application.usecase.base import ApiModel, BaseUseCase
from eats.application.usecase.user.common import UserResponse
from eats.domain.service import UserService
from eats.domain.value import UserId, UserProfile


class UpdateCurrentUserForm(ApiModel):
    """JSON body of PUT /api/my/user."""

    name: str | None = None
    address_line1: str | None = None
    city: str | None = None
    country: str | None = None


class UpdateCurrentUserRequest(BaseModel):
    """Update current user request."""

    user_id: str  # From resolved identity
    form: UpdateCurrentUserForm


class UpdateCurrentUserUseCase(BaseUseCase):
    """Use case for updating the calling user's profile.

    All four profile fields are overwritten, so repeating a request
    leaves the account unchanged.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateCurrentUserRequest) -> UserResponse:
        """Execute update profile flow.

        Raises:
            NotFoundError: If the account does not exist
        """
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)),
            UserProfile(**request.form.model_dump()),
        )
        return UserResponse.from_user(user)
