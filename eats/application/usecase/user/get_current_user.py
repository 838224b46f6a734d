"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from eats.application.usecase.base import BaseUseCase
from eats.application.usecase.user.common import UserResponse
from eats.domain.service import UserService
from eats.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From resolved identity


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the calling user's account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Load the account bound to the request.

        Raises:
            NotFoundError: If the account no longer exists
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return UserResponse.from_user(user)
