"""User domain service."""

from dataclasses import dataclass
from uuid import uuid4

import logfire

from eats.domain.error import AlreadyExistsError, NotFoundError
from eats.domain.model import User
from eats.domain.repository import UserRepository
from eats.domain.value import UserId, UserProfile

from .base import Service


@dataclass(frozen=True)
class ProvisionResult:
    """Outcome of provisioning an account.

    `created` is False when an account for the identity already existed.
    """

    user: User
    created: bool


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_auth0_id(self, auth0_id: str) -> User | None:
        """Get user by Auth0 identity.

        Args:
            auth0_id: Token subject

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_by_auth0_id", auth0_id=auth0_id):
            return await self.user_repository.find_by_auth0_id(auth0_id)

    async def provision(
        self, auth0_id: str, email: str, profile: UserProfile | None = None
    ) -> ProvisionResult:
        """Make sure exactly one account exists for an Auth0 identity.

        Steps:
        1. Look the identity up; if bound already, nothing to do
        2. Otherwise insert a new account
        3. If the insert loses a race against a concurrent call (unique
           constraint on auth0_id), report the winner's account as existing

        Args:
            auth0_id: Token subject to bind
            email: Account email
            profile: Optional initial profile fields

        Returns:
            The account and whether this call created it
        """
        with logfire.span("user_service.provision", auth0_id=auth0_id):
            existing = await self.user_repository.find_by_auth0_id(auth0_id)
            if existing:
                logfire.info(
                    "User already provisioned",
                    auth0_id=auth0_id,
                    user_id=str(existing.id),
                )
                return ProvisionResult(user=existing, created=False)

            profile = profile or UserProfile()
            user = User(
                id=UserId(uuid4()),
                auth0_id=auth0_id,
                email=email,
                name=profile.name,
                address_line1=profile.address_line1,
                city=profile.city,
                country=profile.country,
            )

            try:
                saved = await self.user_repository.add(user)
            except AlreadyExistsError:
                logfire.warn("Concurrent provisioning detected", auth0_id=auth0_id)
                winner = await self.user_repository.find_by_auth0_id(auth0_id)
                if not winner:
                    raise
                return ProvisionResult(user=winner, created=False)

            logfire.info("User provisioned", auth0_id=auth0_id, user_id=str(saved.id))
            return ProvisionResult(user=saved, created=True)

    async def update_profile(self, user_id: UserId, profile: UserProfile) -> User:
        """Overwrite the profile fields of an account.

        Fields missing from `profile` are cleared, not kept.

        Args:
            user_id: Account to update
            profile: New profile fields

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found (nothing is written)
        """
        user = await self.get_by_id(user_id)
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            saved = await self.user_repository.save(user.with_profile(profile))
            logfire.info("User profile updated", user_id=str(saved.id))
            return saved
