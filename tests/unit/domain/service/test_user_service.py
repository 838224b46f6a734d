"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from eats.domain.error import AlreadyExistsError, NotFoundError
from eats.domain.model import User
from eats.domain.repository import UserRepository
from eats.domain.service import UserService
from eats.domain.value import UserId, UserProfile
from eats.persistence.repository.inmemory import InMemoryUserRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class RacingUserRepository(InMemoryUserRepository):
    """Simulates another request provisioning the same identity first.

    The first lookup misses; the insert then hits the unique constraint
    because the concurrent winner's row is already there.
    """

    def __init__(self, winner: User) -> None:
        super().__init__()
        self.winner = winner
        self._lookups = 0

    async def find_by_auth0_id(self, auth0_id: str):
        self._lookups += 1
        if self._lookups == 1:
            return None
        return await super().find_by_auth0_id(auth0_id)

    async def add(self, user: User) -> User:
        self._users[self.winner.id] = self.winner
        return await super().add(user)


class CountingUserRepository(InMemoryUserRepository):
    def __init__(self) -> None:
        super().__init__()
        self.saves = 0

    async def save(self, user: User) -> User:
        self.saves += 1
        return await super().save(user)


class TestProvision:
    """Tests for provision."""

    @pytest.mark.asyncio
    async def test_creates_account_for_new_identity(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        result = await user_service.provision("auth0|abc", "a@x.io")

        # Assert
        assert result.created is True
        assert result.user.auth0_id == "auth0|abc"
        assert result.user.email == "a@x.io"

    @pytest.mark.asyncio
    async def test_second_call_is_noop(self, unit_env):
        """Provisioning twice leaves exactly one account."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        first = await user_service.provision("auth0|abc", "a@x.io")
        second = await user_service.provision("auth0|abc", "other@x.io")

        # Assert
        assert first.created is True
        assert second.created is False
        assert second.user.id == first.user.id
        assert second.user.email == "a@x.io"
        assert [u.auth0_id for u in user_repo.all()] == ["auth0|abc"]

    @pytest.mark.asyncio
    async def test_initial_profile_is_stored(self, unit_env):
        user_service = await unit_env.get(UserService)

        result = await user_service.provision(
            "auth0|abc", "a@x.io", UserProfile(name="Ada", city="London")
        )

        assert result.user.name == "Ada"
        assert result.user.city == "London"
        assert result.user.country is None

    @pytest.mark.asyncio
    async def test_lost_race_reports_existing_account(self):
        """A unique-constraint conflict means someone else provisioned first."""
        # Arrange
        winner = User(id=UserId(uuid4()), auth0_id="auth0|abc", email="a@x.io")
        repo = RacingUserRepository(winner)
        user_service = UserService(user_repository=repo)

        # Act
        result = await user_service.provision("auth0|abc", "a@x.io")

        # Assert
        assert result.created is False
        assert result.user == winner
        assert len(repo.all()) == 1

    @pytest.mark.asyncio
    async def test_distinct_identities_get_distinct_accounts(self, unit_env):
        user_service = await unit_env.get(UserService)

        a = await user_service.provision("auth0|a", "a@x.io")
        b = await user_service.provision("auth0|b", "b@x.io")

        assert a.user.id != b.user.id


class TestUpdateProfile:
    """Tests for update_profile."""

    @pytest.mark.asyncio
    async def test_overwrites_all_profile_fields(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        created = await user_service.provision(
            "auth0|abc", "a@x.io", UserProfile(name="Old", city="Paris")
        )

        # Act
        updated = await user_service.update_profile(
            created.user.id,
            UserProfile(name="Ada", address_line1="1 Main St", country="UK"),
        )

        # Assert
        assert updated.name == "Ada"
        assert updated.address_line1 == "1 Main St"
        assert updated.city is None  # Not sent, so cleared
        assert updated.country == "UK"
        assert updated.auth0_id == "auth0|abc"
        assert updated.email == "a@x.io"

    @pytest.mark.asyncio
    async def test_is_idempotent(self, unit_env):
        user_service = await unit_env.get(UserService)
        created = await user_service.provision("auth0|abc", "a@x.io")
        profile = UserProfile(name="Ada", address_line1="1 Main St", city="London", country="UK")

        first = await user_service.update_profile(created.user.id, profile)
        second = await user_service.update_profile(created.user.id, profile)

        assert first == second

    @pytest.mark.asyncio
    async def test_missing_user_raises_and_writes_nothing(self):
        repo = CountingUserRepository()
        user_service = UserService(user_repository=repo)

        with pytest.raises(NotFoundError):
            await user_service.update_profile(UserId(uuid4()), UserProfile(name="Ada"))
        assert repo.saves == 0
        assert repo.all() == []


class TestGetById:
    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))


class TestInMemoryUserRepository:
    @pytest.mark.asyncio
    async def test_add_enforces_unique_auth0_id(self):
        repo = InMemoryUserRepository()
        await repo.add(User(id=UserId(uuid4()), auth0_id="auth0|abc", email="a@x.io"))

        with pytest.raises(AlreadyExistsError):
            await repo.add(
                User(id=UserId(uuid4()), auth0_id="auth0|abc", email="b@x.io")
            )
