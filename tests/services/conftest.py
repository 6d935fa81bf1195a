"""Service fixtures — mocked repositories for rule tests, real ones for scenarios."""

from unittest.mock import AsyncMock

import pytest

from congregation.repositories.church_member_repository import ChurchMemberRepository
from congregation.repositories.user_repository import UserRepository
from congregation.services.church_member_service import ChurchMemberService
from congregation.services.user_service import UserService


@pytest.fixture
def user_repo():
    repo = AsyncMock()
    repo.get_by_email.return_value = None
    repo.create.return_value = 1
    return repo


@pytest.fixture
def member_repo():
    repo = AsyncMock()
    repo.get_by_email.return_value = None
    repo.create.return_value = 1
    return repo


@pytest.fixture
def user_service(user_repo):
    return UserService(user_repo)


@pytest.fixture
def member_service(member_repo):
    return ChurchMemberService(member_repo)


@pytest.fixture
def live_user_service(executor):
    return UserService(UserRepository(executor))


@pytest.fixture
def live_member_service(executor):
    return ChurchMemberService(ChurchMemberRepository(executor))
