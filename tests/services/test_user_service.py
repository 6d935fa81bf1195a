"""User Service — validation, uniqueness and not-found rules.

Tests cover:
    - Invalid input is rejected before the repository is touched
    - Duplicate email on create/update -> ConflictError
    - Update of a missing id -> NotFoundError
    - Unchanged email skips the uniqueness lookup
    - delete has no existence pre-check
"""

from datetime import timezone

import pytest

from congregation.core.entities import User
from congregation.core.errors import ConflictError, NotFoundError, ValidationError


class TestCreate:
    async def test_valid_user_is_persisted(self, user_service, user_repo):
        user_repo.create.return_value = 7
        user = User(name="Ann", email="ann@example.com")

        assert await user_service.create(user) == 7
        user_repo.get_by_email.assert_awaited_once_with("ann@example.com")
        user_repo.create.assert_awaited_once_with(user)

    async def test_created_at_defaults_to_aware_utc(self, user_service, user_repo):
        user = User(name="Ann", email="ann@example.com")
        await user_service.create(user)
        assert user.created_at is not None
        assert user.created_at.tzinfo == timezone.utc

    @pytest.mark.parametrize("name,email,field", [
        ("", "ann@example.com", "name"),
        ("   ", "ann@example.com", "name"),
        ("A" * 256, "ann@example.com", "name"),
        ("Ann", "", "email"),
        ("Ann", "not-an-email", "email"),
    ])
    async def test_invalid_input_never_reaches_storage(
        self, user_service, user_repo, name, email, field,
    ):
        with pytest.raises(ValidationError) as exc_info:
            await user_service.create(User(name=name, email=email))
        assert exc_info.value.field == field
        user_repo.get_by_email.assert_not_awaited()
        user_repo.create.assert_not_awaited()

    async def test_duplicate_email_conflicts(self, user_service, user_repo):
        user_repo.get_by_email.return_value = User(
            id=3, name="Other", email="ann@example.com",
        )
        with pytest.raises(ConflictError) as exc_info:
            await user_service.create(User(name="Ann", email="ann@example.com"))
        assert exc_info.value.field == "email"
        user_repo.create.assert_not_awaited()

    async def test_padded_input_is_trimmed_before_storage(self, user_service, user_repo):
        user = User(name=" Ann ", email=" ann@example.com ")
        await user_service.create(user)
        user_repo.get_by_email.assert_awaited_once_with("ann@example.com")
        user_repo.create.assert_awaited_once_with(
            User(name="Ann", email="ann@example.com", created_at=user.created_at),
        )


class TestGetById:
    @pytest.mark.parametrize("bad_id", [0, -1])
    async def test_non_positive_id_rejected(self, user_service, user_repo, bad_id):
        with pytest.raises(ValidationError):
            await user_service.get_by_id(bad_id)
        user_repo.get_by_id.assert_not_awaited()

    async def test_missing_returns_none(self, user_service, user_repo):
        user_repo.get_by_id.return_value = None
        assert await user_service.get_by_id(9) is None


class TestUpdate:
    async def test_missing_user_raises_not_found(self, user_service, user_repo):
        user_repo.get_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await user_service.update(User(id=5, name="Ann", email="ann@example.com"))
        user_repo.update.assert_not_awaited()

    async def test_unchanged_email_skips_lookup(self, user_service, user_repo):
        user_repo.get_by_id.return_value = User(id=5, name="Ann", email="ann@example.com")
        await user_service.update(User(id=5, name="Anne", email="ann@example.com"))
        user_repo.get_by_email.assert_not_awaited()
        user_repo.update.assert_awaited_once()

    async def test_changed_email_taken_conflicts(self, user_service, user_repo):
        user_repo.get_by_id.return_value = User(id=5, name="Ann", email="ann@example.com")
        user_repo.get_by_email.return_value = User(id=6, name="Ben", email="ben@example.com")
        with pytest.raises(ConflictError):
            await user_service.update(User(id=5, name="Ann", email="ben@example.com"))
        user_repo.update.assert_not_awaited()

    async def test_missing_id_rejected(self, user_service, user_repo):
        with pytest.raises(ValidationError):
            await user_service.update(User(name="Ann", email="ann@example.com"))
        user_repo.get_by_id.assert_not_awaited()


class TestDelete:
    async def test_no_existence_precheck(self, user_service, user_repo):
        await user_service.delete(99)
        user_repo.get_by_id.assert_not_awaited()
        user_repo.delete.assert_awaited_once_with(99)

    async def test_non_positive_id_rejected(self, user_service, user_repo):
        with pytest.raises(ValidationError):
            await user_service.delete(0)
        user_repo.delete.assert_not_awaited()


class TestAgainstDatabase:
    async def test_create_then_list(self, live_user_service):
        await live_user_service.create(User(name="Ann", email="ann@example.com"))
        await live_user_service.create(User(name="Ben", email="ben@example.com"))
        emails = [u.email for u in await live_user_service.list()]
        assert emails == ["ann@example.com", "ben@example.com"]

    async def test_update_to_taken_email_conflicts(self, live_user_service):
        await live_user_service.create(User(name="Ann", email="ann@example.com"))
        ben_id = await live_user_service.create(User(name="Ben", email="ben@example.com"))
        with pytest.raises(ConflictError):
            await live_user_service.update(
                User(id=ben_id, name="Ben", email="ann@example.com"),
            )
