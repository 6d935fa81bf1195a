"""Unit of Work — state machine, commit/rollback visibility, connection release.

Tests cover:
    - commit/rollback before begin are no-ops
    - begin exposes the connection; commit/rollback release it
    - Repositories built on uow.executor() share one atomic scope
    - `async with` commits on success and rolls back (re-raising) on failure
    - begin while active and executor() while idle are rejected
"""

import asyncio

import pytest

from congregation.core.domain_types import TransactionState
from congregation.core.entities import User
from congregation.core.errors import PersistenceError
from congregation.repositories.user_repository import UserRepository


async def test_commit_and_rollback_before_begin_are_noops(database):
    uow = database.unit_of_work()
    await uow.commit()
    await uow.rollback()
    assert uow.state is TransactionState.IDLE
    assert uow.connection is None


async def test_begin_exposes_active_connection(database):
    uow = database.unit_of_work()
    await uow.begin()
    try:
        assert uow.state is TransactionState.ACTIVE
        assert uow.connection is not None
    finally:
        await uow.rollback()
    assert uow.connection is None
    assert uow.state is TransactionState.ROLLED_BACK


async def test_commit_persists_every_statement(database):
    uow = database.unit_of_work()
    await uow.begin()
    repo = UserRepository(uow.executor())
    first = await repo.create(User(name="Ann", email="ann@example.com"))
    second = await repo.create(User(name="Ben", email="ben@example.com"))
    await uow.commit()

    assert uow.state is TransactionState.COMMITTED
    outside = UserRepository(database.executor())
    assert (await outside.get_by_id(first)).email == "ann@example.com"
    assert (await outside.get_by_id(second)).email == "ben@example.com"


async def test_rollback_discards_every_statement(database):
    uow = database.unit_of_work()
    await uow.begin()
    repo = UserRepository(uow.executor())
    await repo.create(User(name="Ann", email="ann@example.com"))
    await repo.create(User(name="Ben", email="ben@example.com"))
    await uow.rollback()

    assert await UserRepository(database.executor()).list() == []


async def test_context_manager_commits_on_clean_exit(database):
    async with database.unit_of_work() as uow:
        await UserRepository(uow.executor()).create(
            User(name="Cal", email="cal@example.com"),
        )
    assert uow.state is TransactionState.COMMITTED
    users = await UserRepository(database.executor()).list()
    assert [u.email for u in users] == ["cal@example.com"]


async def test_context_manager_rolls_back_and_reraises(database):
    with pytest.raises(RuntimeError, match="abort"):
        async with database.unit_of_work() as uow:
            await UserRepository(uow.executor()).create(
                User(name="Dee", email="dee@example.com"),
            )
            raise RuntimeError("abort")

    assert uow.state is TransactionState.ROLLED_BACK
    assert await UserRepository(database.executor()).list() == []


async def test_failed_statement_inside_scope_leaves_nothing_behind(database):
    repo_outside = UserRepository(database.executor())
    await repo_outside.create(User(name="Eve", email="eve@example.com"))

    with pytest.raises(PersistenceError):
        async with database.unit_of_work() as uow:
            repo = UserRepository(uow.executor())
            await repo.create(User(name="Fay", email="fay@example.com"))
            await repo.create(User(name="Eve2", email="eve@example.com"))

    emails = [u.email for u in await repo_outside.list()]
    assert emails == ["eve@example.com"]


async def test_begin_twice_raises(database):
    uow = database.unit_of_work()
    await uow.begin()
    try:
        with pytest.raises(PersistenceError):
            await uow.begin()
    finally:
        await uow.rollback()


async def test_executor_requires_active_transaction(database):
    uow = database.unit_of_work()
    with pytest.raises(RuntimeError):
        uow.executor()


async def test_unit_of_work_can_begin_again_after_commit(database):
    uow = database.unit_of_work()
    await uow.begin()
    await uow.commit()
    await uow.begin()
    assert uow.state is TransactionState.ACTIVE
    await uow.rollback()


class _StalledTransaction:
    """Stands in for an AsyncTransaction whose COMMIT never returns."""

    async def commit(self):
        await asyncio.sleep(10)


async def test_cancelled_commit_ends_rolled_back_and_can_begin_again(database):
    uow = database.unit_of_work()
    await uow.begin()
    uow._transaction = _StalledTransaction()

    task = asyncio.create_task(uow.commit())
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert uow.state is TransactionState.ROLLED_BACK
    assert uow.connection is None

    await uow.begin()
    assert uow.state is TransactionState.ACTIVE
    await uow.rollback()
