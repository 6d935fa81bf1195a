"""Dependencies — build services from the DatabasePool held on app.state.

Invariants:
    - The pool is created once in the lifespan; every request receives it explicitly
    - Services and repositories are stateless and cheap: built per request
"""

from fastapi import Depends, Request

from congregation.infrastructure.database import DatabasePool
from congregation.repositories.church_member_repository import ChurchMemberRepository
from congregation.repositories.user_repository import UserRepository
from congregation.services.church_member_service import ChurchMemberService
from congregation.services.user_service import UserService


def get_database(request: Request) -> DatabasePool:
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not initialized")
    return database


def get_user_service(
    database: DatabasePool = Depends(get_database),
) -> UserService:
    return UserService(UserRepository(database.executor()))


def get_church_member_service(
    database: DatabasePool = Depends(get_database),
) -> ChurchMemberService:
    return ChurchMemberService(ChurchMemberRepository(database.executor()))
