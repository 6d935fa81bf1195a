"""Users Routes — thin HTTP mapping onto UserService.

Invariants:
    - POST returns 201 {"id": n}; PUT and DELETE return 204 with no body
    - GET /{id} maps a None result to 404; the service never raises for a missing read
    - Error status codes come from the raised CongregationError (see api/error_handlers.py)
"""

from fastapi import APIRouter, Depends, Response, status

from congregation.api.dependencies import get_user_service
from congregation.core.domain_types import EntityKind, UserId
from congregation.core.entities import User
from congregation.core.errors import NotFoundError
from congregation.schemas.user import CreatedResponse, UserResponse, UserWrite
from congregation.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post(
    "", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserWrite, service: UserService = Depends(get_user_service),
):
    user_id = await service.create(User(name=body.name, email=body.email))
    return CreatedResponse(id=user_id)


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return [UserResponse.model_validate(u) for u in await service.list()]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int, service: UserService = Depends(get_user_service),
):
    user = await service.get_by_id(UserId(user_id))
    if user is None:
        raise NotFoundError(EntityKind.USER.value, user_id)
    return UserResponse.model_validate(user)


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: int,
    body: UserWrite,
    service: UserService = Depends(get_user_service),
):
    await service.update(User(id=UserId(user_id), name=body.name, email=body.email))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int, service: UserService = Depends(get_user_service),
):
    await service.delete(UserId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
