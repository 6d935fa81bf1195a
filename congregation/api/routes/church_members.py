"""Church Members Routes — thin HTTP mapping onto ChurchMemberService.

Invariants:
    - /joined is declared before /{member_id} so it is never parsed as an id
    - Range dates are YYYY-MM-DD; `end` is widened by one day so the whole end day is included
    - GET /{id} maps a None result to 404
"""

from datetime import date, datetime, time, timedelta

from fastapi import APIRouter, Depends, Query, Response, status

from congregation.api.dependencies import get_church_member_service
from congregation.core.domain_types import EntityKind, MemberId
from congregation.core.entities import ChurchMember
from congregation.core.errors import NotFoundError
from congregation.schemas.church_member import ChurchMemberResponse, ChurchMemberWrite
from congregation.schemas.user import CreatedResponse
from congregation.services.church_member_service import ChurchMemberService

router = APIRouter(prefix="/api/v1/members", tags=["members"])


def _member_from_body(
    body: ChurchMemberWrite, member_id: MemberId | None = None,
) -> ChurchMember:
    return ChurchMember(
        id=member_id,
        name=body.name,
        email=body.email,
        phone=body.phone,
        address=body.address,
        biography=body.biography,
        joined_at=body.joined_at,
    )


def _to_responses(members: list[ChurchMember]) -> list[ChurchMemberResponse]:
    return [ChurchMemberResponse.model_validate(m) for m in members]


@router.post(
    "", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED,
)
async def create_member(
    body: ChurchMemberWrite,
    service: ChurchMemberService = Depends(get_church_member_service),
):
    member_id = await service.create(_member_from_body(body))
    return CreatedResponse(id=member_id)


@router.get("", response_model=list[ChurchMemberResponse])
async def list_members(
    service: ChurchMemberService = Depends(get_church_member_service),
):
    return _to_responses(await service.list())


@router.get("/joined", response_model=list[ChurchMemberResponse])
async def list_members_by_joined_date(
    start: date = Query(..., description="Start date (YYYY-MM-DD)"),
    end: date = Query(..., description="End date (YYYY-MM-DD)"),
    service: ChurchMemberService = Depends(get_church_member_service),
):
    """Members who joined between start and end, both days included."""
    start_at = datetime.combine(start, time.min)
    end_at = datetime.combine(end, time.min) + timedelta(days=1)
    return _to_responses(await service.list_by_joined_range(start_at, end_at))


@router.get("/{member_id}", response_model=ChurchMemberResponse)
async def get_member(
    member_id: int,
    service: ChurchMemberService = Depends(get_church_member_service),
):
    member = await service.get_by_id(MemberId(member_id))
    if member is None:
        raise NotFoundError(EntityKind.CHURCH_MEMBER.value, member_id)
    return ChurchMemberResponse.model_validate(member)


@router.put("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_member(
    member_id: int,
    body: ChurchMemberWrite,
    service: ChurchMemberService = Depends(get_church_member_service),
):
    await service.update(_member_from_body(body, MemberId(member_id)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_member(
    member_id: int,
    service: ChurchMemberService = Depends(get_church_member_service),
):
    await service.delete(MemberId(member_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
