"""
인물 API 라우터

POST /person            - 인물 추가 (색상 자동 생성)
POST /person/edit/{id}  - 이름/색상 수정
"""

from typing import Any

from fastapi import APIRouter, Depends

from core.ledger.engine import LedgerEngine
from web.dependencies import get_engine
from web.models.requests import PersonCreateRequest, PersonUpdateRequest
from web.models.responses import ErrorResponse, PersonCreatedResponse, SuccessResponse

router = APIRouter(
    prefix="/person",
    tags=["Person"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.post("", response_model=PersonCreatedResponse)
async def create_person(
    request: PersonCreateRequest,
    engine: LedgerEngine = Depends(get_engine),
) -> dict[str, Any]:
    """인물 추가

    Args:
        request: 인물 추가 요청 (이름)

    Returns:
        생성된 인물 정보
    """
    person = await engine.create_person(request.name)
    return {"success": True, "person": person.to_dict()}


@router.post("/edit/{person_id}", response_model=SuccessResponse)
async def update_person(
    person_id: int,
    request: PersonUpdateRequest,
    engine: LedgerEngine = Depends(get_engine),
) -> dict[str, Any]:
    """인물 이름/색상 수정"""
    await engine.update_person(person_id, request.name, request.color)
    return {"success": True}
