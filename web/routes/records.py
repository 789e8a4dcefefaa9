"""
기록 API 라우터

POST /record                  - 기록 추가
POST /record/edit/{id}        - 기록 수정 (정산 여부 유지)
POST /record/delete/{id}      - 기록 삭제
POST /record/togglePaid/{id}  - 정산 여부 반전
"""

from typing import Any

from fastapi import APIRouter, Depends

from core.ledger.engine import LedgerEngine
from web.dependencies import get_engine
from web.models.requests import RecordRequest
from web.models.responses import (
    ErrorResponse,
    RecordCreatedResponse,
    SuccessResponse,
    TogglePaidResponse,
)

router = APIRouter(
    prefix="/record",
    tags=["Record"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.post("", response_model=RecordCreatedResponse)
async def create_record(
    request: RecordRequest,
    engine: LedgerEngine = Depends(get_engine),
) -> dict[str, Any]:
    """기록 추가

    Args:
        request: 보낸 사람, 받은 사람, 금액, 날짜, 메모

    Returns:
        생성된 기록 정보
    """
    record = await engine.create_record(
        from_id=request.from_id,
        to_id=request.to_id,
        amount=request.amount,
        date=request.date,
        memo=request.memo,
    )
    return {"success": True, "record": record.to_dict()}


@router.post("/edit/{record_id}", response_model=SuccessResponse)
async def update_record(
    record_id: int,
    request: RecordRequest,
    engine: LedgerEngine = Depends(get_engine),
) -> dict[str, Any]:
    """기록 수정"""
    await engine.update_record(
        record_id,
        from_id=request.from_id,
        to_id=request.to_id,
        amount=request.amount,
        date=request.date,
        memo=request.memo,
    )
    return {"success": True}


@router.post("/delete/{record_id}", response_model=SuccessResponse)
async def delete_record(
    record_id: int,
    engine: LedgerEngine = Depends(get_engine),
) -> dict[str, Any]:
    """기록 삭제"""
    await engine.delete_record(record_id)
    return {"success": True}


@router.post("/togglePaid/{record_id}", response_model=TogglePaidResponse)
async def toggle_paid(
    record_id: int,
    engine: LedgerEngine = Depends(get_engine),
) -> dict[str, Any]:
    """정산 여부 반전

    Returns:
        변경 후 정산 여부
    """
    is_paid = await engine.toggle_paid(record_id)
    return {"success": True, "isPaid": is_paid}
