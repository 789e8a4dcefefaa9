"""
장부 조회 API 라우터

GET /api/ledger          - 목록 화면 데이터 (인물, 잔액, 기록)
GET /api/ledger/people   - 인물 목록
GET /api/ledger/balances - 인물별 잔액
GET /api/ledger/records  - 인물 정보가 결합된 기록 목록
"""

from typing import Any

from fastapi import APIRouter, Depends

from core.ledger.engine import LedgerEngine
from web.dependencies import get_engine
from web.models.responses import (
    BalanceResponse,
    LedgerViewResponse,
    PersonResponse,
    RecordViewResponse,
)

router = APIRouter(prefix="/api/ledger", tags=["Ledger"])


@router.get("", response_model=LedgerViewResponse)
async def get_ledger_view(
    engine: LedgerEngine = Depends(get_engine),
) -> dict[str, Any]:
    """목록 화면 데이터

    인물, 인물별 잔액, 기록을 같은 시점 기준으로 반환.
    """
    view = await engine.list_view()
    return view.to_dict()


@router.get("/people", response_model=list[PersonResponse])
async def get_people(
    engine: LedgerEngine = Depends(get_engine),
) -> list[dict[str, Any]]:
    """인물 목록 (등록 순)"""
    people = await engine.list_people()
    return [p.to_dict() for p in people]


@router.get("/balances", response_model=list[BalanceResponse])
async def get_balances(
    engine: LedgerEngine = Depends(get_engine),
) -> list[dict[str, Any]]:
    """인물별 잔액"""
    view = await engine.list_view()
    return [b.to_dict() for b in view.balances]


@router.get("/records", response_model=list[RecordViewResponse])
async def get_records(
    engine: LedgerEngine = Depends(get_engine),
) -> list[dict[str, Any]]:
    """기록 목록 (ID 순)"""
    records = await engine.list_records_with_people()
    return [r.to_dict() for r in records]
