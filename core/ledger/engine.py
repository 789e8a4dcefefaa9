"""
Ledger Engine

모든 변경/조회의 단일 진입점.
PersonStore, RecordStore, 잔액 계산기를 묶어서 제공한다.

- 연결된 SQLiteAdapter를 생성자로 주입받음 (연결 수명은 호출자가 관리)
- 모든 작업을 asyncio.Lock으로 직렬화: 목록 조회가 진행 중인 변경을
  중간 상태로 보지 않도록 함
"""

from __future__ import annotations

import asyncio
import logging
import random
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from core.ledger.balance import build_person_balances, compute_balances
from core.ledger.person_store import PersonStore
from core.ledger.record_store import RecordStore
from core.types import LedgerView, Person, RecordView, TransferRecord

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


class LedgerEngine:
    """Ledger Engine

    Args:
        db: 연결된 SQLite 어댑터
        rng: 색상 생성용 난수 생성기 (테스트용)

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        await init_ledger_schema(db)
        engine = LedgerEngine(db)

        alice = await engine.create_person("Alice")
        bob = await engine.create_person("Bob")
        await engine.create_record(alice.id, bob.id, "100", "2024-01-01", "dinner")

        view = await engine.list_view()
    ```
    """

    def __init__(self, db: SQLiteAdapter, rng: random.Random | None = None):
        self.db = db
        self.people = PersonStore(db, rng=rng)
        self.records = RecordStore(db, self.people)
        self._lock = asyncio.Lock()

    # -------------------------------------------------------------------------
    # Person
    # -------------------------------------------------------------------------

    async def create_person(self, name: Any) -> Person:
        """인물 추가"""
        async with self._lock:
            return await self.people.create(name)

    async def update_person(self, person_id: int, name: Any, color: Any) -> None:
        """인물 이름/색상 수정"""
        async with self._lock:
            await self.people.update(person_id, name, color)

    async def get_person(self, person_id: int) -> Person:
        """인물 조회"""
        async with self._lock:
            return await self.people.get(person_id)

    async def list_people(self) -> list[Person]:
        """전체 인물 (등록 순)"""
        async with self._lock:
            return await self.people.list_all()

    # -------------------------------------------------------------------------
    # Record
    # -------------------------------------------------------------------------

    async def create_record(
        self,
        from_id: Any,
        to_id: Any,
        amount: Any,
        date: Any,
        memo: Any,
    ) -> TransferRecord:
        """기록 추가"""
        async with self._lock:
            return await self.records.create(from_id, to_id, amount, date, memo)

    async def update_record(
        self,
        record_id: int,
        from_id: Any,
        to_id: Any,
        amount: Any,
        date: Any,
        memo: Any,
    ) -> None:
        """기록 수정 (정산 여부 유지)"""
        async with self._lock:
            await self.records.update(record_id, from_id, to_id, amount, date, memo)

    async def delete_record(self, record_id: int) -> None:
        """기록 삭제"""
        async with self._lock:
            await self.records.delete(record_id)

    async def toggle_paid(self, record_id: int) -> bool:
        """정산 여부 반전, 변경 후 값 반환"""
        async with self._lock:
            return await self.records.toggle_paid(record_id)

    async def get_record(self, record_id: int) -> TransferRecord:
        """기록 조회"""
        async with self._lock:
            return await self.records.get(record_id)

    async def list_records(self) -> list[TransferRecord]:
        """전체 기록 (ID 순, 인물 정보 없음)"""
        async with self._lock:
            return await self.records.list_all()

    async def list_records_with_people(self) -> list[RecordView]:
        """인물 정보가 결합된 기록 목록"""
        async with self._lock:
            return await self.records.list_with_people()

    # -------------------------------------------------------------------------
    # 잔액 / 목록 화면
    # -------------------------------------------------------------------------

    async def compute_balances(self) -> dict[int, Decimal]:
        """현재 상태 기준 인물별 잔액"""
        async with self._lock:
            people = await self.people.list_all()
            records = await self.records.list_all()
        return compute_balances(people, records)

    async def list_view(self) -> LedgerView:
        """목록 화면 데이터 (인물, 잔액, 결합된 기록)

        세 조회를 하나의 락 구간에서 수행하여 같은 시점의 상태를 반환.
        """
        async with self._lock:
            people = await self.people.list_all()
            records = await self.records.list_all()
            views = await self.records.list_with_people()

        balances = compute_balances(people, records)
        logger.debug(
            "Ledger view built",
            extra={"people": len(people), "records": len(records)},
        )
        return LedgerView(
            people=people,
            balances=build_person_balances(people, balances),
            records=views,
        )
