"""
Record 저장소

record 테이블 CRUD 처리.
인물 참조 유효성은 PersonStore로 확인한다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from core.errors import InvalidReferenceError, NotFoundError
from core.ledger.validation import RecordInput, validate_record_input
from core.types import RecordView, TransferRecord

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter
    from core.ledger.person_store import PersonStore

logger = logging.getLogger(__name__)

_RECORD_COLUMNS = "id, amount, fromId, toId, date, memo, isPaid"


class RecordStore:
    """Record 저장소

    Args:
        db: SQLite 어댑터
        people: 참조 검증용 PersonStore
    """

    def __init__(self, db: SQLiteAdapter, people: PersonStore):
        self.db = db
        self.people = people

    async def _check_references(self, data: RecordInput) -> None:
        """양쪽 인물이 존재하는지 확인"""
        if not await self.people.exists(data.from_id):
            raise InvalidReferenceError(data.from_id, field="fromId")
        if not await self.people.exists(data.to_id):
            raise InvalidReferenceError(data.to_id, field="toId")

    async def create(
        self,
        from_id: Any,
        to_id: Any,
        amount: Any,
        date: Any,
        memo: Any,
    ) -> TransferRecord:
        """기록 생성 (is_paid = False)

        Raises:
            ValidationError: 입력값 오류
            InvalidReferenceError: 존재하지 않는 인물 ID
        """
        data = validate_record_input(from_id, to_id, amount, date, memo)

        async with self.db.transaction():
            await self._check_references(data)
            cursor = await self.db.execute(
                """
                INSERT INTO record (amount, fromId, toId, date, memo, isPaid)
                VALUES (?, ?, ?, ?, ?, 0)
                """,
                (float(data.amount), data.from_id, data.to_id, data.date, data.memo),
            )
            record_id = int(cursor.lastrowid)

        logger.info(
            f"Record created: {record_id}",
            extra={
                "record_id": record_id,
                "from_id": data.from_id,
                "to_id": data.to_id,
                "amount": str(data.amount),
            },
        )
        return TransferRecord(
            id=record_id,
            amount=data.amount,
            from_id=data.from_id,
            to_id=data.to_id,
            date=data.date,
            memo=data.memo,
            is_paid=False,
        )

    async def update(
        self,
        record_id: int,
        from_id: Any,
        to_id: Any,
        amount: Any,
        date: Any,
        memo: Any,
    ) -> None:
        """기록 수정 (is_paid는 변경하지 않음)

        Raises:
            ValidationError: 입력값 오류
            NotFoundError: 기록이 없는 경우
            InvalidReferenceError: 존재하지 않는 인물 ID
        """
        data = validate_record_input(from_id, to_id, amount, date, memo)

        async with self.db.transaction():
            if not await self._exists(record_id):
                raise NotFoundError("Record", record_id)
            await self._check_references(data)
            await self.db.execute(
                """
                UPDATE record
                SET amount = ?, fromId = ?, toId = ?, date = ?, memo = ?
                WHERE id = ?
                """,
                (
                    float(data.amount),
                    data.from_id,
                    data.to_id,
                    data.date,
                    data.memo,
                    record_id,
                ),
            )

        logger.info(f"Record updated: {record_id}", extra={"record_id": record_id})

    async def delete(self, record_id: int) -> None:
        """기록 영구 삭제

        Raises:
            NotFoundError: 기록이 없는 경우
        """
        async with self.db.transaction():
            cursor = await self.db.execute(
                "DELETE FROM record WHERE id = ?",
                (record_id,),
            )
            if cursor.rowcount == 0:
                raise NotFoundError("Record", record_id)

        logger.info(f"Record deleted: {record_id}", extra={"record_id": record_id})

    async def toggle_paid(self, record_id: int) -> bool:
        """정산 여부 반전

        같은 트랜잭션 안에서 현재 값을 읽고 반전하여 기록.

        Returns:
            변경 후 is_paid 값

        Raises:
            NotFoundError: 기록이 없는 경우
        """
        async with self.db.transaction():
            row = await self.db.fetchone(
                "SELECT isPaid FROM record WHERE id = ?",
                (record_id,),
            )
            if row is None:
                raise NotFoundError("Record", record_id)

            new_value = not bool(row[0])
            await self.db.execute(
                "UPDATE record SET isPaid = ? WHERE id = ?",
                (1 if new_value else 0, record_id),
            )

        logger.info(
            f"Record paid flag toggled: {record_id} -> {new_value}",
            extra={"record_id": record_id, "is_paid": new_value},
        )
        return new_value

    async def get(self, record_id: int) -> TransferRecord:
        """기록 조회

        Raises:
            NotFoundError: 기록이 없는 경우
        """
        row = await self.db.fetchone(
            f"SELECT {_RECORD_COLUMNS} FROM record WHERE id = ?",
            (record_id,),
        )
        if row is None:
            raise NotFoundError("Record", record_id)
        return TransferRecord.from_row(row)

    async def _exists(self, record_id: int) -> bool:
        row = await self.db.fetchone(
            "SELECT 1 FROM record WHERE id = ?",
            (record_id,),
        )
        return row is not None

    async def list_all(self) -> list[TransferRecord]:
        """전체 기록 (ID 오름차순)"""
        rows = await self.db.fetchall(
            f"SELECT {_RECORD_COLUMNS} FROM record ORDER BY id ASC"
        )
        return [TransferRecord.from_row(row) for row in rows]

    async def list_with_people(self) -> list[RecordView]:
        """인물 이름/색상을 결합한 기록 목록 (ID 오름차순)"""
        rows = await self.db.fetchall(
            """
            SELECT id, amount, fromId, fromName, fromColor,
                   toId, toName, toColor, date, memo, isPaid
            FROM v_record_detail
            ORDER BY id ASC
            """
        )
        return [RecordView.from_row(row) for row in rows]
