"""
장부 정합성 점검

DB에 저장된 기록이 코어 불변식을 지키는지 확인.
외부 도구로 DB를 직접 수정한 경우 등을 잡아내기 위한 용도.

- 기록의 양쪽 인물이 모두 존재하는지
- 본인에게 보낸 기록이 없는지
- 금액이 양수인지
- 인물별 잔액 합계가 0인지
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from core.ledger.balance import total_balance
from core.utils.amount import round_amount

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


@dataclass
class ConsistencyIssue:
    """불일치 정보"""

    issue_kind: str  # missing_person, self_transfer, non_positive_amount, unbalanced
    record_id: int | None
    description: str


@dataclass
class ConsistencyReport:
    """점검 결과"""

    person_count: int = 0
    record_count: int = 0
    paid_count: int = 0
    balances: dict[int, Decimal] = field(default_factory=dict)
    issues: list[ConsistencyIssue] = field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        """불일치가 하나도 없으면 True"""
        return not self.issues


async def check_ledger(db: SQLiteAdapter) -> ConsistencyReport:
    """장부 정합성 점검

    Args:
        db: 연결된 SQLiteAdapter (읽기 전용 가능)

    Returns:
        ConsistencyReport
    """
    # PersonStore/RecordStore는 쓰기 경로 검증을 거치므로 원시 행을 직접 조회
    people_rows = await db.fetchall("SELECT id FROM person ORDER BY id")
    record_rows = await db.fetchall(
        "SELECT id, amount, fromId, toId, isPaid FROM record ORDER BY id"
    )

    person_ids = {int(row[0]) for row in people_rows}
    report = ConsistencyReport(
        person_count=len(person_ids),
        record_count=len(record_rows),
        paid_count=sum(1 for row in record_rows if row[4]),
    )

    totals: dict[int, Decimal] = {pid: Decimal("0") for pid in person_ids}
    for record_id, amount, from_id, to_id, _ in record_rows:
        value = Decimal(str(amount))

        for side, person_id in (("fromId", from_id), ("toId", to_id)):
            if person_id not in person_ids:
                report.issues.append(ConsistencyIssue(
                    issue_kind="missing_person",
                    record_id=record_id,
                    description=f"{side} references missing person {person_id}",
                ))

        if from_id == to_id:
            report.issues.append(ConsistencyIssue(
                issue_kind="self_transfer",
                record_id=record_id,
                description=f"record from person {from_id} to themselves",
            ))

        if value <= 0:
            report.issues.append(ConsistencyIssue(
                issue_kind="non_positive_amount",
                record_id=record_id,
                description=f"amount is {value}",
            ))

        if from_id in totals:
            totals[from_id] += value
        if to_id in totals:
            totals[to_id] -= value

    report.balances = {pid: round_amount(total) for pid, total in totals.items()}

    # 누락된 인물이 있으면 잔액 합계는 당연히 틀어지므로 따로 보고하지 않음
    if not any(i.issue_kind == "missing_person" for i in report.issues):
        residual = total_balance(report.balances)
        if residual != 0:
            report.issues.append(ConsistencyIssue(
                issue_kind="unbalanced",
                record_id=None,
                description=f"sum of balances is {residual}, expected 0",
            ))

    if report.is_consistent:
        logger.info(
            "Ledger consistency check passed",
            extra={"people": report.person_count, "records": report.record_count},
        )
    else:
        logger.warning(f"Ledger consistency check found {len(report.issues)} issue(s)")

    return report

