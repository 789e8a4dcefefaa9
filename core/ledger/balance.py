"""
잔액 계산기

인물별 순잔액 = 보낸 금액 합계 - 받은 금액 합계.

- 정산 여부(is_paid)와 무관하게 모든 기록을 합산
  ("paid"는 확인 표시일 뿐 기록을 취소하지 않음)
- 중간 합계는 반올림 없이 Decimal로 계산, 최종값만 소수점 3자리 반올림
- 전체 인물 잔액의 합은 항상 0 (각 기록이 한 번은 +, 한 번은 -로 반영됨)
"""

from collections.abc import Iterable
from decimal import Decimal

from core.types import Person, PersonBalance, TransferRecord
from core.utils.amount import round_amount


def compute_balances(
    people: Iterable[Person],
    records: Iterable[TransferRecord],
) -> dict[int, Decimal]:
    """인물별 순잔액 계산

    Args:
        people: 전체 인물
        records: 전체 기록

    Returns:
        {person_id: 잔액} (기록이 없는 인물은 0)
    """
    totals: dict[int, Decimal] = {person.id: Decimal("0") for person in people}

    for record in records:
        if record.from_id in totals:
            totals[record.from_id] += record.amount
        if record.to_id in totals:
            totals[record.to_id] -= record.amount

    return {person_id: round_amount(total) for person_id, total in totals.items()}


def total_balance(balances: dict[int, Decimal]) -> Decimal:
    """전체 잔액 합계 (보존 법칙 확인용, 정상이면 0)"""
    return sum(balances.values(), Decimal("0"))


def build_person_balances(
    people: Iterable[Person],
    balances: dict[int, Decimal],
) -> list[PersonBalance]:
    """인물 정보와 잔액 결합 (인물 순서 유지)"""
    return [
        PersonBalance(
            id=person.id,
            name=person.name,
            color=person.color,
            balance=balances.get(person.id, round_amount(Decimal("0"))),
        )
        for person in people
    ]
