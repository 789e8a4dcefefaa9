"""
타입 정의 모듈

Ledger 엔티티와 조회용 View 데이터클래스.
금액은 Decimal로 다루고, 응답 직렬화 시 숫자(float)와 표시용 문자열로 변환한다.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from core.utils.amount import format_amount


@dataclass(frozen=True)
class Person:
    """인물

    Attributes:
        id: 시스템 할당 ID (불변)
        name: 표시 이름
        color: 배지 색상 (hsl(...) 또는 #RRGGBB)
    """

    id: int
    name: str
    color: str

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> "Person":
        """DB 행(id, name, color)에서 생성"""
        return cls(id=int(row[0]), name=row[1], color=row[2])

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리 변환"""
        return {"id": self.id, "name": self.name, "color": self.color}


@dataclass(frozen=True)
class TransferRecord:
    """이체 기록 (from → to 채무)

    Attributes:
        id: 시스템 할당 ID (불변)
        amount: 금액 (양수, 소수점 3자리 이내)
        from_id: 보낸 사람 ID
        to_id: 받은 사람 ID
        date: 날짜 (YYYY-MM-DD)
        memo: 메모
        is_paid: 정산 여부 (표시용, 잔액 계산에 영향 없음)
    """

    id: int
    amount: Decimal
    from_id: int
    to_id: int
    date: str
    memo: str
    is_paid: bool = False

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> "TransferRecord":
        """DB 행(id, amount, fromId, toId, date, memo, isPaid)에서 생성"""
        return cls(
            id=int(row[0]),
            amount=Decimal(str(row[1])),
            from_id=int(row[2]),
            to_id=int(row[3]),
            date=row[4],
            memo=row[5],
            is_paid=bool(row[6]),
        )

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리 변환 (원본 컬럼명 사용)"""
        return {
            "id": self.id,
            "amount": float(self.amount),
            "fromId": self.from_id,
            "toId": self.to_id,
            "date": self.date,
            "memo": self.memo,
            "isPaid": self.is_paid,
        }


@dataclass(frozen=True)
class RecordView:
    """인물 이름/색상이 결합된 이체 기록"""

    id: int
    amount: Decimal
    from_id: int
    from_name: str
    from_color: str
    to_id: int
    to_name: str
    to_color: str
    date: str
    memo: str
    is_paid: bool

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> "RecordView":
        """JOIN 결과 행에서 생성

        컬럼 순서: id, amount, fromId, fromName, fromColor,
        toId, toName, toColor, date, memo, isPaid
        """
        return cls(
            id=int(row[0]),
            amount=Decimal(str(row[1])),
            from_id=int(row[2]),
            from_name=row[3],
            from_color=row[4],
            to_id=int(row[5]),
            to_name=row[6],
            to_color=row[7],
            date=row[8],
            memo=row[9],
            is_paid=bool(row[10]),
        )

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리 변환"""
        return {
            "id": self.id,
            "amount": float(self.amount),
            "amountDisplay": format_amount(self.amount),
            "fromId": self.from_id,
            "fromName": self.from_name,
            "fromColor": self.from_color,
            "toId": self.to_id,
            "toName": self.to_name,
            "toColor": self.to_color,
            "date": self.date,
            "memo": self.memo,
            "isPaid": self.is_paid,
        }


@dataclass(frozen=True)
class PersonBalance:
    """인물별 순잔액 (보낸 금액 - 받은 금액)"""

    id: int
    name: str
    color: str
    balance: Decimal

    @property
    def display(self) -> str:
        """표시용 금액 문자열"""
        return format_amount(self.balance)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리 변환"""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "balance": float(self.balance),
            "amount": self.display,
        }


@dataclass(frozen=True)
class LedgerView:
    """목록 화면 데이터 (인물, 잔액, 기록)"""

    people: list[Person] = field(default_factory=list)
    balances: list[PersonBalance] = field(default_factory=list)
    records: list[RecordView] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리 변환"""
        return {
            "people": [p.to_dict() for p in self.people],
            "balances": [b.to_dict() for b in self.balances],
            "records": [r.to_dict() for r in self.records],
        }
