"""
core/types.py 테스트

DB 행 변환 및 응답 딕셔너리 변환 확인
"""

from decimal import Decimal

import pytest

from core.types import LedgerView, Person, PersonBalance, RecordView, TransferRecord


class TestPerson:
    """Person 테스트"""

    def test_from_row(self) -> None:
        person = Person.from_row((1, "Alice", "hsl(10, 60%, 35%)"))

        assert person == Person(id=1, name="Alice", color="hsl(10, 60%, 35%)")

    def test_frozen(self) -> None:
        person = Person(id=1, name="Alice", color="#fff")

        with pytest.raises(AttributeError):
            person.name = "Bob"  # type: ignore

    def test_to_dict(self) -> None:
        assert Person(id=2, name="Bob", color="#000").to_dict() == {
            "id": 2,
            "name": "Bob",
            "color": "#000",
        }


class TestTransferRecord:
    """TransferRecord 테스트"""

    def test_from_row_converts_real_to_decimal(self) -> None:
        """REAL 컬럼 값은 str 경유로 Decimal 변환"""
        record = TransferRecord.from_row((5, 0.1, 1, 2, "2024-01-01", "coffee", 1))

        assert record.amount == Decimal("0.1")
        assert record.is_paid is True

    def test_default_unpaid(self) -> None:
        record = TransferRecord(
            id=1, amount=Decimal("1"), from_id=1, to_id=2, date="2024-01-01", memo="m"
        )

        assert record.is_paid is False

    def test_to_dict_uses_column_names(self) -> None:
        record = TransferRecord.from_row((5, 12.5, 1, 2, "2024-01-01", "lunch", 0))

        assert record.to_dict() == {
            "id": 5,
            "amount": 12.5,
            "fromId": 1,
            "toId": 2,
            "date": "2024-01-01",
            "memo": "lunch",
            "isPaid": False,
        }


class TestRecordView:
    """RecordView 테스트"""

    def test_from_row(self) -> None:
        row = (3, 1500.0, 1, "Alice", "#111", 2, "Bob", "#222", "2024-03-01", "rent", 0)

        view = RecordView.from_row(row)

        assert view.from_name == "Alice"
        assert view.to_color == "#222"
        assert view.to_dict()["amountDisplay"] == "1,500"


class TestPersonBalance:
    """PersonBalance 테스트"""

    def test_display(self) -> None:
        balance = PersonBalance(id=1, name="A", color="#fff", balance=Decimal("-60.000"))

        assert balance.display == "-60"
        assert balance.to_dict()["balance"] == -60.0
        assert balance.to_dict()["amount"] == "-60"


class TestLedgerView:
    """LedgerView 테스트"""

    def test_empty(self) -> None:
        assert LedgerView().to_dict() == {"people": [], "balances": [], "records": []}
