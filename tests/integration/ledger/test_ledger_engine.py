"""LedgerEngine 통합 테스트

실제 SQLite 파일(tmp_path)에 대해 인물/기록 CRUD와 잔액 계산을 확인.
"""

import asyncio
from decimal import Decimal

import pytest

from core.errors import InvalidReferenceError, NotFoundError, ValidationError
from core.ledger.balance import total_balance
from core.ledger.engine import LedgerEngine
from core.types import Person


async def _two_people(engine: LedgerEngine) -> tuple[Person, Person]:
    alice = await engine.create_person("Alice")
    bob = await engine.create_person("Bob")
    return alice, bob


class TestPersonOperations:
    """인물 추가/수정/조회"""

    @pytest.mark.asyncio
    async def test_create_person(self, engine: LedgerEngine) -> None:
        """인물 추가 시 ID와 색상 자동 할당"""
        person = await engine.create_person("  Alice ")

        assert person.id >= 1
        assert person.name == "Alice"
        assert person.color.startswith("hsl(")
        assert await engine.get_person(person.id) == person

    @pytest.mark.asyncio
    async def test_create_person_empty_name(self, engine: LedgerEngine) -> None:
        with pytest.raises(ValidationError):
            await engine.create_person("")

        assert await engine.list_people() == []

    @pytest.mark.asyncio
    async def test_list_people_in_creation_order(self, engine: LedgerEngine) -> None:
        for name in ("Carol", "Alice", "Bob"):
            await engine.create_person(name)

        people = await engine.list_people()

        assert [p.name for p in people] == ["Carol", "Alice", "Bob"]

    @pytest.mark.asyncio
    async def test_update_person(self, engine: LedgerEngine) -> None:
        """이름/색상 덮어쓰기, ID 유지"""
        person = await engine.create_person("Alice")

        await engine.update_person(person.id, "Alicia", "#1f6feb")

        updated = await engine.get_person(person.id)
        assert updated.id == person.id
        assert updated.name == "Alicia"
        assert updated.color == "#1f6feb"

    @pytest.mark.asyncio
    async def test_update_person_not_found(self, engine: LedgerEngine) -> None:
        with pytest.raises(NotFoundError):
            await engine.update_person(999, "Nobody", "#000000")

    @pytest.mark.asyncio
    async def test_update_person_invalid_color(self, engine: LedgerEngine) -> None:
        person = await engine.create_person("Alice")

        with pytest.raises(ValidationError):
            await engine.update_person(person.id, "Alice", "not-a-color")

        assert (await engine.get_person(person.id)).color == person.color

    @pytest.mark.asyncio
    async def test_get_person_not_found(self, engine: LedgerEngine) -> None:
        with pytest.raises(NotFoundError):
            await engine.get_person(1)


class TestRecordOperations:
    """기록 추가/수정/삭제/토글"""

    @pytest.mark.asyncio
    async def test_create_and_get(self, engine: LedgerEngine) -> None:
        """저장 후 조회 시 같은 값"""
        alice, bob = await _two_people(engine)

        record = await engine.create_record(alice.id, bob.id, "12.345", "2024-01-01", "dinner")

        stored = await engine.get_record(record.id)
        assert stored == record
        assert stored.amount == Decimal("12.345")
        assert stored.is_paid is False

    @pytest.mark.asyncio
    async def test_create_with_missing_person(self, engine: LedgerEngine) -> None:
        """존재하지 않는 인물 참조 시 아무것도 저장되지 않음"""
        alice = await engine.create_person("Alice")

        with pytest.raises(InvalidReferenceError) as exc_info:
            await engine.create_record(alice.id, 999, "10", "2024-01-01", "lunch")

        assert exc_info.value.field == "toId"
        assert await engine.list_records() == []

    @pytest.mark.asyncio
    async def test_create_too_large_amount(self, engine: LedgerEngine) -> None:
        """범위를 넘는 금액은 ValidationError, 저장 안 됨"""
        alice, bob = await _two_people(engine)

        with pytest.raises(ValidationError) as exc_info:
            await engine.create_record(alice.id, bob.id, "1e26", "2024-01-01", "big")

        assert exc_info.value.field == "amount"
        assert await engine.list_records() == []

    @pytest.mark.asyncio
    async def test_stored_amount_matches_created(self, engine: LedgerEngine) -> None:
        """큰 금액도 저장 후 같은 값으로 조회"""
        alice, bob = await _two_people(engine)

        created = await engine.create_record(
            alice.id, bob.id, "999999999999.999", "2024-01-01", "max"
        )

        assert (await engine.get_record(created.id)).amount == created.amount
        assert (await engine.compute_balances())[alice.id] == created.amount

    @pytest.mark.asyncio
    async def test_create_self_transfer(self, engine: LedgerEngine) -> None:
        alice = await engine.create_person("Alice")

        with pytest.raises(ValidationError):
            await engine.create_record(alice.id, alice.id, "10", "2024-01-01", "x")

    @pytest.mark.asyncio
    async def test_update_keeps_paid_flag(self, engine: LedgerEngine) -> None:
        """수정해도 정산 여부는 유지"""
        alice, bob = await _two_people(engine)
        record = await engine.create_record(alice.id, bob.id, "10", "2024-01-01", "taxi")
        await engine.toggle_paid(record.id)

        await engine.update_record(record.id, bob.id, alice.id, "20", "2024-01-02", "taxi back")

        stored = await engine.get_record(record.id)
        assert stored.from_id == bob.id
        assert stored.to_id == alice.id
        assert stored.amount == Decimal("20")
        assert stored.date == "2024-01-02"
        assert stored.memo == "taxi back"
        assert stored.is_paid is True

    @pytest.mark.asyncio
    async def test_update_not_found(self, engine: LedgerEngine) -> None:
        alice, bob = await _two_people(engine)

        with pytest.raises(NotFoundError):
            await engine.update_record(999, alice.id, bob.id, "1", "2024-01-01", "x")

    @pytest.mark.asyncio
    async def test_update_with_missing_person_changes_nothing(self, engine: LedgerEngine) -> None:
        alice, bob = await _two_people(engine)
        record = await engine.create_record(alice.id, bob.id, "10", "2024-01-01", "taxi")

        with pytest.raises(InvalidReferenceError):
            await engine.update_record(record.id, 999, bob.id, "50", "2024-01-01", "taxi")

        assert await engine.get_record(record.id) == record

    @pytest.mark.asyncio
    async def test_delete(self, engine: LedgerEngine) -> None:
        alice, bob = await _two_people(engine)
        record = await engine.create_record(alice.id, bob.id, "10", "2024-01-01", "x")

        await engine.delete_record(record.id)

        with pytest.raises(NotFoundError):
            await engine.get_record(record.id)

    @pytest.mark.asyncio
    async def test_delete_not_found(self, engine: LedgerEngine) -> None:
        with pytest.raises(NotFoundError):
            await engine.delete_record(1)

    @pytest.mark.asyncio
    async def test_toggle_twice_restores(self, engine: LedgerEngine) -> None:
        """두 번 토글하면 원래 값"""
        alice, bob = await _two_people(engine)
        record = await engine.create_record(alice.id, bob.id, "10", "2024-01-01", "x")

        assert await engine.toggle_paid(record.id) is True
        assert await engine.toggle_paid(record.id) is False
        assert (await engine.get_record(record.id)).is_paid is False

    @pytest.mark.asyncio
    async def test_toggle_not_found(self, engine: LedgerEngine) -> None:
        with pytest.raises(NotFoundError):
            await engine.toggle_paid(42)


class TestBalances:
    """잔액 계산"""

    @pytest.mark.asyncio
    async def test_scenario(self, engine: LedgerEngine) -> None:
        """A→B 100, B→A 40 → A=60, B=-60; 첫 기록 삭제 → A=-40, B=40"""
        alice, bob = await _two_people(engine)
        first = await engine.create_record(alice.id, bob.id, "100", "2024-01-01", "hotel")
        await engine.create_record(bob.id, alice.id, "40", "2024-01-02", "dinner")

        balances = await engine.compute_balances()
        assert balances == {alice.id: Decimal("60"), bob.id: Decimal("-60")}

        await engine.delete_record(first.id)

        balances = await engine.compute_balances()
        assert balances == {alice.id: Decimal("-40"), bob.id: Decimal("40")}

    @pytest.mark.asyncio
    async def test_paid_does_not_change_balance(self, engine: LedgerEngine) -> None:
        alice, bob = await _two_people(engine)
        record = await engine.create_record(alice.id, bob.id, "33.3", "2024-01-01", "x")
        before = await engine.compute_balances()

        await engine.toggle_paid(record.id)

        assert await engine.compute_balances() == before

    @pytest.mark.asyncio
    async def test_conservation_after_operations(self, engine: LedgerEngine) -> None:
        """여러 변경 후에도 잔액 합계 0"""
        alice, bob = await _two_people(engine)
        carol = await engine.create_person("Carol")
        r1 = await engine.create_record(alice.id, bob.id, "0.1", "2024-01-01", "a")
        await engine.create_record(bob.id, carol.id, "0.2", "2024-01-01", "b")
        r3 = await engine.create_record(carol.id, alice.id, "1234.567", "2024-01-01", "c")
        await engine.update_record(r1.id, alice.id, carol.id, "0.3", "2024-01-03", "a2")
        await engine.delete_record(r3.id)

        balances = await engine.compute_balances()

        assert total_balance(balances) == Decimal("0")
        assert balances[alice.id] == Decimal("0.3")
        assert balances[bob.id] == Decimal("0.2")
        assert balances[carol.id] == Decimal("-0.5")

    @pytest.mark.asyncio
    async def test_person_without_records(self, engine: LedgerEngine) -> None:
        alice, bob = await _two_people(engine)
        carol = await engine.create_person("Carol")
        await engine.create_record(alice.id, bob.id, "5", "2024-01-01", "x")

        balances = await engine.compute_balances()

        assert balances[carol.id] == Decimal("0")


class TestListView:
    """목록 화면 데이터"""

    @pytest.mark.asyncio
    async def test_list_view(self, engine: LedgerEngine) -> None:
        alice, bob = await _two_people(engine)
        await engine.create_record(alice.id, bob.id, "1500", "2024-01-01", "rent")

        view = await engine.list_view()

        assert [p.id for p in view.people] == [alice.id, bob.id]
        assert [b.display for b in view.balances] == ["1,500", "-1,500"]
        assert len(view.records) == 1
        assert view.records[0].from_name == "Alice"
        assert view.records[0].to_name == "Bob"
        assert view.records[0].from_color == alice.color

    @pytest.mark.asyncio
    async def test_view_reflects_renamed_person(self, engine: LedgerEngine) -> None:
        """인물 이름 변경은 기존 기록 표시에 반영"""
        alice, bob = await _two_people(engine)
        await engine.create_record(alice.id, bob.id, "1", "2024-01-01", "x")

        await engine.update_person(bob.id, "Robert", "#abcdef")

        records = await engine.list_records_with_people()
        assert records[0].to_name == "Robert"
        assert records[0].to_color == "#abcdef"

    @pytest.mark.asyncio
    async def test_concurrent_creates(self, engine: LedgerEngine) -> None:
        """동시 요청도 모두 반영되고 합계 0 유지"""
        alice, bob = await _two_people(engine)

        await asyncio.gather(*[
            engine.create_record(alice.id, bob.id, str(i), "2024-01-01", f"r{i}")
            for i in range(1, 11)
        ])

        balances = await engine.compute_balances()
        assert balances[alice.id] == Decimal("55")
        assert total_balance(balances) == Decimal("0")
