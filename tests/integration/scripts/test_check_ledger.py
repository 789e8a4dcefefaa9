"""scripts/check_ledger.py 테스트"""

from pathlib import Path

import pytest

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.engine import LedgerEngine
from scripts.check_ledger import main


class TestCheckLedgerScript:
    """점검 스크립트 종료 코드"""

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        """DB 파일이 없으면 2"""
        assert await main(tmp_path / "missing.db") == 2

    @pytest.mark.asyncio
    async def test_uninitialized_db(self, tmp_path: Path) -> None:
        """장부 테이블이 없는 DB는 2"""
        path = tmp_path / "empty.db"
        async with SQLiteAdapter(path) as db:
            await db.execute("CREATE TABLE other (id INTEGER PRIMARY KEY)")
            await db.commit()

        assert await main(path) == 2

    @pytest.mark.asyncio
    async def test_consistent_db(
        self,
        db: SQLiteAdapter,
        engine: LedgerEngine,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """정상 DB는 0, 인물별 잔액 출력"""
        alice = await engine.create_person("Alice")
        bob = await engine.create_person("Bob")
        await engine.create_record(alice.id, bob.id, "1500", "2024-01-01", "rent")

        exit_code = await main(db.db_path)

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Alice" in output
        assert "1,500" in output
        assert "-1,500" in output

    @pytest.mark.asyncio
    async def test_inconsistent_db(self, db: SQLiteAdapter, engine: LedgerEngine) -> None:
        """본인에게 보낸 기록이 있으면 1"""
        alice = await engine.create_person("Alice")
        await db.execute(
            "INSERT INTO record (amount, fromId, toId, date, memo, isPaid) VALUES (?, ?, ?, ?, ?, 0)",
            (10.0, alice.id, alice.id, "2024-01-01", "self"),
        )
        await db.commit()

        assert await main(db.db_path) == 1
