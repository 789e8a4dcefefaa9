"""
공동 장부 (Shared Ledger)

인물 간 채무 기록과 인물별 순잔액 계산.

사용 예시:
```python
from core.ledger import LedgerEngine, init_ledger_schema

async with SQLiteAdapter(db_path) as db:
    await init_ledger_schema(db)
    engine = LedgerEngine(db)

    alice = await engine.create_person("Alice")
    bob = await engine.create_person("Bob")
    await engine.create_record(alice.id, bob.id, "100", "2024-01-01", "dinner")

    balances = await engine.compute_balances()
    # {alice.id: Decimal('100.000'), bob.id: Decimal('-100.000')}
```
"""

from core.ledger.balance import build_person_balances, compute_balances, total_balance
from core.ledger.engine import LedgerEngine
from core.ledger.person_store import PersonStore
from core.ledger.record_store import RecordStore
from core.ledger.schema import init_ledger_schema

__all__ = [
    # 핵심 클래스
    "LedgerEngine",
    "PersonStore",
    "RecordStore",
    # 잔액 계산
    "compute_balances",
    "total_balance",
    "build_person_balances",
    # 스키마
    "init_ledger_schema",
]
