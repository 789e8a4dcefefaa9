"""
장부 DB 점검

인물별 잔액/기록 수를 출력하고 정합성을 확인한다.
불일치가 있으면 종료 코드 1.

사용법:
    python -m scripts.check_ledger
    python -m scripts.check_ledger --db data/pay.db
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import get_settings
from core.errors import StorageError
from core.ledger.consistency import check_ledger
from core.ledger.person_store import PersonStore
from core.utils.amount import format_amount

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

LEDGER_TABLES = ("person", "record")


async def main(db_path: Path) -> int:
    """점검 실행

    Args:
        db_path: 점검할 SQLite DB 경로

    Returns:
        종료 코드 (0: 정상, 1: 불일치, 2: DB 열기 실패 또는 스키마 없음)
    """
    if not db_path.exists():
        logger.error(f"DB 파일이 없습니다: {db_path}")
        return 2

    logger.info(f"점검 시작: {db_path}")

    try:
        async with SQLiteAdapter(db_path, readonly=True) as db:
            missing = [t for t in LEDGER_TABLES if not await db.table_exists(t)]
            if missing:
                logger.error(f"장부 스키마가 없습니다 (테이블 누락: {', '.join(missing)})")
                return 2

            people = await PersonStore(db).list_all()
            report = await check_ledger(db)
            rows = await db.fetchall("SELECT fromId, toId FROM record")
    except StorageError as e:
        logger.error(f"DB 점검 실패: {e.message}")
        return 2

    record_counts: dict[int, int] = {}
    for from_id, to_id in rows:
        record_counts[from_id] = record_counts.get(from_id, 0) + 1
        record_counts[to_id] = record_counts.get(to_id, 0) + 1

    print(f"\n인물 {report.person_count}명, 기록 {report.record_count}건 (정산 {report.paid_count}건)")
    print("-" * 60)
    for person in people:
        balance = report.balances.get(person.id)
        print(
            f"  [{person.id:>4}] {person.name:<20} "
            f"잔액 {format_amount(balance) if balance is not None else '0':>14}  "
            f"기록 {record_counts.get(person.id, 0)}건"
        )
    print("-" * 60)

    if report.is_consistent:
        logger.info("정합성 확인 완료 ✓")
        return 0

    for issue in report.issues:
        target = f"record {issue.record_id}" if issue.record_id is not None else "ledger"
        logger.error(f"[{issue.issue_kind}] {target}: {issue.description}")
    return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="장부 DB 정합성 점검"
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="DB 파일 경로 (기본: settings.yaml의 database.path)"
    )
    args = parser.parse_args()

    path = args.db if args.db is not None else get_settings().db_path
    sys.exit(asyncio.run(main(path)))
