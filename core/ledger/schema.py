"""
Ledger 스키마 초기화

Web/스크립트 시작 시 자동으로 person, record 테이블과 View 생성.
CREATE IF NOT EXISTS / DROP VIEW IF EXISTS 패턴으로 안전하게 동작.

주의: 컬럼명(fromId, toId, isPaid)은 기존 pay.db와의 호환을 위해 camelCase 유지.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


async def init_ledger_schema(db: "SQLiteAdapter") -> None:
    """Ledger 스키마 초기화 (테이블 + View)

    이미 존재하는 경우 안전하게 건너뜀 (IF NOT EXISTS).

    Args:
        db: 연결된 SQLiteAdapter (쓰기 가능)
    """
    await _create_ledger_tables(db)
    await _create_ledger_views(db)
    await db.commit()
    logger.info("Ledger 스키마 초기화 완료")


async def _create_ledger_tables(db: "SQLiteAdapter") -> None:
    """Ledger 테이블 생성"""

    # person 테이블
    await db.execute("""
        CREATE TABLE IF NOT EXISTS person (
            id       INTEGER PRIMARY KEY AUTOINCREMENT,
            name     TEXT NOT NULL,
            color    TEXT NOT NULL
        )
    """)

    # record 테이블 (from → to 채무)
    await db.execute("""
        CREATE TABLE IF NOT EXISTS record (
            id       INTEGER PRIMARY KEY AUTOINCREMENT,
            amount   REAL NOT NULL,
            fromId   INTEGER NOT NULL REFERENCES person(id),
            toId     INTEGER NOT NULL REFERENCES person(id),
            date     TEXT NOT NULL,
            memo     TEXT NOT NULL,
            isPaid   INTEGER NOT NULL DEFAULT 0
        )
    """)

    await db.execute("CREATE INDEX IF NOT EXISTS idx_record_from ON record(fromId)")
    await db.execute("CREATE INDEX IF NOT EXISTS idx_record_to ON record(toId)")


async def _create_ledger_views(db: "SQLiteAdapter") -> None:
    """조회용 View 생성

    View는 항상 DROP 후 CREATE하여 스키마 변경 시에도 안전.
    """

    # 기록 + 양쪽 인물 이름/색상 (v_record_detail)
    await db.execute("DROP VIEW IF EXISTS v_record_detail")
    await db.execute("""
        CREATE VIEW v_record_detail AS
        SELECT
            r.id,
            r.amount,
            r.fromId,
            fp.name  AS fromName,
            fp.color AS fromColor,
            r.toId,
            tp.name  AS toName,
            tp.color AS toColor,
            r.date,
            r.memo,
            r.isPaid
        FROM record r
        INNER JOIN person fp ON fp.id = r.fromId
        INNER JOIN person tp ON tp.id = r.toId
    """)
