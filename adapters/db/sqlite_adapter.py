"""
SQLite 어댑터

WAL 모드로 SQLite 연결 관리.
프로세스 진입점(Web lifespan, 스크립트)이 연결을 열고 닫으며,
LedgerEngine에는 연결된 어댑터를 주입한다.

DB 예외(aiosqlite.Error)는 모두 StorageError로 변환하여 전달.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

import aiosqlite

from core.errors import StorageError

logger = logging.getLogger(__name__)


async def create_connection(
    db_path: Path | str,
    readonly: bool = False,
) -> aiosqlite.Connection:
    """SQLite 연결 생성 (WAL 모드)

    Args:
        db_path: DB 파일 경로
        readonly: 읽기 전용 여부

    Returns:
        aiosqlite 연결 객체

    Raises:
        StorageError: 연결 또는 PRAGMA 설정 실패
    """
    # pathlib.Path를 문자열로 변환
    db_path_str = str(db_path)

    try:
        if readonly:
            # 읽기 전용 모드 (파일이 없으면 실패)
            conn = await aiosqlite.connect(f"file:{db_path_str}?mode=ro", uri=True)
        else:
            # 디렉토리가 없으면 생성
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
            conn = await aiosqlite.connect(db_path_str)

            # WAL 모드 설정
            await conn.execute("PRAGMA journal_mode=WAL")

        # 동시 접근 설정
        await conn.execute("PRAGMA busy_timeout=30000")  # 30초 대기

        # 외래 키 제약 활성화
        await conn.execute("PRAGMA foreign_keys=ON")
    except (aiosqlite.Error, OSError) as e:
        raise StorageError(f"Failed to open database: {db_path_str}") from e

    logger.info(
        "SQLite 연결 생성",
        extra={"db_path": db_path_str, "readonly": readonly},
    )

    return conn


class SQLiteAdapter:
    """SQLite 어댑터

    WAL 모드로 SQLite 연결 관리.
    트랜잭션 컨텍스트 매니저 제공.

    Args:
        db_path: DB 파일 경로
        readonly: 읽기 전용 여부 (점검 스크립트용)

    사용 예시:
    ```python
    adapter = SQLiteAdapter(db_path)
    await adapter.connect()

    async with adapter.transaction():
        await adapter.execute("INSERT INTO ...")

    await adapter.close()
    ```
    """

    def __init__(self, db_path: Path | str, readonly: bool = False):
        self.db_path = Path(db_path)
        self.readonly = readonly
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_connected(self) -> bool:
        """연결 상태 확인"""
        return self._conn is not None

    async def connect(self) -> None:
        """연결 생성"""
        if self._conn is not None:
            return

        self._conn = await create_connection(self.db_path, self.readonly)

    async def close(self) -> None:
        """연결 종료"""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            logger.info("SQLite 연결 종료")

    def _require_conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise StorageError("Not connected to database")
        return self._conn

    async def execute(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> aiosqlite.Cursor:
        """SQL 실행"""
        conn = self._require_conn()

        try:
            if parameters:
                return await conn.execute(sql, parameters)
            return await conn.execute(sql)
        except aiosqlite.Error as e:
            raise StorageError(f"Database error: {e}") from e

    async def fetchone(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> tuple[Any, ...] | None:
        """단일 행 조회"""
        cursor = await self.execute(sql, parameters)
        try:
            return await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StorageError(f"Database error: {e}") from e

    async def fetchall(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> list[tuple[Any, ...]]:
        """전체 행 조회"""
        cursor = await self.execute(sql, parameters)
        try:
            return list(await cursor.fetchall())
        except aiosqlite.Error as e:
            raise StorageError(f"Database error: {e}") from e

    async def commit(self) -> None:
        """커밋"""
        if self._conn is not None:
            try:
                await self._conn.commit()
            except aiosqlite.Error as e:
                raise StorageError(f"Commit failed: {e}") from e

    async def rollback(self) -> None:
        """롤백"""
        if self._conn is not None:
            try:
                await self._conn.rollback()
            except aiosqlite.Error as e:
                raise StorageError(f"Rollback failed: {e}") from e

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """트랜잭션 컨텍스트 매니저

        BEGIN IMMEDIATE로 쓰기 락을 먼저 잡은 뒤 실행.
        성공 시 자동 커밋, 예외 시 자동 롤백.
        이미 트랜잭션 안이면 바깥 트랜잭션에 합류한다.

        사용 예시:
        ```python
        async with adapter.transaction():
            await adapter.execute("INSERT INTO ...")
            # 성공 시 자동 커밋
        ```
        """
        conn = self._require_conn()

        if conn.in_transaction:
            yield conn
            return

        await self.execute("BEGIN IMMEDIATE")
        try:
            yield conn
            await self.commit()
        except BaseException:
            await self.rollback()
            raise

    async def table_exists(self, table_name: str) -> bool:
        """테이블 존재 여부 확인"""
        result = await self.fetchone(
            "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
            (table_name,),
        )
        return result is not None

    # -------------------------------------------------------------------------
    # 컨텍스트 매니저
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
