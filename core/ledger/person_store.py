"""
Person 저장소

person 테이블 CRUD 처리.
삭제 기능은 제공하지 않음 (기록이 참조 중인 인물이 고아가 되는 것을 방지).
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Any

from core.errors import NotFoundError
from core.ledger.validation import validate_color, validate_name
from core.types import Person
from core.utils.color import generate_dark_color

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


class PersonStore:
    """Person 저장소

    Args:
        db: SQLite 어댑터
        rng: 색상 생성용 난수 생성기 (None이면 random 모듈)
    """

    def __init__(self, db: SQLiteAdapter, rng: random.Random | None = None):
        self.db = db
        self._rng = rng

    async def create(self, name: Any) -> Person:
        """인물 생성

        Args:
            name: 표시 이름

        Returns:
            생성된 Person (자동 생성 색상 포함)

        Raises:
            ValidationError: 이름이 비어 있는 경우
        """
        clean_name = validate_name(name)
        color = generate_dark_color(self._rng)

        async with self.db.transaction():
            cursor = await self.db.execute(
                "INSERT INTO person (name, color) VALUES (?, ?)",
                (clean_name, color),
            )
            person_id = cursor.lastrowid

        logger.info(
            f"Person created: {person_id}",
            extra={"person_id": person_id, "name": clean_name},
        )
        return Person(id=int(person_id), name=clean_name, color=color)

    async def update(self, person_id: int, name: Any, color: Any) -> None:
        """이름/색상 덮어쓰기

        Raises:
            ValidationError: 이름이 비었거나 색상 형식이 잘못된 경우
            NotFoundError: 인물이 없는 경우
        """
        clean_name = validate_name(name)
        clean_color = validate_color(color)

        async with self.db.transaction():
            cursor = await self.db.execute(
                "UPDATE person SET name = ?, color = ? WHERE id = ?",
                (clean_name, clean_color, person_id),
            )
            if cursor.rowcount == 0:
                raise NotFoundError("Person", person_id)

        logger.info(f"Person updated: {person_id}", extra={"person_id": person_id})

    async def get(self, person_id: int) -> Person:
        """인물 조회

        Raises:
            NotFoundError: 인물이 없는 경우
        """
        row = await self.db.fetchone(
            "SELECT id, name, color FROM person WHERE id = ?",
            (person_id,),
        )
        if row is None:
            raise NotFoundError("Person", person_id)
        return Person.from_row(row)

    async def exists(self, person_id: int) -> bool:
        """인물 존재 여부"""
        row = await self.db.fetchone(
            "SELECT 1 FROM person WHERE id = ?",
            (person_id,),
        )
        return row is not None

    async def list_all(self) -> list[Person]:
        """전체 인물 (ID 오름차순 = 등록 순)"""
        rows = await self.db.fetchall(
            "SELECT id, name, color FROM person ORDER BY id ASC"
        )
        return [Person.from_row(row) for row in rows]
