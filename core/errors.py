"""
에러 정의 모듈

Ledger 코어가 던지는 타입별 예외.
경계(Web)에서는 예외 타입에 따라 HTTP 상태 코드로 변환한다.

- ValidationError: 입력값 누락/형식 오류 (400)
- InvalidReferenceError: 존재하지 않는 인물 참조 (400)
- NotFoundError: 수정/삭제 대상이 없음 (404)
- StorageError: DB 장애 (500, 재시도 없음)
"""

from typing import Any


class LedgerError(Exception):
    """Ledger 예외 기본 클래스

    Args:
        message: 사용자에게 보여줄 메시지
        field: 문제가 된 입력 필드 (선택)
    """

    code: str = "LEDGER_ERROR"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        """응답용 딕셔너리 변환"""
        data: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.field is not None:
            data["field"] = self.field
        return data


class ValidationError(LedgerError):
    """입력값 검증 실패"""

    code = "VALIDATION_ERROR"


class InvalidReferenceError(LedgerError):
    """존재하지 않는 인물 ID 참조

    내장 ReferenceError와 이름이 겹치지 않도록 별도 이름 사용.
    """

    code = "REFERENCE_ERROR"

    def __init__(self, person_id: int, field: str | None = None):
        super().__init__(f"Person not found: {person_id}", field=field)
        self.person_id = person_id


class NotFoundError(LedgerError):
    """수정/삭제/토글 대상 없음"""

    code = "NOT_FOUND"

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class StorageError(LedgerError):
    """저장소(SQLite) 장애

    원본 예외는 __cause__로 연결된다.
    """

    code = "STORAGE_ERROR"
