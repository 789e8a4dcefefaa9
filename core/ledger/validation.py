"""
입력 검증

Person/Record 저장 전 입력값을 한 번에 검증하고 정규화.
실패 시 ValidationError (필드명 포함).
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from core.errors import ValidationError
from core.utils.amount import parse_amount, parse_date
from core.utils.color import is_valid_color


@dataclass(frozen=True)
class RecordInput:
    """검증 완료된 기록 입력값"""

    from_id: int
    to_id: int
    amount: Decimal
    date: str
    memo: str


def require_text(value: Any, field: str) -> str:
    """비어 있지 않은 문자열 (앞뒤 공백 제거)"""
    text = "" if value is None else str(value).strip()
    if not text:
        raise ValidationError(f"{field} is required", field=field)
    return text


def validate_name(name: Any) -> str:
    """인물 이름 검증"""
    return require_text(name, "name")


def validate_color(color: Any) -> str:
    """배지 색상 검증 (#RRGGBB, #RGB, hsl(...))"""
    text = require_text(color, "color")
    if not is_valid_color(text):
        raise ValidationError(f"Invalid color: {text}", field="color")
    return text


def validate_id(value: Any, field: str) -> int:
    """정수 ID 검증 (1 이상)"""
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required", field=field)

    try:
        ident = int(str(value).strip())
    except ValueError as e:
        raise ValidationError(f"{field} must be an integer", field=field) from e

    if ident < 1:
        raise ValidationError(f"{field} must be a positive integer", field=field)
    return ident


def validate_record_input(
    from_id: Any,
    to_id: Any,
    amount: Any,
    date: Any,
    memo: Any,
) -> RecordInput:
    """기록 생성/수정 입력 검증

    Raises:
        ValidationError: 필드 누락/형식 오류, 본인에게 보내는 기록
    """
    sender = validate_id(from_id, "fromId")
    receiver = validate_id(to_id, "toId")

    if sender == receiver:
        raise ValidationError("fromId and toId must be different people", field="toId")

    return RecordInput(
        from_id=sender,
        to_id=receiver,
        amount=parse_amount(amount),
        date=parse_date(date),
        memo=require_text(memo, "memo"),
    )
