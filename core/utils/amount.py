"""
금액/날짜 유틸리티

- 입력값(문자열/숫자)을 Decimal 금액, ISO 날짜 문자열로 변환
- 금액 반올림 (소수점 3자리, 0에서 먼 쪽으로 반올림)
- 표시용 포맷 (en-US 천 단위 구분, 소수점 0~3자리)
"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from core.constants import Precision
from core.errors import ValidationError


def round_amount(value: Decimal) -> Decimal:
    """소수점 3자리로 반올림 (half away from zero)

    Example:
        >>> round_amount(Decimal("0.0005"))
        Decimal('0.001')
        >>> round_amount(Decimal("-0.0005"))
        Decimal('-0.001')
    """
    return value.quantize(Precision.AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)


def parse_amount(value: Any, field: str = "amount") -> Decimal:
    """금액 파싱 및 검증

    Args:
        value: 문자열, int, float, Decimal
        field: 에러 메시지용 필드명

    Returns:
        양수 Decimal (소수점 3자리 이내)

    Raises:
        ValidationError: 숫자가 아니거나, 0 이하이거나, 소수점 3자리 초과,
            또는 Precision.MAX_AMOUNT 초과
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required", field=field)

    if isinstance(value, Decimal):
        amount = value
    else:
        # float는 str 경유로 변환해야 이진 오차가 들어가지 않음
        text = str(value).strip()
        if not text:
            raise ValidationError(f"{field} is required", field=field)
        try:
            amount = Decimal(text)
        except InvalidOperation as e:
            raise ValidationError(f"{field} must be a number", field=field) from e

    if not amount.is_finite():
        raise ValidationError(f"{field} must be a finite number", field=field)

    if amount <= 0:
        raise ValidationError(f"{field} must be greater than 0", field=field)

    if amount > Precision.MAX_AMOUNT:
        raise ValidationError(
            f"{field} must not exceed {Precision.MAX_AMOUNT}", field=field
        )

    try:
        quantized = amount.quantize(Precision.AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValidationError(f"{field} is out of range", field=field) from e

    if amount != quantized:
        raise ValidationError(
            f"{field} allows at most {Precision.AMOUNT_DECIMALS} decimal places",
            field=field,
        )

    # DB에는 REAL로 저장되므로 float 변환 후에도 같은 값이어야 함
    if Decimal(str(float(amount))) != amount:
        raise ValidationError(
            f"{field} cannot be stored without losing precision", field=field
        )

    return amount


def parse_date(value: Any, field: str = "date") -> str:
    """날짜 파싱 및 검증

    Args:
        value: 날짜 문자열 (YYYY-MM-DD)
        field: 에러 메시지용 필드명

    Returns:
        정규화된 ISO 날짜 문자열

    Raises:
        ValidationError: 비어 있거나 형식이 잘못된 경우
    """
    text = "" if value is None else str(value).strip()
    if not text:
        raise ValidationError(f"{field} is required", field=field)

    try:
        parsed = datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValidationError(
            f"{field} must be a date in YYYY-MM-DD format", field=field
        ) from e

    return parsed.isoformat()


def format_amount(value: Decimal) -> str:
    """표시용 금액 포맷

    천 단위 구분 기호를 넣고 소수점은 최대 3자리, 뒤쪽 0은 제거.

    Example:
        >>> format_amount(Decimal("1234.5"))
        '1,234.5'
        >>> format_amount(Decimal("-40.000"))
        '-40'
    """
    rounded = round_amount(Decimal(value))
    if rounded == 0:
        return "0"

    text = f"{rounded:,.{Precision.AMOUNT_DECIMALS}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
