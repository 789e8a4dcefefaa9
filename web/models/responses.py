"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
모든 변경 API는 success 플래그를 포함한다.
"""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    version: str = Field(..., description="애플리케이션 버전")


class SuccessResponse(BaseModel):
    """단순 성공 응답"""

    success: bool = Field(default=True, description="성공 여부")


class ErrorDetail(BaseModel):
    """에러 상세"""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    field: str | None = Field(default=None, description="문제가 된 필드")


class ErrorResponse(BaseModel):
    """실패 응답"""

    success: bool = Field(default=False, description="성공 여부")
    error: ErrorDetail = Field(..., description="에러 상세")


class PersonResponse(BaseModel):
    """인물 응답"""

    id: int = Field(..., description="인물 ID")
    name: str = Field(..., description="표시 이름")
    color: str = Field(..., description="배지 색상")


class PersonCreatedResponse(SuccessResponse):
    """인물 추가 응답"""

    person: PersonResponse


class RecordResponse(BaseModel):
    """기록 응답"""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="기록 ID")
    amount: float = Field(..., description="금액")
    from_id: int = Field(..., alias="fromId", description="보낸 사람 ID")
    to_id: int = Field(..., alias="toId", description="받은 사람 ID")
    date: str = Field(..., description="날짜")
    memo: str = Field(..., description="메모")
    is_paid: bool = Field(..., alias="isPaid", description="정산 여부")


class RecordCreatedResponse(SuccessResponse):
    """기록 추가 응답"""

    record: RecordResponse


class TogglePaidResponse(SuccessResponse):
    """정산 여부 반전 응답"""

    model_config = ConfigDict(populate_by_name=True)

    is_paid: bool = Field(..., alias="isPaid", description="변경 후 정산 여부")


class BalanceResponse(BaseModel):
    """인물별 잔액 응답"""

    id: int = Field(..., description="인물 ID")
    name: str = Field(..., description="표시 이름")
    color: str = Field(..., description="배지 색상")
    balance: float = Field(..., description="순잔액 (보낸 금액 - 받은 금액)")
    amount: str = Field(..., description="표시용 잔액 문자열")


class RecordViewResponse(BaseModel):
    """인물 정보가 결합된 기록 응답"""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="기록 ID")
    amount: float = Field(..., description="금액")
    amount_display: str = Field(..., alias="amountDisplay", description="표시용 금액")
    from_id: int = Field(..., alias="fromId", description="보낸 사람 ID")
    from_name: str = Field(..., alias="fromName", description="보낸 사람 이름")
    from_color: str = Field(..., alias="fromColor", description="보낸 사람 색상")
    to_id: int = Field(..., alias="toId", description="받은 사람 ID")
    to_name: str = Field(..., alias="toName", description="받은 사람 이름")
    to_color: str = Field(..., alias="toColor", description="받은 사람 색상")
    date: str = Field(..., description="날짜")
    memo: str = Field(..., description="메모")
    is_paid: bool = Field(..., alias="isPaid", description="정산 여부")


class LedgerViewResponse(BaseModel):
    """목록 화면 응답"""

    people: list[PersonResponse] = Field(default_factory=list, description="인물 목록")
    balances: list[BalanceResponse] = Field(default_factory=list, description="인물별 잔액")
    records: list[RecordViewResponse] = Field(default_factory=list, description="기록 목록")
