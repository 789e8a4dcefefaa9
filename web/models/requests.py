"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증.
HTML 폼은 숫자도 문자열로 보내므로 ID는 int로 변환하고,
금액은 원본 그대로 코어에 넘겨 Decimal로 파싱한다.
"""

from pydantic import BaseModel, ConfigDict, Field


class PersonCreateRequest(BaseModel):
    """인물 추가 요청"""

    name: str = Field(..., description="표시 이름")

    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "Alice"}],
        }
    }


class PersonUpdateRequest(BaseModel):
    """인물 수정 요청"""

    name: str = Field(..., description="표시 이름")
    color: str = Field(..., description="배지 색상 (#RRGGBB 또는 hsl(...))")

    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "Alice", "color": "#1f6feb"}],
        }
    }


class RecordRequest(BaseModel):
    """기록 추가/수정 요청

    필드명은 기존 폼과 동일한 camelCase (fromId, toId).
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "fromId": 1,
                    "toId": 2,
                    "amount": "100",
                    "date": "2024-01-01",
                    "memo": "dinner",
                }
            ]
        },
    )

    from_id: int = Field(..., alias="fromId", description="보낸 사람 ID")
    to_id: int = Field(..., alias="toId", description="받은 사람 ID")
    amount: str | int | float = Field(..., description="금액 (양수, 소수점 3자리 이내)")
    date: str = Field(..., description="날짜 (YYYY-MM-DD)")
    memo: str = Field(..., description="메모")
