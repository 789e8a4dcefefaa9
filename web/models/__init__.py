"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    PersonCreateRequest,
    PersonUpdateRequest,
    RecordRequest,
)
from web.models.responses import (
    BalanceResponse,
    ErrorResponse,
    HealthResponse,
    LedgerViewResponse,
    PersonCreatedResponse,
    PersonResponse,
    RecordCreatedResponse,
    RecordResponse,
    RecordViewResponse,
    SuccessResponse,
    TogglePaidResponse,
)

__all__ = [
    # Requests
    "PersonCreateRequest",
    "PersonUpdateRequest",
    "RecordRequest",
    # Responses
    "BalanceResponse",
    "ErrorResponse",
    "HealthResponse",
    "LedgerViewResponse",
    "PersonCreatedResponse",
    "PersonResponse",
    "RecordCreatedResponse",
    "RecordResponse",
    "RecordViewResponse",
    "SuccessResponse",
    "TogglePaidResponse",
]
