"""
예외 핸들러

코어 예외를 HTTP 응답으로 변환.

- ValidationError, InvalidReferenceError → 400
- NotFoundError → 404
- StorageError → 500
- 요청 스키마 검증 실패(RequestValidationError) → 400
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.errors import (
    InvalidReferenceError,
    LedgerError,
    NotFoundError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def status_for(exc: LedgerError) -> int:
    """예외 타입별 HTTP 상태 코드"""
    if isinstance(exc, (ValidationError, InvalidReferenceError)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, StorageError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


def error_content(code: str, message: str, field: str | None = None) -> dict:
    """실패 응답 본문"""
    error: dict = {"code": code, "message": message}
    if field is not None:
        error["field"] = field
    return {"success": False, "error": error}


def register_error_handlers(app: FastAPI) -> None:
    """앱에 예외 핸들러 등록"""

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError):
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(
                f"Storage failure on {request.url.path}: {exc.message}",
                exc_info=exc,
            )
        else:
            logger.warning(
                f"{exc.code} on {request.url.path}: {exc.message}",
                extra={"error_code": exc.code, "path": request.url.path},
            )

        # 저장소 내부 메시지는 노출하지 않음
        if isinstance(exc, StorageError):
            content = error_content(exc.code, "Storage failure")
        else:
            content = error_content(exc.code, exc.message, exc.field)
        return JSONResponse(status_code=status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ):
        errors = exc.errors()
        logger.warning(f"Validation error on {request.url.path}: {errors}")

        field = None
        message = "Invalid request"
        if errors:
            first = errors[0]
            loc = [str(part) for part in first.get("loc", ()) if part != "body"]
            field = ".".join(loc) or None
            message = first.get("msg", message)

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_content(ValidationError.code, message, field),
        )
