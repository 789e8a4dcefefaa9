"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
LedgerEngine은 lifespan에서 한 번 생성되어 app.state에 보관된다.
"""

from fastapi import Request

from core.errors import StorageError
from core.ledger.engine import LedgerEngine


def get_engine(request: Request) -> LedgerEngine:
    """LedgerEngine 반환

    Raises:
        StorageError: lifespan이 아직 엔진을 준비하지 않은 경우
    """
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise StorageError("Ledger engine is not initialized")
    return engine
