"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
DB 연결은 lifespan에서 한 번 열고 LedgerEngine에 주입하며, 종료 시 닫는다.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import Depends, FastAPI

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import get_settings
from core.constants import APP_NAME, APP_VERSION
from core.ledger.engine import LedgerEngine
from core.ledger.schema import init_ledger_schema
from core.logging import setup_logging
from web.dependencies import get_engine
from web.errors import register_error_handlers
from web.models.responses import LedgerViewResponse
from web.routes import health, ledger, people, records

logger = logging.getLogger(__name__)


def create_app(
    db_path: Path | str | None = None,
    configure_logging: bool = True,
) -> FastAPI:
    """FastAPI 앱 생성

    Args:
        db_path: SQLite DB 경로 (None이면 settings.yaml 설정 사용)
        configure_logging: 시작 시 setup_logging 호출 여부 (테스트에서는 False)

    Returns:
        라우터와 예외 핸들러가 등록된 FastAPI 앱
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """앱 생명주기 관리"""
        settings = get_settings()

        if configure_logging:
            setup_logging("web", console_level=logging.getLevelName(settings.log_level))

        path = Path(db_path) if db_path is not None else settings.db_path

        # 시작 시 - DB 연결 및 스키마 자동 초기화
        db = SQLiteAdapter(path)
        await db.connect()
        try:
            await init_ledger_schema(db)
            app.state.engine = LedgerEngine(db)
            logger.info(f"Web: LedgerEngine 초기화 완료 ({path})")

            yield
        finally:
            # 종료 시 - 리소스 정리
            app.state.engine = None
            await db.close()
            logger.info("Web: DB 연결 종료 완료")

    app = FastAPI(
        title=f"{APP_NAME} API",
        description="공동 장부 (인물 간 채무 기록 및 잔액) API",
        version=APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    register_error_handlers(app)

    # =========================================================================
    # API 라우터 등록
    # =========================================================================

    app.include_router(health.router)
    app.include_router(people.router)
    app.include_router(records.router)
    app.include_router(ledger.router)

    @app.get("/", response_model=LedgerViewResponse, tags=["Ledger"])
    async def home(engine: LedgerEngine = Depends(get_engine)) -> dict[str, Any]:
        """홈 (목록 화면 데이터)"""
        view = await engine.list_view()
        return view.to_dict()

    return app


app = create_app()
