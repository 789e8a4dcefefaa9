"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from decimal import Decimal
from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → payledger/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent

APP_NAME: str = "PayLedger"
APP_VERSION: str = "1.0.0"


class Defaults:
    """기본값 상수"""

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8787

    LOG_LEVEL: str = "INFO"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"

    # DB 파일
    DB: Path = DATA_DIR / "pay.db"


class Precision:
    """금액 정밀도 (소수점 3자리)"""

    AMOUNT_DECIMALS: int = 3
    AMOUNT_QUANTUM: Decimal = Decimal("0.001")

    # REAL(float64)로 저장해도 값이 보존되는 범위 (정수부 12자리 + 소수부 3자리)
    MAX_AMOUNT: Decimal = Decimal("999999999999.999")


class ColorDefaults:
    """인물 배지 색상 기본값

    흰 글씨가 잘 보이도록 채도/명도를 고정하고 색상(hue)만 무작위로 선택.
    """

    SATURATION: int = 60  # %
    LIGHTNESS: int = 35  # %
    HUE_MAX: float = 360.0
