"""
설정 로더

config/settings.yaml 로드 및 애플리케이션 설정 생성.
파일이 없으면 core.constants의 기본값을 사용한다.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.constants import PROJECT_ROOT, Defaults, Paths


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    db_path: Path
    web_host: str
    web_port: int
    log_level: str


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """최상위 섹션 조회 (없으면 빈 dict)"""
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigLoadError(f"settings.yaml의 '{name}' 섹션은 매핑이어야 합니다")
    return section


def _resolve_path(value: Any) -> Path:
    """상대 경로는 프로젝트 루트 기준으로 변환"""
    if not isinstance(value, str) or not value.strip():
        raise ConfigLoadError("database.path는 비어 있지 않은 문자열이어야 합니다")

    path = Path(value.strip()).expanduser()
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def load_config(path: Path | None = None) -> AppConfig:
    """settings.yaml 파일 로드

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        AppConfig 인스턴스

    Raises:
        ConfigLoadError: 파일 파싱 실패 또는 값 형식이 잘못된 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        return AppConfig(
            db_path=Paths.DB,
            web_host=Defaults.WEB_HOST,
            web_port=Defaults.WEB_PORT,
            log_level=Defaults.LOG_LEVEL,
        )

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    database = _section(data, "database")
    web = _section(data, "web")
    logging_config = _section(data, "logging")

    db_path = (
        _resolve_path(database["path"]) if "path" in database else Paths.DB
    )

    web_host = web.get("host", Defaults.WEB_HOST)
    if not isinstance(web_host, str) or not web_host:
        raise ConfigLoadError("web.host는 비어 있지 않은 문자열이어야 합니다")

    web_port = web.get("port", Defaults.WEB_PORT)
    if isinstance(web_port, bool) or not isinstance(web_port, int):
        raise ConfigLoadError(f"web.port는 정수여야 합니다: {web_port!r}")
    if not 0 < web_port < 65536:
        raise ConfigLoadError(f"web.port 범위 오류: {web_port}")

    log_level = str(logging_config.get("level", Defaults.LOG_LEVEL)).upper()
    if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ConfigLoadError(f"유효하지 않은 logging.level입니다: '{log_level}'")

    return AppConfig(
        db_path=db_path,
        web_host=web_host,
        web_port=web_port,
        log_level=log_level,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: AppConfig | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._config is None:
            type(self)._config = load_config(settings_path)

    @property
    def db_path(self) -> Path:
        """SQLite DB 경로"""
        assert self._config is not None
        return self._config.db_path

    @property
    def web_host(self) -> str:
        """Web 바인드 주소"""
        assert self._config is not None
        return self._config.web_host

    @property
    def web_port(self) -> int:
        """Web 포트"""
        assert self._config is not None
        return self._config.web_port

    @property
    def log_level(self) -> str:
        """로그 레벨 이름"""
        assert self._config is not None
        return self._config.log_level

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)
