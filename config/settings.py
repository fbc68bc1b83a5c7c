"""
Goal Tracker 프로젝트 통합 설정 관리

Pydantic BaseSettings를 사용하여 타입 안전성과 자동 검증을 제공합니다.

사용 예:
    from config.settings import settings, db_config, hiscores_config

    # 타입 안전한 접근
    db_url = db_config.database_url
    timeout = hiscores_config.hiscores_timeout  # float 타입 보장
"""

from typing import Literal
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


class DatabaseConfig(BaseSettings):
    """Goal Tracker 저장소 설정"""

    goal_tracker_database_url: str = Field(
        default="sqlite:///./goal_tracker.db",
        description="SQLAlchemy 연결 URL"
    )
    goal_tracker_db_echo: bool = Field(default=False, description="SQL 쿼리 로깅 여부")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def database_url(self) -> str:
        """데이터베이스 연결 URL"""
        return self.goal_tracker_database_url

    @property
    def masked_database_url(self) -> str:
        """비밀번호를 가린 연결 URL (로그 출력용)"""
        return make_url(self.goal_tracker_database_url).render_as_string(hide_password=True)


class HiscoresConfig(BaseSettings):
    """OSRS Hiscores API 설정"""

    hiscores_enabled: bool = Field(
        default=False,
        description="목표 생성 시 hiscores로 시작 진행도를 채울지 여부"
    )
    hiscores_base_url: str = Field(
        default="https://secure.runescape.com/m=hiscore_oldschool",
        description="Hiscores API 기본 URL"
    )
    hiscores_timeout: float = Field(default=10.0, description="요청 타임아웃 (초)")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("hiscores_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v):
        """끝의 '/' 제거"""
        if isinstance(v, str):
            return v.rstrip("/")
        return v


class LoggingConfig(BaseSettings):
    """로깅 설정"""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="루트 로거 레벨"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


class Settings:
    """
    통합 설정 클래스

    모든 설정 카테고리를 하나로 묶어 제공합니다.
    """

    def __init__(self):
        """설정 초기화 - 앱 시작 시 모든 값 검증"""
        self.database = DatabaseConfig()
        self.hiscores = HiscoresConfig()
        self.logging = LoggingConfig()

    def describe(self) -> dict:
        """설정 요약 (로그 출력용)"""
        return {
            "database_url": self.database.masked_database_url,
            "hiscores_enabled": self.hiscores.hiscores_enabled,
            "hiscores_base_url": self.hiscores.hiscores_base_url,
            "log_level": self.logging.log_level,
        }


# 전역 설정 인스턴스 (앱 시작 시 한 번만 생성)
settings = Settings()

# 개별 설정 접근을 위한 편의 변수
db_config = settings.database
hiscores_config = settings.hiscores
logging_config = settings.logging
