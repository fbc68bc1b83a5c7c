"""
Goal Tracker Config Package

Pydantic 기반 통합 설정 관리

사용 예:
    from config import settings, db_config, hiscores_config

    # 타입 안전한 접근
    connection_url = db_config.database_url
    enabled = hiscores_config.hiscores_enabled  # bool 타입 보장
"""

from config.settings import (
    Settings,
    DatabaseConfig,
    HiscoresConfig,
    LoggingConfig,
    settings,
    db_config,
    hiscores_config,
    logging_config,
)
from config.logging_config import configure_logging

__all__ = [
    # 설정 클래스
    "Settings",
    "DatabaseConfig",
    "HiscoresConfig",
    "LoggingConfig",
    # 전역 인스턴스
    "settings",
    "db_config",
    "hiscores_config",
    "logging_config",
    # 로깅
    "configure_logging",
]

__version__ = "0.1.0"
