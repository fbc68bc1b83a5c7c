"""
데이터베이스 설정 관리

Pydantic BaseSettings 기반 설정(config.db_config)을 그대로 노출합니다.
"""

from config import db_config

DATABASE_URL = db_config.database_url
DATABASE_ECHO = db_config.goal_tracker_db_echo

__all__ = [
    "db_config",
    "DATABASE_URL",
    "DATABASE_ECHO",
]
