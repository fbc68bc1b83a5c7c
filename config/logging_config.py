"""
로깅 설정

모든 모듈은 `logging.getLogger(__name__)`으로 로거를 얻고,
진입점(API lifespan 등)에서 configure_logging()을 한 번 호출합니다.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """
    루트 로거에 stream handler를 한 번만 설치

    Args:
        level: 로그 레벨 이름 (없으면 LoggingConfig.log_level 사용)
    """
    global _configured

    if level is None:
        from config.settings import logging_config
        level = logging_config.log_level

    root = logging.getLogger()
    root.setLevel(level.upper())

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True
