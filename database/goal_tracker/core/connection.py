"""
데이터베이스 연결 및 세션 관리
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from database.goal_tracker.core.config import DATABASE_URL, DATABASE_ECHO

_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# 엔진 생성
engine = create_engine(
    DATABASE_URL,
    echo=DATABASE_ECHO,
    pool_pre_ping=True,  # 연결 유효성 검사
    connect_args=_connect_args,
)

# 세션 팩토리 생성
SessionLocal = sessionmaker(autoflush=False, bind=engine)


def get_db():
    """데이터베이스 세션 생성 (의존성 주입용)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
