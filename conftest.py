"""
Pytest 공통 fixture

테스트마다 인메모리 SQLite 엔진을 만들고, 테이블을 생성/삭제하여
깨끗한 환경을 보장합니다.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# 프로젝트 루트 경로 추가
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from database.goal_tracker import Base, GoalRepository, StorageGateway
from goals.models import Goal


class StepClock:
    """호출마다 1초씩 증가하는 시계"""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + timedelta(seconds=1)
        return now


@pytest.fixture(name="engine", scope="function")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    # 테스트 시작 전: 모든 테이블 생성
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        # 테스트 종료 후: 모든 테이블 삭제
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(name="session_factory")
def session_factory_fixture(engine):
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture(name="gateway")
def gateway_fixture(session_factory):
    return StorageGateway(session_factory)


@pytest.fixture(name="clock")
def clock_fixture():
    return StepClock(datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture(name="repository")
def repository_fixture(gateway, clock):
    return GoalRepository(gateway, clock=clock)


@pytest.fixture(name="goal")
def goal_fixture():
    return Goal(
        user_id="user-1",
        character_name="Zezima",
        target_attribute="Woodcutting",
        target_type="xp",
        target_value=1_000_000,
        target_date=datetime(2025, 1, 2, 12, 0, 0, tzinfo=timezone.utc),
        notification_channel_type="DISCORD",
        frequency="DAILY",
        current_progress=0,
    )
