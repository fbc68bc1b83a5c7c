"""
Goal 저장소

검증 → goal_id 생성 → 트랜잭션 구성 → 원자적 적용.
쓰기 전에 기존 레코드를 읽지 않습니다.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

from database.goal_tracker.gateway import StorageGateway
from database.goal_tracker.transaction import build_goal_creation_items, build_goal_progress_items
from goals.errors import StorageFailure
from goals.models import Goal
from goals.validation import validate_goal_for_creation, validate_not_null, validate_progress

logger = logging.getLogger(__name__)


def generate_goal_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GoalRepository:
    """목표 생성 및 진행도 기록"""

    def __init__(
        self,
        gateway: StorageGateway,
        id_factory: Callable[[], str] = generate_goal_id,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Args:
            gateway: 원자적 쓰기 게이트웨이
            id_factory: goal_id 생성 함수 (테스트에서 고정값 주입용)
            clock: 현재 시각 함수
        """
        self.gateway = gateway
        self.id_factory = id_factory
        self.clock = clock

    def create_goal(self, goal: Goal) -> Goal:
        """
        새 목표와 초기 진행도 레코드 3개를 함께 생성

        Returns:
            goal_id가 채워진 Goal

        Raises:
            InvalidArgument: 검증 실패 (저장소 호출 없음)
            StorageFailure: 원자적 쓰기 실패
        """
        validate_goal_for_creation(goal)

        logger.info(
            "Creating new goal for user: %s, character: %s, targetAttribute: %s",
            goal.user_id, goal.character_name, goal.target_attribute,
        )

        goal_id = self.id_factory()
        now = self.clock()
        items = build_goal_creation_items(goal, goal_id, now)
        logger.debug("Built creation transaction for goalId: %s, sort keys: %s", goal_id, [i.sk for i in items])

        try:
            self.gateway.apply_atomically(items)
        except StorageFailure:
            logger.error(
                "Failed to create goal for user: %s, character: %s",
                goal.user_id, goal.character_name,
            )
            raise

        logger.info(
            "Successfully created goal with id: %s for user: %s, character: %s",
            goal_id, goal.user_id, goal.character_name,
        )
        return goal.with_goal_id(goal_id)

    def record_progress(
        self,
        user_id: str,
        character_name: str,
        goal_id: str,
        progress_value: int,
    ) -> None:
        """
        새 타임라인 항목을 추가하고 latest 마커를 덮어씀

        earliest 마커와 메타데이터는 건드리지 않습니다.
        """
        validate_progress(user_id, character_name, goal_id, progress_value)

        now = self.clock()
        items = build_goal_progress_items(user_id, character_name, goal_id, progress_value, now)

        try:
            self.gateway.apply_atomically(items)
        except StorageFailure:
            logger.error(
                "Failed to create goal progress for user: %s, character: %s, goalId: %s",
                user_id, character_name, goal_id,
            )
            raise

        logger.info(
            "Successfully created goal progress for user: %s, character: %s, goalId: %s",
            user_id, character_name, goal_id,
        )

    def record_goal_progress(self, goal: Optional[Goal]) -> None:
        """Goal의 current_progress를 진행도로 기록"""
        validate_not_null(goal, "goal")
        self.record_progress(goal.user_id, goal.character_name, goal.goal_id, goal.current_progress)
