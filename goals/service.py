"""
Goal 서비스

요청 형태를 저장소 호출로 변환하고, 필요하면 hiscores로 시작 진행도를 채웁니다.
검증과 원자성은 저장소(GoalRepository)가 담당합니다.
"""

import logging
from typing import Optional

from goals.errors import InvalidArgument
from goals.hiscores import HiscoresClient
from goals.models import Goal, GoalProgressEvent
from goals.validation import validate_goal_for_creation

logger = logging.getLogger(__name__)


class GoalService:
    """목표 생성 / 진행도 기록 오케스트레이션"""

    def __init__(self, repository, hiscores: Optional[HiscoresClient] = None):
        """
        Args:
            repository: GoalRepository (create_goal, record_progress 제공)
            hiscores: 시작 진행도 조회용 클라이언트 (없으면 0으로 시작)
        """
        self.repository = repository
        self.hiscores = hiscores

    def create_goal(self, goal: Optional[Goal]) -> Goal:
        """
        새 목표 생성

        current_progress가 비어 있으면 hiscores 조회값(또는 0)으로 채웁니다.
        조회는 다른 필드가 모두 유효할 때만 수행합니다.
        """
        if goal is None:
            raise InvalidArgument("goal", "goal cannot be null")

        if goal.current_progress is None:
            goal = goal.with_progress(self._starting_progress(goal))

        logger.info("Creating goal for user %s targeting %s", goal.user_id, goal.target_attribute)
        return self.repository.create_goal(goal)

    def record_progress(self, goal: Optional[Goal]) -> None:
        """Goal(user_id, character_name, goal_id, current_progress)로 진행도 기록"""
        if goal is None:
            raise InvalidArgument("goal", "goal cannot be null")

        logger.info("Creating goal progress for user %s goal %s", goal.user_id, goal.goal_id)
        self.repository.record_goal_progress(goal)

    def record_progress_event(self, event: Optional[GoalProgressEvent]) -> None:
        """진행도 이벤트 기록"""
        if event is None:
            raise InvalidArgument("event", "event cannot be null")

        logger.info("Creating goal progress for user %s goal %s", event.user_id, event.goal_id)
        self.repository.record_progress(
            event.user_id, event.character_name, event.goal_id, event.progress_value
        )

    def _starting_progress(self, goal: Goal) -> int:
        if self.hiscores is None:
            return 0
        # 외부 조회 전에 나머지 필드를 먼저 검증
        validate_goal_for_creation(goal.with_progress(0))
        return self.hiscores.get_character_standing(
            goal.character_name, goal.target_attribute, goal.target_type
        )
