"""
Goal 도메인 모델

Goal은 불변 값 객체입니다. goal_id는 생성 시 한 번만 부여되며,
진행도 변경은 with_progress()처럼 새 인스턴스를 돌려주는 명시적 호출로만 합니다.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Goal:
    """캐릭터의 특정 스킬/활동 목표"""

    user_id: Optional[str] = None
    character_name: Optional[str] = None
    target_attribute: Optional[str] = None
    target_type: Optional[str] = None
    target_value: Optional[int] = None
    target_date: Optional[datetime] = None
    notification_channel_type: Optional[str] = None
    frequency: Optional[str] = None
    current_progress: Optional[int] = None
    goal_id: Optional[str] = None

    def with_goal_id(self, goal_id: str) -> "Goal":
        """goal_id가 채워진 사본 반환 (이미 부여된 경우 변경 불가)"""
        if self.goal_id is not None and self.goal_id != goal_id:
            raise ValueError("goal_id is immutable once assigned")
        return replace(self, goal_id=goal_id)

    def with_progress(self, current_progress: int) -> "Goal":
        """진행도가 갱신된 사본 반환"""
        return replace(self, current_progress=current_progress)

    def __repr__(self):
        return (
            f"<Goal(goal_id={self.goal_id}, user_id='{self.user_id}', "
            f"character_name='{self.character_name}', target={self.target_attribute}/"
            f"{self.target_type}={self.target_value})>"
        )


@dataclass(frozen=True)
class GoalProgressEvent:
    """진행도 기록 이벤트"""

    user_id: Optional[str] = None
    character_name: Optional[str] = None
    goal_id: Optional[str] = None
    progress_value: Optional[int] = None
