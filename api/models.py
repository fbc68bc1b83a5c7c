"""
Pydantic models for FastAPI endpoints

핵심 원칙:
1. 요청 JSON은 camelCase (userId, characterName ...)
2. 필드 누락/값 검증은 도메인 검증기(goals.validation)가 고정된 순서로 수행
   → 여기서는 모든 필드를 Optional로 받음
3. 타입 변환 실패만 pydantic이 거부
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from goals.models import Goal, GoalProgressEvent


class GoalCreationRequest(BaseModel):
    """목표 생성 요청 모델"""
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(default=None, alias="userId", description="사용자 ID")
    character_name: Optional[str] = Field(default=None, alias="characterName", description="캐릭터 이름")
    target_attribute: Optional[str] = Field(default=None, alias="targetAttribute", description="스킬/활동")
    target_type: Optional[str] = Field(default=None, alias="targetType", description="목표 종류 (xp, level 등)")
    target_value: Optional[int] = Field(default=None, alias="targetValue", description="목표 값")
    target_date: Optional[datetime] = Field(default=None, alias="targetDate", description="목표 기한")
    notification_channel_type: Optional[str] = Field(
        default=None, alias="notificationChannelType", description="알림 채널"
    )
    frequency: Optional[str] = Field(default=None, description="확인 주기")
    current_progress: Optional[int] = Field(
        default=None, alias="currentProgress", description="시작 진행도 (없으면 서비스가 채움)"
    )

    def to_goal(self) -> Goal:
        return Goal(
            user_id=self.user_id,
            character_name=self.character_name,
            target_attribute=self.target_attribute,
            target_type=self.target_type,
            target_value=self.target_value,
            target_date=self.target_date,
            notification_channel_type=self.notification_channel_type,
            frequency=self.frequency,
            current_progress=self.current_progress,
        )


class GoalProgressRequest(BaseModel):
    """진행도 기록 요청 모델"""
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(default=None, alias="userId", description="사용자 ID")
    character_name: Optional[str] = Field(default=None, alias="characterName", description="캐릭터 이름")
    goal_id: Optional[str] = Field(default=None, alias="goalId", description="목표 ID")
    progress_value: Optional[int] = Field(default=None, alias="progressValue", description="관측된 진행도")

    def to_event(self) -> GoalProgressEvent:
        return GoalProgressEvent(
            user_id=self.user_id,
            character_name=self.character_name,
            goal_id=self.goal_id,
            progress_value=self.progress_value,
        )


class GoalResponse(BaseModel):
    """생성된 목표 응답"""
    model_config = ConfigDict(populate_by_name=True)

    goal_id: str = Field(..., alias="goalId", description="목표 ID")
    user_id: str = Field(..., alias="userId", description="사용자 ID")
    character_name: str = Field(..., alias="characterName", description="캐릭터 이름")
    target_attribute: str = Field(..., alias="targetAttribute", description="스킬/활동")
    target_type: str = Field(..., alias="targetType", description="목표 종류")
    target_value: int = Field(..., alias="targetValue", description="목표 값")
    target_date: datetime = Field(..., alias="targetDate", description="목표 기한")
    notification_channel_type: Optional[str] = Field(default=None, alias="notificationChannelType")
    frequency: Optional[str] = Field(default=None)
    current_progress: int = Field(..., alias="currentProgress", description="시작 진행도")

    @classmethod
    def from_goal(cls, goal: Goal) -> "GoalResponse":
        return cls(
            goal_id=goal.goal_id,
            user_id=goal.user_id,
            character_name=goal.character_name,
            target_attribute=goal.target_attribute,
            target_type=goal.target_type,
            target_value=goal.target_value,
            target_date=goal.target_date,
            notification_channel_type=goal.notification_channel_type,
            frequency=goal.frequency,
            current_progress=goal.current_progress,
        )


class MessageResponse(BaseModel):
    """단순 메시지 응답"""
    message: str = Field(..., description="결과 메시지")


class ErrorResponse(BaseModel):
    """오류 응답"""
    error: str = Field(..., description="오류 메시지")
