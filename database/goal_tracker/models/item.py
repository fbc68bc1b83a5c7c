"""
Goal Tracker - 단일 테이블 모델 정의
SQLAlchemy ORM을 사용한 goal_tracker_items 테이블 정의

메타데이터와 진행도 레코드가 (pk, sk) 복합 키를 공유하는 한 테이블에 저장됩니다.
"""

from sqlalchemy import Column, String, DateTime, BigInteger
from database.goal_tracker.models.base import Base


class ItemType:
    METADATA = "GOAL_METADATA"
    PROGRESS = "GOAL_PROGRESS"


class GoalTrackerItem(Base):
    """목표 메타데이터 / 진행도 레코드"""

    __tablename__ = "goal_tracker_items"

    pk = Column(String(255), primary_key=True, comment="파티션 키 (USER#{user_id})")
    sk = Column(String(512), primary_key=True, comment="정렬 키")
    item_type = Column(String(32), nullable=False, comment="레코드 종류")
    user_id = Column(String(255), nullable=False, comment="사용자 ID")
    character_name = Column(String(255), nullable=False, comment="캐릭터 이름")
    goal_id = Column(String(64), nullable=False, comment="목표 ID")

    # 메타데이터 전용
    target_attribute = Column(String(64), nullable=True, comment="스킬/활동")
    target_type = Column(String(32), nullable=True, comment="목표 종류 (xp, level 등)")
    target_value = Column(BigInteger, nullable=True, comment="목표 값")
    target_date = Column(DateTime(timezone=True), nullable=True, comment="목표 기한")
    notification_channel_type = Column(String(64), nullable=True, comment="알림 채널")
    frequency = Column(String(64), nullable=True, comment="확인 주기")

    # 진행도 전용
    progress_value = Column(BigInteger, nullable=True, comment="관측된 진행도")

    created_at = Column(DateTime(timezone=True), nullable=False, comment="기록 시각")
    updated_at = Column(DateTime(timezone=True), nullable=True, comment="수정 시각")

    def __repr__(self):
        return f"<GoalTrackerItem(pk='{self.pk}', sk='{self.sk}', item_type={self.item_type})>"
