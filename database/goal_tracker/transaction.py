"""
트랜잭션 빌더

검증을 통과한 Goal과 타임스탬프로부터 한 번의 원자적 쓰기에 들어갈
레코드 목록을 만듭니다. I/O 없는 순수 함수들입니다.

- 생성: metadata + timeline + latest + earliest (4개)
- 진행도: timeline + latest (2개)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Tuple

from database.goal_tracker import keys
from database.goal_tracker.models.item import ItemType
from goals.models import Goal


@dataclass(frozen=True)
class PutItem:
    """(pk, sk)로 식별되는 레코드 하나의 쓰기"""

    pk: str
    sk: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    # True면 같은 키가 이미 있을 때 트랜잭션 전체가 실패
    must_not_exist: bool = False


def metadata_attributes(goal: Goal, goal_id: str, timestamp: datetime) -> Dict[str, Any]:
    """Goal → 메타데이터 레코드 컬럼"""
    return {
        "item_type": ItemType.METADATA,
        "user_id": goal.user_id,
        "character_name": goal.character_name,
        "goal_id": goal_id,
        "target_attribute": goal.target_attribute,
        "target_type": goal.target_type,
        "target_value": goal.target_value,
        "target_date": goal.target_date,
        "notification_channel_type": goal.notification_channel_type,
        "frequency": goal.frequency,
        "created_at": timestamp,
        "updated_at": timestamp,
    }


def progress_attributes(
    user_id: str,
    character_name: str,
    goal_id: str,
    progress_value: int,
    timestamp: datetime,
) -> Dict[str, Any]:
    """진행도 → 진행도 레코드 컬럼"""
    return {
        "item_type": ItemType.PROGRESS,
        "user_id": user_id,
        "character_name": character_name,
        "goal_id": goal_id,
        "progress_value": progress_value,
        "created_at": timestamp,
    }


def build_goal_creation_items(goal: Goal, goal_id: str, timestamp: datetime) -> Tuple[PutItem, ...]:
    """목표 생성 트랜잭션 (메타데이터 + 초기 진행도 마커 3개)"""
    pk = keys.build_partition_key(goal.user_id)
    progress = progress_attributes(
        goal.user_id, goal.character_name, goal_id, goal.current_progress, timestamp
    )

    return (
        PutItem(
            pk=pk,
            sk=keys.build_goal_metadata_sort_key(goal.character_name, goal_id),
            attributes=metadata_attributes(goal, goal_id, timestamp),
            must_not_exist=True,
        ),
        PutItem(
            pk=pk,
            sk=keys.build_goal_progress_sort_key(goal.character_name, goal_id, timestamp),
            attributes=dict(progress),
            must_not_exist=True,
        ),
        PutItem(
            pk=pk,
            sk=keys.build_goal_latest_sort_key(goal.character_name, goal_id),
            attributes=dict(progress),
        ),
        PutItem(
            pk=pk,
            sk=keys.build_goal_earliest_sort_key(goal.character_name, goal_id),
            attributes=dict(progress),
            must_not_exist=True,
        ),
    )


def build_goal_progress_items(
    user_id: str,
    character_name: str,
    goal_id: str,
    progress_value: int,
    timestamp: datetime,
) -> Tuple[PutItem, ...]:
    """진행도 기록 트랜잭션 (새 타임라인 항목 + latest 덮어쓰기)"""
    pk = keys.build_partition_key(user_id)
    progress = progress_attributes(user_id, character_name, goal_id, progress_value, timestamp)

    return (
        PutItem(
            pk=pk,
            sk=keys.build_goal_progress_sort_key(character_name, goal_id, timestamp),
            attributes=dict(progress),
            must_not_exist=True,
        ),
        PutItem(
            pk=pk,
            sk=keys.build_goal_latest_sort_key(character_name, goal_id),
            attributes=dict(progress),
        ),
    )
