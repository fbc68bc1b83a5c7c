"""
파티션/정렬 키 생성 규칙

한 사용자의 모든 레코드는 하나의 파티션(USER#{user_id})에 모이고,
같은 목표의 메타데이터와 진행도 레코드는 정렬 키 상에서 인접합니다.

    metadata  GOAL#{character}#{goal_id}
    timeline  PROGRESS#{character}#{goal_id}#{timestamp}
    latest    PROGRESS#{character}#{goal_id}#LATEST
    earliest  PROGRESS#{character}#{goal_id}#EARLIEST
"""

from datetime import datetime, timezone

from goals.errors import InvalidArgument

DELIMITER = "#"

USER_PREFIX = "USER"
GOAL_PREFIX = "GOAL"
PROGRESS_PREFIX = "PROGRESS"
LATEST = "LATEST"
EARLIEST = "EARLIEST"

# 고정 폭이라 사전순 == 시간순
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def _part(value: str, field_name: str) -> str:
    if DELIMITER in value:
        raise InvalidArgument(field_name, f"{field_name} cannot contain '{DELIMITER}'")
    return value


def format_timestamp(timestamp: datetime) -> str:
    """UTC로 정규화한 고정 폭 타임스탬프 (naive datetime은 UTC로 간주)"""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def build_partition_key(user_id: str) -> str:
    return f"{USER_PREFIX}{DELIMITER}{_part(user_id, 'user_id')}"


def goal_prefix(character_name: str) -> str:
    """캐릭터의 모든 목표 메타데이터 정렬 키 접두사"""
    return f"{GOAL_PREFIX}{DELIMITER}{_part(character_name, 'character_name')}{DELIMITER}"


def progress_prefix(character_name: str, goal_id: str) -> str:
    """한 목표의 모든 진행도 레코드(타임라인 + 마커) 정렬 키 접두사"""
    return (
        f"{PROGRESS_PREFIX}{DELIMITER}{_part(character_name, 'character_name')}"
        f"{DELIMITER}{_part(goal_id, 'goal_id')}{DELIMITER}"
    )


def is_timeline_sort_key(sort_key: str) -> bool:
    """타임라인 항목 여부 (타임스탬프는 항상 숫자로 시작하므로 마커와 겹치지 않음)"""
    if not sort_key.startswith(f"{PROGRESS_PREFIX}{DELIMITER}"):
        return False
    return sort_key.rsplit(DELIMITER, 1)[-1][:1].isdigit()


def build_goal_metadata_sort_key(character_name: str, goal_id: str) -> str:
    return f"{goal_prefix(character_name)}{_part(goal_id, 'goal_id')}"


def build_goal_progress_sort_key(character_name: str, goal_id: str, timestamp: datetime) -> str:
    return f"{progress_prefix(character_name, goal_id)}{format_timestamp(timestamp)}"


def build_goal_latest_sort_key(character_name: str, goal_id: str) -> str:
    return f"{progress_prefix(character_name, goal_id)}{LATEST}"


def build_goal_earliest_sort_key(character_name: str, goal_id: str) -> str:
    return f"{progress_prefix(character_name, goal_id)}{EARLIEST}"
